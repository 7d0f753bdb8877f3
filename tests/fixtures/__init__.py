"""Test fixtures: literal builders for small, hand-checked datasets."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sampleql.schema.entities import Customer, Dataset, Order, Product, Supplier

_next_order_id = 20000


def make_order(total: str | int, date: str = "1997-01-15") -> Order:
    """Build an Order; ``date`` is ``YYYY-MM-DD``."""
    global _next_order_id
    _next_order_id += 1
    return Order(
        order_id=_next_order_id,
        order_date=datetime.fromisoformat(date),
        total=Decimal(str(total)),
    )


def make_customer(
    customer_id: str,
    city: str = "London",
    country: str = "UK",
    orders: list[Order] | None = None,
    region: str | None = "Greater London",
    postal_code: str | None = "12345",
    phone: str = "(171) 555-0000",
) -> Customer:
    return Customer(
        customer_id=customer_id,
        city=city,
        country=country,
        region=region,
        postal_code=postal_code,
        phone=phone,
        orders=tuple(orders or ()),
    )


def make_product(
    product_id: int,
    unit_price: str | int,
    category: str = "Beverages",
    units_in_stock: int = 10,
) -> Product:
    return Product(
        product_id=product_id,
        product_name=f"Product {product_id}",
        category=category,
        unit_price=Decimal(str(unit_price)),
        units_in_stock=units_in_stock,
    )


def make_supplier(name: str, city: str, country: str) -> Supplier:
    return Supplier(supplier_name=name, city=city, country=country)


def make_dataset(
    customers: list[Customer] | None = None,
    products: list[Product] | None = None,
    suppliers: list[Supplier] | None = None,
) -> Dataset:
    return Dataset(
        customers=tuple(customers or ()),
        products=tuple(products or ()),
        suppliers=tuple(suppliers or ()),
    )
