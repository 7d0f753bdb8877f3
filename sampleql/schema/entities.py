"""Pydantic models for the in-memory trading dataset.

The Dataset is produced once by the loader (:mod:`sampleql.data`) and is
read by every query.  All models are frozen; queries only ever project them.

Customer fields such as ``postal_code``, ``region`` and ``phone`` are kept
exactly as supplied.  Missing or malformed values are legitimate data that
the restriction queries classify, so no validator rejects them.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class Order(BaseModel):
    """A single order placed by a customer.

    Attributes:
        order_id: Order number.
        order_date: When the order was placed.
        total: Order amount.
    """

    model_config = _FROZEN

    order_id: int
    order_date: datetime
    total: Decimal


class Customer(BaseModel):
    """A customer together with the orders it owns.

    Attributes:
        customer_id: Short customer code (e.g. ``'ALFKI'``).
        company_name: Registered company name.
        address: Street address.
        city: City name.
        region: Region / state, absent for many countries.
        postal_code: Postal code as written; may be non-numeric or absent.
        country: Country name.
        phone: Phone number as written; may lack the ``(code)`` prefix.
        fax: Fax number, often empty.
        orders: Orders in the order they were recorded.
    """

    model_config = _FROZEN

    customer_id: str
    company_name: str = ""
    address: str = ""
    city: str
    region: str | None = None
    postal_code: str | None = None
    country: str
    phone: str = ""
    fax: str = ""
    orders: tuple[Order, ...] = ()

    @property
    def has_orders(self) -> bool:
        """Returns True if the customer placed at least one order."""
        return len(self.orders) > 0


class Product(BaseModel):
    """A catalogue product.

    Attributes:
        product_id: Product number.
        product_name: Display name.
        category: Category name (e.g. ``'Beverages'``).
        unit_price: Price per unit.
        units_in_stock: Units currently in stock; never negative.
    """

    model_config = _FROZEN

    product_id: int
    product_name: str
    category: str
    unit_price: Decimal
    units_in_stock: int = Field(ge=0)


class Supplier(BaseModel):
    """A product supplier."""

    model_config = _FROZEN

    supplier_name: str
    address: str = ""
    city: str
    country: str


class Dataset(BaseModel):
    """The complete read-only dataset shared by all queries.

    Attributes:
        customers: All customers, each owning its orders.
        products: All products.
        suppliers: All suppliers.
    """

    model_config = _FROZEN

    customers: tuple[Customer, ...]
    products: tuple[Product, ...]
    suppliers: tuple[Supplier, ...]
