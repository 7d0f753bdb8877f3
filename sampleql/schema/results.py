"""Named result records produced by the query engine.

Each query projects into one of these immutable records instead of an ad-hoc
tuple or dict, so the presentation layer can render them field by field.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from sampleql.schema.entities import Customer, Product, Supplier


@dataclass(frozen=True)
class CustomerOrderTotal:
    """A customer id with the sum of its order totals."""

    customer_id: str
    total_order_sum: Decimal


@dataclass(frozen=True)
class CustomerSuppliers:
    """Suppliers located in a customer's city, found by filtering.

    Attributes:
        customer_id: The customer.
        supplier_names: Names of co-located suppliers; may be empty.
    """

    customer_id: str
    supplier_names: tuple[str, ...]


@dataclass(frozen=True)
class CustomerSupplierGroup:
    """A customer with the group of suppliers matched by a grouped join.

    Attributes:
        customer: The left-hand customer.
        suppliers: Suppliers whose ``(city, country)`` equals the customer's;
            may be empty.
    """

    customer: Customer
    suppliers: tuple[Supplier, ...]

    @property
    def supplier_names(self) -> tuple[str, ...]:
        return tuple(s.supplier_name for s in self.suppliers)


@dataclass(frozen=True)
class CustomerFirstOrder:
    customer_id: str
    first_order_date: datetime


@dataclass(frozen=True)
class CustomerOrderSummary:
    """First order date and order sum of one customer."""

    customer_id: str
    first_order_date: datetime
    total_order_sum: Decimal


@dataclass(frozen=True)
class StockGroup:
    """Products of one category sharing the same availability.

    Attributes:
        in_stock: True for products with ``units_in_stock > 0``.
        products: Products ordered by ascending unit price.
    """

    in_stock: bool
    products: tuple[Product, ...]


@dataclass(frozen=True)
class CategoryGroup:
    """A product category split by availability."""

    category: str
    availability: tuple[StockGroup, ...]


@dataclass(frozen=True)
class PriceBandGroup:
    band: str
    products: tuple[Product, ...]


@dataclass(frozen=True)
class CityActivity:
    """Average income and order intensity of the customers in one city.

    Attributes:
        city: City name.
        average_income: Average over customers of each customer's average
            order total.
        average_intensity: Average number of orders per customer.
    """

    city: str
    average_income: Decimal
    average_intensity: float


@dataclass(frozen=True)
class YearActivity:
    year: int
    activity: int


@dataclass(frozen=True)
class MonthActivity:
    month: int
    activity: int


@dataclass(frozen=True)
class MonthYearActivity:
    month: int
    year: int
    activity: int


@dataclass(frozen=True)
class CustomerActivity:
    """Order counts of one customer grouped three ways."""

    customer_id: str
    by_year: tuple[YearActivity, ...]
    by_month: tuple[MonthActivity, ...]
    by_month_and_year: tuple[MonthYearActivity, ...]
