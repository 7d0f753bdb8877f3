"""Grouping queries over products and customer orders.

Groups appear in the order their key is first met in the source and keep
their elements in source order, unless a query sorts them explicitly.
"""
from __future__ import annotations

import statistics
from collections.abc import Iterator
from decimal import Decimal

from sampleql.query.sequence import Threshold, deferred, group_by, resolve
from sampleql.schema.entities import Customer, Dataset
from sampleql.schema.results import (
    CategoryGroup,
    CityActivity,
    CustomerActivity,
    MonthActivity,
    MonthYearActivity,
    PriceBandGroup,
    StockGroup,
    YearActivity,
)

CHEAP = "cheap"
MEDIUM = "medium"
EXPENSIVE = "expensive"


@deferred
def products_by_category_and_stock(dataset: Dataset) -> Iterator[CategoryGroup]:
    """Products grouped by category, then by availability, sorted by price."""
    for category in group_by(dataset.products, lambda p: p.category):
        availability = tuple(
            StockGroup(
                in_stock=stock.key,
                products=tuple(sorted(stock.items, key=lambda p: p.unit_price)),
            )
            for stock in group_by(category.items, lambda p: p.units_in_stock > 0)
        )
        yield CategoryGroup(category=category.key, availability=availability)


def price_band(price: Decimal, low: Decimal | int, high: Decimal | int) -> str:
    """Classifies ``price`` as cheap (< low), medium (< high) or expensive."""
    if price < low:
        return CHEAP
    if price < high:
        return MEDIUM
    return EXPENSIVE


@deferred
def products_by_price_band(
    dataset: Dataset, low: Threshold, high: Threshold
) -> Iterator[PriceBandGroup]:
    low_value, high_value = resolve(low), resolve(high)
    for band in group_by(
        dataset.products, lambda p: price_band(p.unit_price, low_value, high_value)
    ):
        yield PriceBandGroup(band=band.key, products=band.items)


def average_order_total(customer: Customer) -> Decimal:
    return statistics.mean(o.total for o in customer.orders)


@deferred
def city_income_intensity(dataset: Dataset) -> Iterator[CityActivity]:
    """Average income and order intensity per city.

    Both figures are averaged per customer first: ``average_income`` is the
    mean of every customer's mean order total, not the mean over all orders
    of the city.  Customers without orders are left out.
    """
    active = [c for c in dataset.customers if c.has_orders]
    for city in group_by(active, lambda c: c.city):
        yield CityActivity(
            city=city.key,
            average_income=statistics.mean(average_order_total(c) for c in city),
            average_intensity=statistics.fmean(len(c.orders) for c in city),
        )


def _activity_of(customer: Customer) -> CustomerActivity:
    dates = [o.order_date for o in customer.orders]
    return CustomerActivity(
        customer_id=customer.customer_id,
        by_year=tuple(
            YearActivity(year=g.key, activity=len(g))
            for g in group_by(dates, lambda d: d.year)
        ),
        by_month=tuple(
            MonthActivity(month=g.key, activity=len(g))
            for g in group_by(dates, lambda d: d.month)
        ),
        by_month_and_year=tuple(
            MonthYearActivity(month=g.key[0], year=g.key[1], activity=len(g))
            for g in group_by(dates, lambda d: (d.month, d.year))
        ),
    )


@deferred
def customer_activity(dataset: Dataset) -> Iterator[CustomerActivity]:
    """Order counts per year, per month and per (month, year) of each customer."""
    for customer in dataset.customers:
        if customer.has_orders:
            yield _activity_of(customer)
