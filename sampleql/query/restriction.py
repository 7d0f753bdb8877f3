"""Restriction queries: keep the items that satisfy a condition.

Every function returns a :class:`~sampleql.query.sequence.Query`; nothing is
evaluated until the result is iterated, and each iteration recomputes it.
"""
from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Iterator
from decimal import Decimal

from sampleql.query.sequence import Query, T, Threshold, deferred, resolve
from sampleql.schema.entities import Customer, Dataset, Product
from sampleql.schema.results import CustomerOrderTotal

_DIGITS = re.compile(r"[0-9]+")

#: First character of a phone number that carries an operator code.
PHONE_CODE_PREFIX = "("


@deferred
def where(items: Iterable[T], predicate: Callable[[T], bool]) -> Iterator[T]:
    """Yields the items that satisfy ``predicate``, in encounter order."""
    for item in items:
        if predicate(item):
            yield item


def numbers_below(numbers: Iterable[int], limit: int) -> Query[int]:
    """Numbers strictly less than ``limit``, in their original order."""
    return where(numbers, lambda n: n < limit)


def products_in_stock(dataset: Dataset) -> Query[Product]:
    return where(dataset.products, lambda p: p.units_in_stock > 0)


def order_total_sum(customer: Customer) -> Decimal:
    """Sum of the customer's order totals; ``0`` without orders."""
    return sum((o.total for o in customer.orders), Decimal(0))


@deferred
def customers_with_total_above(
    dataset: Dataset, threshold: Threshold
) -> Iterator[CustomerOrderTotal]:
    """Customers whose order sum is strictly greater than ``threshold``.

    ``threshold`` is read when the query is iterated, so passing a callable
    lets the same query object be enumerated again under a new value.
    """
    limit = resolve(threshold)
    for customer in dataset.customers:
        if order_total_sum(customer) > limit:
            yield CustomerOrderTotal(
                customer_id=customer.customer_id,
                total_order_sum=order_total_sum(customer),
            )


@deferred
def customers_with_order_above(
    dataset: Dataset, threshold: Threshold
) -> Iterator[Customer]:
    """Customers having at least one order above ``threshold``."""
    limit = resolve(threshold)
    for customer in dataset.customers:
        if any(o.total > limit for o in customer.orders):
            yield customer


def has_numeric_postal_code(customer: Customer) -> bool:
    return customer.postal_code is not None and bool(
        _DIGITS.fullmatch(customer.postal_code)
    )


def has_region(customer: Customer) -> bool:
    return bool(customer.region)


def has_phone_code(customer: Customer) -> bool:
    """True if the phone starts with an operator code such as ``(171)``.

    An empty phone has no code.
    """
    return customer.phone.startswith(PHONE_CODE_PREFIX)


def has_malformed_fields(customer: Customer) -> bool:
    return (
        not has_numeric_postal_code(customer)
        or not has_region(customer)
        or not has_phone_code(customer)
    )


def customers_with_malformed_fields(dataset: Dataset) -> Query[Customer]:
    """Customers with a non-digit postal code, no region, or no phone code."""
    return where(dataset.customers, has_malformed_fields)
