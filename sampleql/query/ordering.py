"""Projections over each customer's first order, plus their ordering.

"First order" is the first element of ``Customer.orders`` as stored, not the
order with the earliest date.  When the source records orders out of date
order the two differ; the stored order is kept on purpose.
"""
from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime
from decimal import Decimal

from sampleql.query.restriction import order_total_sum
from sampleql.query.sequence import Query, deferred
from sampleql.schema.entities import Customer, Dataset
from sampleql.schema.results import CustomerFirstOrder, CustomerOrderSummary


def first_order_date(customer: Customer) -> datetime:
    """Date of the first stored order; the customer must have orders."""
    return customer.orders[0].order_date


@deferred
def first_order_dates(dataset: Dataset) -> Iterator[CustomerFirstOrder]:
    """Date of the first stored order of every customer that has orders."""
    for customer in dataset.customers:
        if customer.has_orders:
            yield CustomerFirstOrder(
                customer_id=customer.customer_id,
                first_order_date=first_order_date(customer),
            )


def summary_sort_key(summary: CustomerOrderSummary) -> tuple[int, int, Decimal, str]:
    """Year asc, month asc, order sum desc, customer id asc."""
    return (
        summary.first_order_date.year,
        summary.first_order_date.month,
        -summary.total_order_sum,
        summary.customer_id,
    )


@deferred
def _summaries(dataset: Dataset) -> Iterator[CustomerOrderSummary]:
    for customer in dataset.customers:
        if customer.has_orders:
            yield CustomerOrderSummary(
                customer_id=customer.customer_id,
                first_order_date=first_order_date(customer),
                total_order_sum=order_total_sum(customer),
            )


def first_order_summaries(dataset: Dataset) -> Query[CustomerOrderSummary]:
    """First order date and order sum per customer, in summary sort order."""
    summaries = _summaries(dataset)
    return Query(lambda: sorted(summaries, key=summary_sort_key))
