"""Restriction exercises.

Filtering numbers and products, filtering customers on aggregates of their
orders or on malformed contact fields, and first-order projections.
"""
from __future__ import annotations

from sampleql.catalog.exercise import RESTRICTION, Exercise
from sampleql.config import ExerciseConfig
from sampleql.dump import ObjectDumper
from sampleql.query import (
    customers_with_malformed_fields,
    customers_with_order_above,
    customers_with_total_above,
    first_order_dates,
    first_order_summaries,
    numbers_below,
    products_in_stock,
)
from sampleql.schema.entities import Dataset


def low_numbers(dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper) -> None:
    dumper.heading(f"Numbers < {config.low_number_limit}:")
    dumper.write(numbers_below(config.numbers, config.low_number_limit))


def in_stock_products(dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper) -> None:
    dumper.heading("Products in stock:")
    dumper.write(products_in_stock(dataset))


def customers_above_total(
    dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper
) -> None:
    """Enumerates one query object once per configured threshold."""
    current = {"limit": config.order_total_thresholds[0]}
    customers = customers_with_total_above(dataset, lambda: current["limit"])
    for limit in config.order_total_thresholds:
        current["limit"] = limit
        dumper.heading(f"Customers with total order sum greater than {limit}:")
        dumper.write(customers)


def customers_with_large_order(
    dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper
) -> None:
    limit = config.large_order_threshold
    dumper.heading(f"Customers with an order greater than {limit}:")
    for customer in customers_with_order_above(dataset, limit):
        dumper.write(f"Customer: {customer.customer_id}, orders:")
        dumper.write([order.total for order in customer.orders], depth=1)


def first_orders(dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper) -> None:
    dumper.heading("Customers with the date of their first order:")
    dumper.write(first_order_dates(dataset))


def sorted_first_orders(
    dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper
) -> None:
    dumper.heading(
        "Customers with the date of their first order, by year, month, "
        "total order sum (descending) and customer id:"
    )
    dumper.write(first_order_summaries(dataset))


def malformed_customers(
    dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper
) -> None:
    dumper.heading(
        "Customers with a non-digit postal code, no region or no operator code:"
    )
    for c in customers_with_malformed_fields(dataset):
        dumper.write(f"Customer: {c.customer_id}, {c.postal_code}, {c.region}, {c.phone}")


CASES: list[Exercise] = [
    Exercise(
        id="linq1",
        category=RESTRICTION,
        title="Where - numbers",
        description="Numbers of an array that are less than the configured limit.",
        run=low_numbers,
    ),
    Exercise(
        id="linq2",
        category=RESTRICTION,
        title="Where - products in stock",
        description="Products that are currently in stock.",
        run=in_stock_products,
    ),
    Exercise(
        id="linq001",
        category=RESTRICTION,
        title="Customers by total order sum",
        description=(
            "Customers whose total order sum exceeds a threshold, "
            "re-enumerated for each configured threshold."
        ),
        run=customers_above_total,
    ),
    Exercise(
        id="linq003",
        category=RESTRICTION,
        title="Customers with a large order",
        description="Customers having at least one order above a threshold.",
        run=customers_with_large_order,
    ),
    Exercise(
        id="linq004",
        category=RESTRICTION,
        title="First order date",
        description="Customers with the date of their first order.",
        run=first_orders,
    ),
    Exercise(
        id="linq005",
        category=RESTRICTION,
        title="Sorted first order date",
        description=(
            "Customers with their first order date, sorted by year, month, "
            "total order sum and customer id."
        ),
        run=sorted_first_orders,
    ),
    Exercise(
        id="linq006",
        category=RESTRICTION,
        title="Malformed contact fields",
        description=(
            "Customers with a non-digit postal code, an empty region or a "
            "phone number without operator code."
        ),
        run=malformed_customers,
    ),
]
