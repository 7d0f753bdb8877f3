"""Grouping exercises.

Co-location joins, nested product groupings, price bands and per-city or
per-customer order statistics.
"""
from __future__ import annotations

from sampleql.catalog.exercise import GROUPING, Exercise
from sampleql.config import ExerciseConfig
from sampleql.dump import ObjectDumper
from sampleql.query import (
    city_income_intensity,
    customer_activity,
    products_by_category_and_stock,
    products_by_price_band,
    suppliers_by_customer_grouped,
    suppliers_by_customer_nested,
)
from sampleql.schema.entities import Dataset


def co_located_suppliers(
    dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper
) -> None:
    dumper.heading("Customers and suppliers in the same city and country, without grouping:")
    for row in suppliers_by_customer_nested(dataset):
        dumper.write(
            f"CustomerId: {row.customer_id} Suppliers: {', '.join(row.supplier_names)}"
        )

    dumper.heading("Customers and suppliers in the same city and country, with grouping:")
    for group in suppliers_by_customer_grouped(dataset):
        dumper.write(
            f"CustomerId: {group.customer.customer_id} "
            f"Suppliers: {', '.join(group.supplier_names)}"
        )


def products_by_category(
    dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper
) -> None:
    dumper.heading("Products by category, then availability, ordered by price:")
    for category in products_by_category_and_stock(dataset):
        dumper.write(f"Category: {category.category}")
        for stock in category.availability:
            dumper.write(f"In stock: {stock.in_stock}", depth=1)
            dumper.write([p.unit_price for p in stock.products], depth=2)


def products_by_price(dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper) -> None:
    dumper.heading(
        f"Products by price band (cheap < {config.cheap_price} <= medium "
        f"< {config.expensive_price} <= expensive):"
    )
    for band in products_by_price_band(dataset, config.cheap_price, config.expensive_price):
        dumper.write(f"Band: {band.band}")
        dumper.write([p.unit_price for p in band.products], depth=1)


def city_statistics(dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper) -> None:
    dumper.heading("Average income and intensity by city:")
    dumper.write(city_income_intensity(dataset))


def client_activity(dataset: Dataset, config: ExerciseConfig, dumper: ObjectDumper) -> None:
    dumper.heading("Client activity by year, by month and by month and year:")
    dumper.write(customer_activity(dataset))


CASES: list[Exercise] = [
    Exercise(
        id="linq002",
        category=GROUPING,
        title="Co-located suppliers",
        description=(
            "Customers with the suppliers from the same city and country, "
            "with and without a grouped join."
        ),
        run=co_located_suppliers,
    ),
    Exercise(
        id="linq007",
        category=GROUPING,
        title="Products by category and stock",
        description=(
            "Products grouped by category, then by availability, ordered by price."
        ),
        run=products_by_category,
    ),
    Exercise(
        id="linq008",
        category=GROUPING,
        title="Products by price band",
        description="Products grouped into cheap, medium and expensive bands.",
        run=products_by_price,
    ),
    Exercise(
        id="linq009",
        category=GROUPING,
        title="City income and intensity",
        description="Average income and average order intensity by city.",
        run=city_statistics,
    ),
    Exercise(
        id="linq010",
        category=GROUPING,
        title="Client activity",
        description="Order counts per client by year, by month and by month and year.",
        run=client_activity,
    ),
]
