"""sampleql – query exercises over an in-memory trading dataset.

Filter, join, group, aggregate and sort customers, orders, products and
suppliers with lazily evaluated, restartable queries.

Public API
----------
``load_dataset``
    Load the packaged sample Dataset (or a JSON file of the same shape).

``run_exercise``
    Run one catalogued exercise and render its result to a stream.

Query engine
------------
Every query in :mod:`sampleql.query` is a pure function returning a
``Query``: nothing runs until the result is iterated, and every iteration
recomputes it::

    from sampleql import customers_with_total_above, load_dataset

    dataset = load_dataset()
    for row in customers_with_total_above(dataset, 5000):
        print(row.customer_id, row.total_order_sum)

Re-exported types
-----------------
Dataset entities, result records, ``ExerciseConfig``, ``ObjectDumper``, the
exercise registry and all error classes.
"""

from __future__ import annotations

from typing import TextIO

from sampleql.catalog import ALL_EXERCISES, REGISTRY, Exercise, ExerciseRegistry
from sampleql.config import ExerciseConfig
from sampleql.data import load_dataset, parse_dataset
from sampleql.dump import ObjectDumper
from sampleql.errors import (
    ConfigError,
    DatasetError,
    SampleQLError,
    UnknownExerciseError,
)
from sampleql.query import (
    Grouping,
    Query,
    city_income_intensity,
    customer_activity,
    customers_with_malformed_fields,
    customers_with_order_above,
    customers_with_total_above,
    deferred,
    first_order_dates,
    first_order_summaries,
    group_by,
    numbers_below,
    price_band,
    products_by_category_and_stock,
    products_by_price_band,
    products_in_stock,
    suppliers_by_customer_grouped,
    suppliers_by_customer_nested,
    where,
)
from sampleql.schema import (
    CategoryGroup,
    CityActivity,
    Customer,
    CustomerActivity,
    CustomerFirstOrder,
    CustomerOrderSummary,
    CustomerOrderTotal,
    CustomerSupplierGroup,
    CustomerSuppliers,
    Dataset,
    MonthActivity,
    MonthYearActivity,
    Order,
    PriceBandGroup,
    Product,
    StockGroup,
    Supplier,
    YearActivity,
)

__all__ = [
    # Entry points
    "load_dataset",
    "parse_dataset",
    "run_exercise",
    # Entities
    "Dataset",
    "Customer",
    "Order",
    "Product",
    "Supplier",
    # Result records
    "CustomerOrderTotal",
    "CustomerSuppliers",
    "CustomerSupplierGroup",
    "CustomerFirstOrder",
    "CustomerOrderSummary",
    "CategoryGroup",
    "StockGroup",
    "PriceBandGroup",
    "CityActivity",
    "CustomerActivity",
    "YearActivity",
    "MonthActivity",
    "MonthYearActivity",
    # Query engine
    "Query",
    "Grouping",
    "deferred",
    "group_by",
    "where",
    "numbers_below",
    "products_in_stock",
    "customers_with_total_above",
    "customers_with_order_above",
    "customers_with_malformed_fields",
    "suppliers_by_customer_nested",
    "suppliers_by_customer_grouped",
    "first_order_dates",
    "first_order_summaries",
    "products_by_category_and_stock",
    "price_band",
    "products_by_price_band",
    "city_income_intensity",
    "customer_activity",
    # Catalog
    "ALL_EXERCISES",
    "REGISTRY",
    "Exercise",
    "ExerciseRegistry",
    "ExerciseConfig",
    "ObjectDumper",
    # Errors
    "SampleQLError",
    "DatasetError",
    "ConfigError",
    "UnknownExerciseError",
]


def run_exercise(
    exercise_id: str,
    dataset: Dataset | None = None,
    config: ExerciseConfig | None = None,
    stream: TextIO | None = None,
) -> None:
    """Run a catalogued exercise and write its output.

    Args:
        exercise_id: Registered id, e.g. ``"linq005"``.
        dataset: Dataset to query; defaults to the one named by
            ``config.data_path`` (the packaged sample when unset).
        config: Optional thresholds; defaults to ``ExerciseConfig()``.
        stream: Destination; defaults to ``sys.stdout``.

    Raises:
        UnknownExerciseError: If ``exercise_id`` is not registered.
        DatasetError: If the dataset has to be loaded and cannot be.
    """
    if config is None:
        config = ExerciseConfig()
    exercise = REGISTRY.get(exercise_id)
    if dataset is None:
        dataset = load_dataset(config.data_path)
    exercise.run(dataset, config, ObjectDumper(stream))
