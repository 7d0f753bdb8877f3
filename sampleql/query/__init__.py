"""The query engine: pure, lazily evaluated queries over a Dataset."""
from __future__ import annotations

from sampleql.query.grouping import (
    city_income_intensity,
    customer_activity,
    price_band,
    products_by_category_and_stock,
    products_by_price_band,
)
from sampleql.query.joins import (
    suppliers_by_customer_grouped,
    suppliers_by_customer_nested,
)
from sampleql.query.ordering import first_order_dates, first_order_summaries
from sampleql.query.restriction import (
    customers_with_malformed_fields,
    customers_with_order_above,
    customers_with_total_above,
    has_malformed_fields,
    numbers_below,
    products_in_stock,
    where,
)
from sampleql.query.sequence import Grouping, Query, deferred, group_by

__all__ = [
    "Query",
    "Grouping",
    "deferred",
    "group_by",
    # Restriction
    "where",
    "numbers_below",
    "products_in_stock",
    "customers_with_total_above",
    "customers_with_order_above",
    "customers_with_malformed_fields",
    "has_malformed_fields",
    # Joins
    "suppliers_by_customer_nested",
    "suppliers_by_customer_grouped",
    # Ordering
    "first_order_dates",
    "first_order_summaries",
    # Grouping
    "products_by_category_and_stock",
    "price_band",
    "products_by_price_band",
    "city_income_intensity",
    "customer_activity",
]
