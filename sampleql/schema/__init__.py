"""Entity models for the dataset and the result records queries produce."""
from __future__ import annotations

from sampleql.schema.entities import Customer, Dataset, Order, Product, Supplier
from sampleql.schema.results import (
    CategoryGroup,
    CityActivity,
    CustomerActivity,
    CustomerFirstOrder,
    CustomerOrderSummary,
    CustomerOrderTotal,
    CustomerSupplierGroup,
    CustomerSuppliers,
    MonthActivity,
    MonthYearActivity,
    PriceBandGroup,
    StockGroup,
    YearActivity,
)

__all__ = [
    "Customer",
    "Dataset",
    "Order",
    "Product",
    "Supplier",
    "CategoryGroup",
    "CityActivity",
    "CustomerActivity",
    "CustomerFirstOrder",
    "CustomerOrderSummary",
    "CustomerOrderTotal",
    "CustomerSupplierGroup",
    "CustomerSuppliers",
    "MonthActivity",
    "MonthYearActivity",
    "PriceBandGroup",
    "StockGroup",
    "YearActivity",
]
