"""Unit tests for the grouping queries."""

from __future__ import annotations

from collections import Counter
from decimal import Decimal

import pytest

from sampleql.query.grouping import (
    CHEAP,
    EXPENSIVE,
    MEDIUM,
    city_income_intensity,
    customer_activity,
    price_band,
    products_by_category_and_stock,
    products_by_price_band,
)
from tests.fixtures import make_customer, make_dataset, make_order, make_product

# ---------------------------------------------------------------------------
# Category / stock nesting
# ---------------------------------------------------------------------------


def test_products_by_category_and_stock_nesting():
    ds = make_dataset(
        products=[
            make_product(1, 30, "Beverages", units_in_stock=5),
            make_product(2, 10, "Seafood", units_in_stock=0),
            make_product(3, 20, "Beverages", units_in_stock=0),
            make_product(4, 15, "Beverages", units_in_stock=8),
        ]
    )
    result = list(products_by_category_and_stock(ds))
    assert [c.category for c in result] == ["Beverages", "Seafood"]

    beverages = result[0]
    assert [s.in_stock for s in beverages.availability] == [True, False]
    assert [p.product_id for p in beverages.availability[0].products] == [4, 1]
    assert [p.product_id for p in beverages.availability[1].products] == [3]

    seafood = result[1]
    assert [s.in_stock for s in seafood.availability] == [False]


def test_every_product_in_exactly_one_sorted_leaf(dataset):
    placed = Counter()
    for category in products_by_category_and_stock(dataset):
        for stock in category.availability:
            prices = [p.unit_price for p in stock.products]
            assert prices == sorted(prices)
            for p in stock.products:
                assert p.category == category.category
                assert (p.units_in_stock > 0) is stock.in_stock
                placed[p.product_id] += 1
    assert placed == Counter(p.product_id for p in dataset.products)


# ---------------------------------------------------------------------------
# Price bands
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "price, expected",
    [("10", CHEAP), ("19.99", CHEAP), ("20", MEDIUM), ("69.99", MEDIUM), ("70", EXPENSIVE)],
)
def test_price_band_boundaries(price, expected):
    assert price_band(Decimal(price), 20, 70) == expected


def test_products_by_price_band():
    ds = make_dataset(
        products=[make_product(i, price) for i, price in enumerate([10, 20, 69, 70, 100])]
    )
    result = {
        g.band: [p.unit_price for p in g.products]
        for g in products_by_price_band(ds, 20, 70)
    }
    assert result == {
        CHEAP: [Decimal(10)],
        MEDIUM: [Decimal(20), Decimal(69)],
        EXPENSIVE: [Decimal(70), Decimal(100)],
    }


def test_price_band_groups_in_first_appearance_order():
    ds = make_dataset(products=[make_product(1, 100), make_product(2, 5), make_product(3, 30)])
    assert [g.band for g in products_by_price_band(ds, 20, 70)] == [EXPENSIVE, CHEAP, MEDIUM]


def test_empty_band_is_absent():
    ds = make_dataset(products=[make_product(1, 5)])
    assert [g.band for g in products_by_price_band(ds, 20, 70)] == [CHEAP]


# ---------------------------------------------------------------------------
# City income and intensity
# ---------------------------------------------------------------------------


def test_city_income_is_average_of_customer_averages():
    ds = make_dataset(
        customers=[
            make_customer("A", city="Oslo", orders=[make_order(10), make_order(30)]),
            make_customer("B", city="Oslo", orders=[make_order(100), make_order(100)]),
        ]
    )
    [oslo] = list(city_income_intensity(ds))
    # (mean(10, 30) + mean(100, 100)) / 2
    assert oslo.average_income == Decimal(60)
    assert oslo.average_intensity == 2.0


def test_city_income_differs_from_flattened_average():
    ds = make_dataset(
        customers=[
            make_customer("A", city="Oslo", orders=[make_order(10)]),
            make_customer(
                "B", city="Oslo", orders=[make_order(100), make_order(100), make_order(100)]
            ),
        ]
    )
    [oslo] = list(city_income_intensity(ds))
    flattened = Decimal(310) / 4
    assert oslo.average_income == Decimal(55)
    assert oslo.average_income != flattened
    assert oslo.average_intensity == 2.0


def test_city_income_excludes_customers_without_orders():
    ds = make_dataset(
        customers=[
            make_customer("A", city="Oslo", orders=[make_order(40)]),
            make_customer("EMPTY", city="Oslo"),
            make_customer("GHOST", city="Bergen"),
        ]
    )
    result = list(city_income_intensity(ds))
    assert [c.city for c in result] == ["Oslo"]
    assert result[0].average_intensity == 1.0


def test_city_intensity_on_sample(dataset):
    cities = {c.city: c for c in city_income_intensity(dataset)}
    assert "Paris" not in cities
    assert cities["London"].average_intensity == pytest.approx(20 / 3)


# ---------------------------------------------------------------------------
# Activity statistics
# ---------------------------------------------------------------------------


def test_customer_activity_groupings():
    ds = make_dataset(
        customers=[
            make_customer(
                "A",
                orders=[
                    make_order(1, "1997-03-01"),
                    make_order(1, "1998-03-15"),
                    make_order(1, "1997-03-20"),
                    make_order(1, "1997-07-02"),
                ],
            ),
            make_customer("EMPTY"),
        ]
    )
    [a] = list(customer_activity(ds))
    assert a.customer_id == "A"
    assert [(y.year, y.activity) for y in a.by_year] == [(1997, 3), (1998, 1)]
    assert [(m.month, m.activity) for m in a.by_month] == [(3, 3), (7, 1)]
    assert [(m.month, m.year, m.activity) for m in a.by_month_and_year] == [
        (3, 1997, 2),
        (3, 1998, 1),
        (7, 1997, 1),
    ]


def test_activity_counts_add_up_on_sample(dataset):
    customers = {c.customer_id: c for c in dataset.customers}
    for activity in customer_activity(dataset):
        n = len(customers[activity.customer_id].orders)
        assert sum(y.activity for y in activity.by_year) == n
        assert sum(m.activity for m in activity.by_month) == n
        assert sum(m.activity for m in activity.by_month_and_year) == n
