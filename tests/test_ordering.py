"""Unit tests for first-order projections and the summary sort order."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sampleql.query.ordering import (
    first_order_dates,
    first_order_summaries,
    summary_sort_key,
)
from sampleql.schema.results import CustomerOrderSummary
from tests.fixtures import make_customer, make_dataset, make_order


def test_first_order_dates_skip_customers_without_orders():
    ds = make_dataset(
        customers=[
            make_customer("A", orders=[make_order(10, "1997-03-01")]),
            make_customer("EMPTY"),
        ]
    )
    result = list(first_order_dates(ds))
    assert [r.customer_id for r in result] == ["A"]
    assert result[0].first_order_date == datetime(1997, 3, 1)


def test_first_order_is_first_stored_not_earliest():
    # Orders stored out of date order: the first stored one wins.
    ds = make_dataset(
        customers=[
            make_customer(
                "LATE",
                orders=[make_order(10, "1998-05-01"), make_order(20, "1996-01-01")],
            )
        ]
    )
    assert list(first_order_dates(ds))[0].first_order_date == datetime(1998, 5, 1)


def test_first_order_on_sample_follows_stored_order(dataset):
    dates = {r.customer_id: r.first_order_date for r in first_order_dates(dataset)}
    assert dates["ALFKI"] == datetime(1997, 8, 25)
    # LONEP's orders are not stored by date; its earliest order is from 1996.
    assert dates["LONEP"] == datetime(1997, 9, 9)
    assert "PARIS" not in dates
    assert "FISSA" not in dates


def test_summaries_sorted_by_year_month_total_desc_then_id():
    ds = make_dataset(
        customers=[
            make_customer("D", orders=[make_order(50, "1997-02-10")]),
            make_customer("C", orders=[make_order(50, "1997-02-20")]),
            make_customer("B", orders=[make_order(90, "1997-02-01")]),
            make_customer("A", orders=[make_order(10, "1998-01-05")]),
            make_customer("E", orders=[make_order(10, "1997-01-30")]),
        ]
    )
    result = list(first_order_summaries(ds))
    assert [r.customer_id for r in result] == ["E", "B", "C", "D", "A"]
    assert result[1].total_order_sum == Decimal(90)


def test_summaries_ordering_property_on_sample(dataset):
    result = list(first_order_summaries(dataset))
    assert len(result) == sum(1 for c in dataset.customers if c.orders)
    for prev, cur in zip(result, result[1:]):
        prev_ym = (prev.first_order_date.year, prev.first_order_date.month)
        cur_ym = (cur.first_order_date.year, cur.first_order_date.month)
        assert prev_ym <= cur_ym
        if prev_ym == cur_ym:
            assert prev.total_order_sum >= cur.total_order_sum
            if prev.total_order_sum == cur.total_order_sum:
                assert prev.customer_id <= cur.customer_id


def test_summaries_are_restartable(dataset):
    q = first_order_summaries(dataset)
    assert list(q) == list(q)


def test_summary_sort_key():
    summary = CustomerOrderSummary(
        customer_id="ALFKI",
        first_order_date=datetime(1997, 8, 25),
        total_order_sum=Decimal("4273.00"),
    )
    assert summary_sort_key(summary) == (1997, 8, Decimal("-4273.00"), "ALFKI")
