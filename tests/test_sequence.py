"""Unit tests for the lazy Query abstraction and grouping helpers."""

from __future__ import annotations

from decimal import Decimal

from sampleql.query.sequence import Grouping, Query, deferred, group_by, resolve, to_lookup


def test_query_recomputes_on_every_iteration():
    calls = []

    def source():
        calls.append(1)
        return [1, 2, 3]

    q = Query(source)
    assert calls == []
    assert list(q) == [1, 2, 3]
    assert list(q) == [1, 2, 3]
    assert len(calls) == 2


def test_deferred_does_not_run_until_iterated():
    runs = []

    @deferred
    def numbers(limit):
        runs.append(limit)
        yield from range(limit)

    q = numbers(3)
    assert runs == []
    assert q.to_list() == [0, 1, 2]
    assert q.to_list() == [0, 1, 2]
    assert runs == [3, 3]


def test_where_and_select_are_lazy_and_composable():
    seen = []

    def source():
        for n in [5, 4, 1, 3]:
            seen.append(n)
            yield n

    q = Query(source).where(lambda n: n < 5).select(lambda n: n * 10)
    assert seen == []
    assert list(q) == [40, 10, 30]


def test_first_and_any():
    assert Query(lambda: [7, 8]).first() == 7
    assert Query(lambda: []).first() is None
    assert Query(lambda: [0]).any() is True
    assert Query(lambda: []).any() is False
    assert Query(lambda: [1, 2, 3]).any(lambda n: n > 2) is True


def test_any_short_circuits():
    seen = []

    def source():
        for n in [1, 20, 3]:
            seen.append(n)
            yield n

    assert Query(source).any(lambda n: n > 10)
    assert seen == [1, 20]


def test_group_by_keeps_first_appearance_order():
    groups = group_by(["b1", "a1", "b2", "c1", "a2"], lambda s: s[0])
    assert [g.key for g in groups] == ["b", "a", "c"]
    assert groups[0].items == ("b1", "b2")
    assert groups[1].items == ("a1", "a2")


def test_grouping_is_iterable_and_sized():
    g = Grouping(key="x", items=(1, 2))
    assert list(g) == [1, 2]
    assert len(g) == 2


def test_to_lookup_omits_missing_keys():
    lookup = to_lookup([("London", "UK"), ("Paris", "France"), ("London", "UK")], lambda t: t)
    assert len(lookup[("London", "UK")]) == 2
    assert ("Berlin", "Germany") not in lookup


def test_resolve_plain_value_and_callable():
    assert resolve(5) == 5
    assert resolve(lambda: Decimal("7.5")) == Decimal("7.5")
