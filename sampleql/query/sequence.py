"""Restartable lazy sequences and grouping helpers.

Python generators can be consumed only once, while every query in sampleql
must be re-enumerable and must recompute its result on each enumeration.
``Query`` wraps a zero-argument *source factory* instead of an iterator:
each ``iter(query)`` calls the factory again, so nothing is cached between
enumerations.

Usage::

    @deferred
    def cheap(products, limit):
        for p in products:
            if p.unit_price < limit:
                yield p

    q = cheap(dataset.products, 20)    # nothing evaluated yet
    list(q)                            # runs the generator
    list(q)                            # runs it again
"""
from __future__ import annotations

import functools
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)

#: A comparison bound: a plain number, or a callable read at iteration time.
Threshold = Union[Decimal, int, float, Callable[[], Union[Decimal, int, float]]]


class Query(Generic[T]):
    """A lazily evaluated, restartable sequence.

    Args:
        source: Factory returning a fresh iterable on every call.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Callable[[], Iterable[T]]) -> None:
        self._source = source

    def __iter__(self) -> Iterator[T]:
        return iter(self._source())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r})"

    # ------------------------------------------------------------------
    # Lazy composition
    # ------------------------------------------------------------------

    def where(self, predicate: Callable[[T], bool]) -> Query[T]:
        """Returns a query yielding only the items that satisfy ``predicate``."""
        return Query(lambda: (item for item in self if predicate(item)))

    def select(self, selector: Callable[[T], U]) -> Query[U]:
        """Returns a query yielding ``selector(item)`` for every item."""
        return Query(lambda: (selector(item) for item in self))

    # ------------------------------------------------------------------
    # Terminal operations
    # ------------------------------------------------------------------

    def to_list(self) -> list[T]:
        return list(self)

    def first(self) -> T | None:
        """Returns the first item, or ``None`` when the sequence is empty."""
        return next(iter(self), None)

    def any(self, predicate: Callable[[T], bool] | None = None) -> bool:
        """Returns True as soon as one item matches ``predicate``."""
        if predicate is None:
            return any(True for _ in self)
        return any(predicate(item) for item in self)


def deferred(fn: Callable[..., Iterable[T]]) -> Callable[..., Query[T]]:
    """Decorator that turns a generator function into a ``Query`` factory.

    Arguments are captured when the decorated function is called; the body
    runs each time the returned ``Query`` is iterated.
    """

    @functools.wraps(fn)
    def wrapper(*args, **kwargs) -> Query[T]:
        return Query(lambda: fn(*args, **kwargs))

    return wrapper


@dataclass(frozen=True)
class Grouping(Generic[K, T]):
    """A group key with the items that share it, in source order."""

    key: K
    items: tuple[T, ...]

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def group_by(items: Iterable[T], key: Callable[[T], K]) -> list[Grouping[K, T]]:
    """Groups ``items`` by ``key``.

    Groups come out in the order their key first appears, and items keep
    their source order within a group.
    """
    groups: dict[K, list[T]] = {}
    for item in items:
        groups.setdefault(key(item), []).append(item)
    return [Grouping(k, tuple(v)) for k, v in groups.items()]


def to_lookup(items: Iterable[T], key: Callable[[T], K]) -> dict[K, tuple[T, ...]]:
    """Builds a key -> items mapping; missing keys are simply absent."""
    return {g.key: g.items for g in group_by(items, key)}


def resolve(threshold: Threshold) -> Decimal | int | float:
    """Returns the current value of ``threshold``."""
    if callable(threshold):
        return threshold()
    return threshold
