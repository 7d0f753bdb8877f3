"""Plain-text rendering of query results.

``ObjectDumper`` writes any value an exercise produces: scalars, result
records (dataclasses), dataset entities (pydantic models), groupings and
arbitrarily nested sequences.  Scalar fields of a record are written on one
line; sequence-valued fields are expanded underneath, one indent deeper::

    customer_id=ALFKI  first_order_date=1997-08-25 00:00:00
    customer_id=AROUT  first_order_date=1996-11-15 00:00:00

Records nested deeper than ``max_depth`` are elided as ``...``.
"""
from __future__ import annotations

import dataclasses
import sys
from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal
from typing import Any, TextIO

from pydantic import BaseModel

_SCALARS = (str, bytes, int, float, bool, Decimal, date, datetime)


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, _SCALARS)


def record_fields(value: Any) -> list[tuple[str, Any]] | None:
    """Returns ``(name, value)`` pairs of a record, or ``None`` for non-records."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
    if isinstance(value, BaseModel):
        return [(name, getattr(value, name)) for name in type(value).model_fields]
    return None


def format_scalar(value: Any) -> str:
    if value is None:
        return "null"
    return str(value)


class ObjectDumper:
    """Writes values to a text stream.

    Args:
        stream: Destination; defaults to ``sys.stdout`` at write time.
        indent: Text prepended once per nesting level.
        max_depth: Deepest nesting level that is expanded.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        indent: str = "  ",
        max_depth: int = 3,
    ) -> None:
        self._stream = stream
        self._indent = indent
        self._max_depth = max_depth

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def write(self, value: Any, depth: int = 0) -> None:
        """Write ``value`` starting at nesting level ``depth``."""
        if is_scalar(value):
            self._line(format_scalar(value), depth)
        elif record_fields(value) is not None:
            self._write_record(value, depth)
        elif isinstance(value, Iterable):
            for item in value:
                self.write(item, depth)
        else:
            self._line(repr(value), depth)

    def heading(self, text: str) -> None:
        self._line("")
        self._line(text)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _write_record(self, value: Any, depth: int) -> None:
        if depth > self._max_depth:
            self._line("...", depth)
            return

        scalars: list[str] = []
        nested: list[tuple[str, Any]] = []
        for name, field_value in record_fields(value):
            if is_scalar(field_value):
                scalars.append(f"{name}={format_scalar(field_value)}")
            else:
                nested.append((name, field_value))

        self._line("  ".join(scalars) if scalars else f"{type(value).__name__}:", depth)
        for name, field_value in nested:
            self._line(f"{name}:", depth + 1)
            self.write(field_value, depth + 2)

    def _line(self, text: str, depth: int = 0) -> None:
        self.stream.write(f"{self._indent * depth}{text}\n")
