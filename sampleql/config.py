"""Runtime parameters for the exercise catalog.

``ExerciseConfig`` gathers every threshold the exercises use so they can be
changed from the command line or in tests without touching exercise code::

    config = ExerciseConfig(large_order_threshold=Decimal("10000"))
    config = dataclasses.replace(config, cheap_price=Decimal("15"))

Inconsistent values are rejected when the config is built.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

from sampleql.errors import ConfigError


@dataclass(frozen=True)
class ExerciseConfig:
    """Thresholds and inputs shared by the exercises.

    Attributes:
        numbers: Integer sequence filtered by the numbers exercise.
        low_number_limit: Numbers strictly below this are kept.
        order_total_thresholds: Order-sum thresholds; one query object is
            enumerated once per value.
        large_order_threshold: Customers need one order above this.
        cheap_price: Products below this price are ``cheap``.
        expensive_price: Products at or above this price are ``expensive``.
        data_path: JSON dataset to load; ``None`` for the packaged sample.
    """

    numbers: tuple[int, ...] = (5, 4, 1, 3, 9, 8, 6, 7, 2, 0)
    low_number_limit: int = 5
    order_total_thresholds: tuple[Decimal, ...] = (Decimal(5000), Decimal(100000))
    large_order_threshold: Decimal = Decimal(15000)
    cheap_price: Decimal = Decimal(20)
    expensive_price: Decimal = Decimal(70)
    data_path: Path | None = None

    def __post_init__(self) -> None:
        for name in ("large_order_threshold", "cheap_price", "expensive_price"):
            if not Decimal(getattr(self, name)).is_finite():
                raise ConfigError(f"{name} must be a finite amount.", field=name)
        if not self.order_total_thresholds:
            raise ConfigError(
                "At least one order total threshold is required.",
                field="order_total_thresholds",
            )
        if self.cheap_price > self.expensive_price:
            raise ConfigError(
                f"cheap_price ({self.cheap_price}) must not exceed "
                f"expensive_price ({self.expensive_price}).",
                field="cheap_price",
            )
