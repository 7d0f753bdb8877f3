"""Exercise dataclass: describes one runnable query exercise."""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sampleql.config import ExerciseConfig
from sampleql.dump import ObjectDumper
from sampleql.schema.entities import Dataset

#: ``(dataset, config, dumper) -> None``; renders the exercise's result.
ExerciseRun = Callable[[Dataset, ExerciseConfig, ObjectDumper], None]

RESTRICTION = "Restriction Operators"
GROUPING = "Grouping Operators"


@dataclass(frozen=True)
class Exercise:
    """A single named exercise.

    Attributes:
        id: Unique identifier, e.g. ``"linq001"``.
        category: Operator family, e.g. ``"Restriction Operators"``.
        title: Short title shown in listings.
        description: One-sentence description of the result.
        run: Callable that queries the dataset and renders the result.
    """

    id: str
    category: str
    title: str
    description: str
    run: ExerciseRun
