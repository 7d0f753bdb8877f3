"""Central registry of all exercises.

Import ``REGISTRY`` for lookups or ``ALL_EXERCISES`` for the flat list, in
the numbering order of the exercises.
"""
from __future__ import annotations

from sampleql.catalog.exercise import GROUPING, RESTRICTION, Exercise, ExerciseRun
from sampleql.catalog.grouping import CASES as GROUPING_CASES
from sampleql.catalog.registry import ExerciseRegistry
from sampleql.catalog.restriction import CASES as RESTRICTION_CASES

_ORDER = [
    "linq1", "linq2",
    "linq001", "linq002", "linq003", "linq004", "linq005",
    "linq006", "linq007", "linq008", "linq009", "linq010",
]

_by_id = {e.id: e for e in RESTRICTION_CASES + GROUPING_CASES}
ALL_EXERCISES: list[Exercise] = [_by_id[i] for i in _ORDER]

REGISTRY = ExerciseRegistry()
REGISTRY.register_all(ALL_EXERCISES)

__all__ = [
    "ALL_EXERCISES",
    "REGISTRY",
    "Exercise",
    "ExerciseRegistry",
    "ExerciseRun",
    "GROUPING",
    "RESTRICTION",
]
