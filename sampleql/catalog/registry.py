"""Exercise registry.

Exercises are registered explicitly, once, by :mod:`sampleql.catalog`; the
CLI and tests look them up by id or id prefix.

Usage::

    registry = ExerciseRegistry()
    registry.register_all(RESTRICTION_EXERCISES)
    registry.get("linq001").run(dataset, config, dumper)
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from sampleql.catalog.exercise import Exercise
from sampleql.errors import UnknownExerciseError

logger = logging.getLogger(__name__)


class ExerciseRegistry:
    """Maps exercise ids to :class:`Exercise` objects, in registration order."""

    def __init__(self) -> None:
        self._exercises: dict[str, Exercise] = {}

    def register(self, exercise: Exercise) -> Exercise:
        """Register ``exercise`` under its id.

        Raises:
            ValueError: If an exercise with the same id is already registered.
        """
        if exercise.id in self._exercises:
            raise ValueError(f"Exercise '{exercise.id}' is already registered.")
        self._exercises[exercise.id] = exercise
        logger.debug("Registered exercise %s (%s)", exercise.id, exercise.category)
        return exercise

    def register_all(self, exercises: Iterable[Exercise]) -> None:
        for exercise in exercises:
            self.register(exercise)

    def get(self, exercise_id: str) -> Exercise:
        """Return the exercise registered as ``exercise_id``.

        Raises:
            UnknownExerciseError: If no exercise has that id.
        """
        exercise = self._exercises.get(exercise_id)
        if exercise is None:
            raise UnknownExerciseError(exercise_id, self.ids())
        return exercise

    def select(self, prefix: str | None = None) -> list[Exercise]:
        """Return exercises whose id starts with ``prefix`` (all when ``None``)."""
        if prefix is None:
            return self.all()
        return [e for e in self._exercises.values() if e.id.startswith(prefix)]

    def all(self) -> list[Exercise]:
        return list(self._exercises.values())

    def ids(self) -> list[str]:
        return list(self._exercises)

    def __len__(self) -> int:
        return len(self._exercises)

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._exercises
