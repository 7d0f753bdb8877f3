"""Custom exception hierarchy for sampleql.

All public errors inherit from SampleQLError so callers can catch the base
class for any sampleql-specific failure.

Malformed customer fields (postal code, region, phone) and empty order
lists are *not* errors: the query engine treats them as data and classifies
them through predicates.
"""
from __future__ import annotations

from typing import Any


class SampleQLError(Exception):
    """Base exception for all sampleql errors."""


class DatasetError(SampleQLError):
    """Raised when raw sample data cannot be turned into a Dataset.

    Args:
        message: Human-readable description.
        source: Where the data came from (a file path or ``"<string>"``).
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class ConfigError(SampleQLError):
    """Raised when an ExerciseConfig is inconsistent.

    Detected when the config is constructed, before any exercise runs.

    Args:
        message: Human-readable description.
        field: Name of the offending config field.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class UnknownExerciseError(SampleQLError):
    """Raised when the registry has no exercise with the requested id.

    Args:
        exercise_id: The id that was looked up.
        known: Ids currently registered.
    """

    def __init__(self, exercise_id: str, known: list[str]) -> None:
        super().__init__(f"Unknown exercise: '{exercise_id}'.")
        self.exercise_id = exercise_id
        self.details: dict[str, Any] = {
            "exercise_id": exercise_id,
            "known_exercises": known,
        }

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response."""
        return {
            "error": "UNKNOWN_EXERCISE",
            "message": str(self),
            "details": self.details,
        }
