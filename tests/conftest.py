"""Shared pytest fixtures for sampleql tests."""
from __future__ import annotations

import pytest

from sampleql.config import ExerciseConfig
from sampleql.data import load_dataset
from sampleql.schema.entities import Dataset


@pytest.fixture(scope="session")
def dataset() -> Dataset:
    """Packaged sample dataset shared across all tests."""
    return load_dataset()


@pytest.fixture
def config() -> ExerciseConfig:
    return ExerciseConfig()
