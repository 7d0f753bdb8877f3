"""Loading the Dataset from JSON.

The packaged sample (``sample_data.json``) is a small subset of a classic
trading database.  Some customers deliberately carry non-numeric postal
codes, no region, phone numbers without an operator code, or no orders at
all; the restriction exercises rely on them.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from sampleql.errors import DatasetError
from sampleql.schema.entities import Dataset

logger = logging.getLogger(__name__)

SAMPLE_DATA_PATH = Path(__file__).parent / "sample_data.json"

_sample: Dataset | None = None


def parse_dataset(raw: str, source: str = "<string>") -> Dataset:
    """Parse a JSON document into a validated Dataset.

    Args:
        raw: JSON text with ``customers``, ``products`` and ``suppliers``.
        source: Label used in error messages and logs.

    Returns:
        The frozen Dataset.

    Raises:
        DatasetError: If ``raw`` is not JSON or does not describe a Dataset
            (for example a collection is ``null`` or missing).
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Invalid JSON in {source}: {exc}", source=source) from exc

    try:
        dataset = Dataset.model_validate(data)
    except ValidationError as exc:
        raise DatasetError(
            f"Dataset structure in {source} is invalid: {exc}", source=source
        ) from exc

    logger.debug(
        "Parsed %s: %d customers, %d products, %d suppliers",
        source,
        len(dataset.customers),
        len(dataset.products),
        len(dataset.suppliers),
    )
    return dataset


def load_dataset(path: Path | str | None = None) -> Dataset:
    """Load a Dataset from ``path``, or the cached packaged sample.

    Raises:
        DatasetError: If the file cannot be read or parsed.
    """
    global _sample
    if path is None:
        if _sample is None:
            _sample = _read(SAMPLE_DATA_PATH)
        return _sample
    return _read(Path(path))


def _read(path: Path) -> Dataset:
    logger.info("Loading dataset from %s", path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DatasetError(f"Cannot read dataset {path}: {exc}", source=str(path)) from exc
    return parse_dataset(raw, source=str(path))
