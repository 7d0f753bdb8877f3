"""sampleql command line runner.

Runs one or more exercises against the packaged sample dataset (or a JSON
dataset of the same shape) and prints their results.

Usage
-----
List all exercises::

    sampleql --list

Run a single exercise::

    sampleql --exercise linq001

Run every exercise whose id starts with ``linq00``::

    sampleql --exercise linq00

Run everything against another dataset, with debug logging::

    sampleql --data my_data.json --log-level DEBUG
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from decimal import Decimal, InvalidOperation
from pathlib import Path

from sampleql.catalog import REGISTRY, Exercise
from sampleql.config import ExerciseConfig
from sampleql.data import load_dataset
from sampleql.dump import ObjectDumper
from sampleql.errors import SampleQLError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI colours
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_CYAN = "\033[36m"
_BOLD = "\033[1m"


def setup_logging(log_level: str = "WARNING") -> None:
    """Send log records to stderr so they never mix with exercise output."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _amount(text: str) -> Decimal:
    """argparse type for finite decimal amounts such as ``15000`` or ``19.99``."""
    try:
        value = Decimal(text)
    except InvalidOperation as exc:
        raise argparse.ArgumentTypeError(f"invalid amount: '{text}'") from exc
    if not value.is_finite():
        raise argparse.ArgumentTypeError(f"amount must be finite: '{text}'")
    return value


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="sampleql",
        description="Run sampleql query exercises against an in-memory dataset.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    p.add_argument(
        "--exercise", metavar="PREFIX",
        help="Run only exercises whose id starts with PREFIX. Omit for all.",
    )
    p.add_argument(
        "--list", action="store_true",
        help="Print all exercise ids and titles, then exit.",
    )
    p.add_argument(
        "--data", type=Path, metavar="PATH",
        help="JSON dataset to load instead of the packaged sample.",
    )
    p.add_argument(
        "--large-order-threshold", type=_amount, metavar="AMOUNT",
        help="Order total a customer must exceed at least once (linq003).",
    )
    p.add_argument(
        "--cheap-price", type=_amount, metavar="PRICE",
        help="Upper bound (exclusive) of the cheap price band (linq008).",
    )
    p.add_argument(
        "--expensive-price", type=_amount, metavar="PRICE",
        help="Lower bound (inclusive) of the expensive price band (linq008).",
    )
    p.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr (default: WARNING).",
    )
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> ExerciseConfig:
    """Apply command line overrides to the default ExerciseConfig."""
    overrides = {
        "data_path": args.data,
        "large_order_threshold": args.large_order_threshold,
        "cheap_price": args.cheap_price,
        "expensive_price": args.expensive_price,
    }
    return dataclasses.replace(
        ExerciseConfig(), **{k: v for k, v in overrides.items() if v is not None}
    )


def _print_list(exercises: list[Exercise]) -> None:
    print(f"\n{'ID':<10} {'CATEGORY':<24} TITLE")
    print("-" * 70)
    for e in exercises:
        print(f"{e.id:<10} {e.category:<24} {e.title}")
    print(f"\nTotal: {len(exercises)} exercises")


def run_exercises(
    exercises: list[Exercise],
    config: ExerciseConfig,
    dumper: ObjectDumper,
) -> None:
    dataset = load_dataset(config.data_path)
    for exercise in exercises:
        logger.info("Running exercise %s", exercise.id)
        dumper.write(f"{_BOLD}{exercise.id}{_RESET}  {_CYAN}{exercise.title}{_RESET}")
        exercise.run(dataset, config, dumper)
        dumper.write("")


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging(args.log_level)

    if args.list:
        _print_list(REGISTRY.all())
        return 0

    exercises = REGISTRY.select(args.exercise)
    if not exercises:
        logger.error("No exercises match prefix '%s'.", args.exercise)
        return 1

    try:
        config = build_config(args)
        run_exercises(exercises, config, ObjectDumper())
    except SampleQLError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
