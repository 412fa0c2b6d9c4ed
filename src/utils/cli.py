"""CLI helper utilities for shared argparse patterns.

This module centralizes the command-line argument definitions used by the
any-two tooling so that:

- Repeated argument groups (input directory, tolerance, error policy) remain
  consistent between entry points.
- Validation of numeric options happens once, at parse time.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from any_two.configs import (
    DEFAULT_ON_ERROR,
    DEFAULT_THRESHOLD_SECONDS,
    LABEL_BY_CHOICES,
    LABEL_BY_LETTER,
    ON_ERROR_POLICIES,
)
from utils.io import DEFAULT_DATA_ROOT


def non_negative_int(value: str) -> int:
    """Argparse type accepting integers greater than or equal to zero."""

    try:
        number = int(value)
    except ValueError as err:
        raise argparse.ArgumentTypeError(f"Expected an integer, got {value!r}.") from err
    if number < 0:
        raise argparse.ArgumentTypeError(f"Expected a non-negative integer, got {number}.")
    return number


def positive_int(value: str) -> int:
    """Argparse type accepting integers greater than zero."""

    number = non_negative_int(value)
    if number == 0:
        raise argparse.ArgumentTypeError("Expected a positive integer, got 0.")
    return number


def add_observation_io_arguments(parser: argparse.ArgumentParser) -> None:
    """Add shared ``--input`` and ``--output-dir`` arguments.

    Parameters
    ----------
    parser:
        Target argument parser.
    """

    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=DEFAULT_DATA_ROOT,
        help=(
            "Directory containing one headerless CSV file per observer "
            f"(default: {DEFAULT_DATA_ROOT})."
        ),
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=Path("."),
        help="Directory where result CSV files are written (default: .).",
    )


def add_threshold_argument(parser: argparse.ArgumentParser) -> None:
    """Add a shared ``--threshold/-t`` tolerance argument in seconds."""

    parser.add_argument(
        "--threshold",
        "-t",
        type=non_negative_int,
        default=DEFAULT_THRESHOLD_SECONDS,
        help=(
            "Seconds added before the start and after the end of every event "
            f"before matching (default: {DEFAULT_THRESHOLD_SECONDS})."
        ),
    )


def add_on_error_argument(parser: argparse.ArgumentParser) -> None:
    """Add a shared ``--on-error`` policy argument for invalid rows."""

    parser.add_argument(
        "--on-error",
        choices=list(ON_ERROR_POLICIES),
        default=DEFAULT_ON_ERROR,
        help=(
            "What to do with rows holding unknown codes or unreadable times: "
            "'abort' stops the run, 'skip' logs and drops the row "
            f"(default: {DEFAULT_ON_ERROR})."
        ),
    )


def add_label_by_argument(parser: argparse.ArgumentParser) -> None:
    """Add a shared ``--label-by`` argument naming observation sets."""

    parser.add_argument(
        "--label-by",
        choices=list(LABEL_BY_CHOICES),
        default=LABEL_BY_LETTER,
        help=(
            "Name observers by letter (A, B, ... in sorted file order) or by "
            f"file stem (default: {LABEL_BY_LETTER})."
        ),
    )


def add_workers_argument(parser: argparse.ArgumentParser) -> None:
    """Add a shared ``--workers/-j`` argument for pairwise parallelism."""

    parser.add_argument(
        "--workers",
        "-j",
        type=positive_int,
        default=1,
        help="Worker processes used to compare pairs (default: 1).",
    )
