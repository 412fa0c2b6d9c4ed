"""Lightweight helpers for writing agreement CSV tables.

These utilities wrap common patterns for emitting CSV files from the any-two
tools, keeping path handling and the final status message consistent whether
the table comes as plain rows or as a pandas DataFrame.
"""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Iterable, Sequence

import pandas as pd


def _prepare_output_path(output_path: Path) -> Path:
    resolved = output_path.expanduser().resolve()
    resolved.parent.mkdir(parents=True, exist_ok=True)
    return resolved


def write_table(
    output_path: Path,
    header: Sequence[str],
    rows: Iterable[Sequence[object]],
    *,
    description: str,
) -> Path:
    """Write positional ``rows`` under ``header`` to ``output_path``.

    Parameters
    ----------
    output_path:
        Destination path for the CSV file.
    header:
        Column names written as the first line.
    rows:
        Row sequences aligned with ``header``.
    description:
        Human-readable description used in the final status message.

    Returns
    -------
    Path
        Resolved path of the written file.
    """

    resolved = _prepare_output_path(output_path)
    with resolved.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(list(header))
        for row in rows:
            writer.writerow(list(row))

    print(f"Wrote {description} to {resolved}")
    return resolved


def write_frame(frame: pd.DataFrame, output_path: Path, *, description: str) -> Path:
    """Write ``frame`` without its index; missing values become empty cells."""

    resolved = _prepare_output_path(output_path)
    frame.to_csv(resolved, index=False, na_rep="")

    print(f"Wrote {description} to {resolved}")
    return resolved
