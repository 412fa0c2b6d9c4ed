"""Shared I/O helpers for observer CSV files.

This module centralizes the file-facing side of the any-two tools:

- Discovering observer CSV files under an input directory.
- Assigning observation-set labels to the discovered files.
- Reading headerless ``codes,start,end`` rows and building observation sets.

The matching code in :mod:`any_two` never touches the filesystem; scripts go
through these helpers instead. ``DEFAULT_DATA_ROOT`` is the single source of
truth for the default input directory.
"""

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from any_two.configs import (
    DEFAULT_ON_ERROR,
    DEFAULT_THRESHOLD_SECONDS,
    LABEL_BY_LETTER,
    LABEL_BY_STEM,
    OBSERVER_LABELS,
)
from any_two.errors import CodingError
from any_two.observations import ObservationSet
from utils.schema import RAW_COLUMN_COUNT

LOGGER = logging.getLogger(__name__)

DEFAULT_DATA_ROOT = Path("data")

RawRow = Tuple[Optional[str], Optional[str], Optional[str]]


def discover_observation_files(root: Path) -> List[Path]:
    """Return the ``*.csv`` files directly under ``root`` in sorted order.

    Parameters
    ----------
    root:
        Directory holding one CSV file per observer.

    Returns
    -------
    List[Path]
        Sorted CSV paths; empty when none exist.

    Raises
    ------
    FileNotFoundError
        If ``root`` is not an existing directory.
    """

    resolved = root.expanduser().resolve()
    if not resolved.is_dir():
        raise FileNotFoundError(f"Observation directory not found: {resolved}")
    return sorted(path for path in resolved.glob("*.csv") if path.is_file())


def assign_labels(
    paths: Sequence[Path], label_by: str = LABEL_BY_LETTER
) -> List[Tuple[Path, str]]:
    """Pair each path with an observation-set label.

    Parameters
    ----------
    paths:
        Observer files in reporting order.
    label_by:
        ``"letter"`` names the files A, B, C, ... in order; ``"stem"`` uses
        each file's stem.

    Raises
    ------
    ValueError
        If ``label_by`` is unknown, there are more files than letters, or two
        stems collide.
    """

    if label_by == LABEL_BY_LETTER:
        if len(paths) > len(OBSERVER_LABELS):
            raise ValueError(
                f"Letter labels support at most {len(OBSERVER_LABELS)} files; "
                f"got {len(paths)}. Use stem labels instead."
            )
        return [(path, OBSERVER_LABELS[index]) for index, path in enumerate(paths)]

    if label_by == LABEL_BY_STEM:
        labelled = [(path, path.stem) for path in paths]
        stems = [label for _, label in labelled]
        if len(set(stems)) != len(stems):
            raise ValueError("File stems must be unique to be used as labels.")
        return labelled

    raise ValueError(f"Unknown label scheme: {label_by!r}")


def _normalize_cell(value: str) -> Optional[str]:
    text = value.strip()
    return text or None


def iter_raw_rows(path: Path) -> Iterator[RawRow]:
    """Yield ``(codes, start, end)`` tuples from a headerless CSV file.

    Blank cells become ``None``, missing trailing cells are filled with
    ``None`` and columns beyond the third are ignored.

    Raises
    ------
    ValueError
        If the file cannot be read or is not valid UTF-8.
    """

    try:
        with path.open("r", encoding="utf-8-sig", newline="") as handle:
            for record in csv.reader(handle):
                cells = [_normalize_cell(value) for value in record[:RAW_COLUMN_COUNT]]
                cells.extend([None] * (RAW_COLUMN_COUNT - len(cells)))
                yield (cells[0], cells[1], cells[2])
    except (OSError, UnicodeDecodeError) as err:
        raise ValueError(f"Failed to read {path}: {err}") from err


def read_raw_rows(path: Path) -> List[RawRow]:
    """Return all raw rows of ``path`` as a list."""

    return list(iter_raw_rows(path))


def load_observation_set(
    path: Path,
    name: str,
    threshold: int = DEFAULT_THRESHOLD_SECONDS,
    on_error: str = DEFAULT_ON_ERROR,
) -> ObservationSet:
    """Read ``path`` and build the observation set called ``name``.

    Raises
    ------
    CodingError
        When a row is invalid and ``on_error`` is ``"abort"``. The failure is
        logged with the file path before propagating.
    """

    rows = read_raw_rows(path)
    try:
        observation = ObservationSet.from_rows(
            rows, name, threshold=threshold, on_error=on_error
        )
    except CodingError as err:
        LOGGER.error("Invalid observation data in %s: %s", path, err)
        raise
    LOGGER.info(
        "Loaded %d events for %s from %s.", len(observation.events), name, path.name
    )
    return observation


def load_observation_sets(
    labelled_paths: Sequence[Tuple[Path, str]],
    threshold: int = DEFAULT_THRESHOLD_SECONDS,
    on_error: str = DEFAULT_ON_ERROR,
) -> List[ObservationSet]:
    """Build one observation set per ``(path, label)`` entry, in order."""

    return [
        load_observation_set(path, name, threshold=threshold, on_error=on_error)
        for path, name in labelled_paths
    ]
