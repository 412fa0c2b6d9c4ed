"""Observation sets: one observer's full list of coded events.

Raw rows have the shape ``(codes_field, start_field, end_field)``. Building
an observation set happens in two steps:

1. :func:`parse_rows` turns rows into events and collects a
   :class:`RowIssue` for every row that could not be read. It never raises
   for bad data, so callers decide what a bad row means.
2. :meth:`ObservationSet.from_rows` applies an ``on_error`` policy on top of
   that result: ``"abort"`` re-raises the first problem, ``"skip"`` logs and
   drops the offending rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from any_two.configs import (
    DEFAULT_ON_ERROR,
    DEFAULT_THRESHOLD_SECONDS,
    ON_ERROR_ABORT,
    ON_ERROR_POLICIES,
)
from any_two.errors import CodingError
from any_two.events import Event
from any_two.times import expand_interval, parse_time_of_day

LOGGER = logging.getLogger(__name__)

RawRow = Sequence[Optional[str]]


@dataclass(frozen=True)
class RowIssue:
    """A raw row that could not be turned into an event.

    Parameters
    ----------
    row_number:
        One-based position of the row in its input.
    kind:
        Error kind, for example ``"invalid_code"`` or ``"malformed_time"``.
    message:
        Human-readable description.
    error:
        The underlying exception.
    """

    row_number: int
    kind: str
    message: str
    error: CodingError


@dataclass
class RowParseResult:
    """Events built from raw rows plus any rows that failed."""

    events: List[Event] = field(default_factory=list)
    issues: List[RowIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def _cell(row: RawRow, index: int) -> Optional[str]:
    """Return a stripped cell value, treating blanks and missing cells as ``None``."""

    if index >= len(row):
        return None
    value = row[index]
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def build_event(row: RawRow, owner: str, threshold: int) -> Optional[Event]:
    """Return the event described by ``row`` or ``None`` for a non-event row.

    Raises
    ------
    CodingError
        If the row carries codes but a code or time field is invalid.
    """

    codes_field = _cell(row, 0)
    if codes_field is None:
        return None
    start = parse_time_of_day(_cell(row, 1))
    end_field = _cell(row, 2)
    end = parse_time_of_day(end_field) if end_field is not None else None
    interval = expand_interval(start, end, threshold)
    return Event.from_codes_field(codes_field, interval, owner)


def parse_rows(
    rows: Iterable[RawRow],
    owner: str,
    threshold: int = DEFAULT_THRESHOLD_SECONDS,
) -> RowParseResult:
    """Build events for ``owner`` from raw rows without raising on bad data.

    Parameters
    ----------
    rows:
        Raw ``(codes_field, start_field, end_field)`` rows. Rows with an empty
        code field are skipped silently.
    owner:
        Name of the observation set the events belong to.
    threshold:
        Tolerance in seconds applied symmetrically to each interval.

    Returns
    -------
    RowParseResult
        Built events in row order plus one issue per failed row.
    """

    if threshold < 0:
        raise ValueError(f"Threshold must be non-negative, got {threshold}.")

    result = RowParseResult()
    for row_number, row in enumerate(rows, start=1):
        try:
            event = build_event(row, owner, threshold)
        except CodingError as err:
            result.issues.append(
                RowIssue(
                    row_number=row_number,
                    kind=err.kind,
                    message=str(err),
                    error=err,
                )
            )
            continue
        if event is not None:
            result.events.append(event)
    return result


@dataclass(frozen=True)
class ObservationSet:
    """One observer's events, fixed after construction.

    Parameters
    ----------
    name:
        Identity label such as ``"A"``.
    events:
        Events in input order.
    """

    name: str
    events: Tuple[Event, ...] = ()

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[RawRow],
        name: str,
        threshold: int = DEFAULT_THRESHOLD_SECONDS,
        on_error: str = DEFAULT_ON_ERROR,
    ) -> "ObservationSet":
        """Build an observation set from raw rows.

        Parameters
        ----------
        rows:
            Raw rows as read from the observer's table.
        name:
            Identity label for the set and owner of every event.
        threshold:
            Tolerance in seconds.
        on_error:
            ``"abort"`` raises the first row problem; ``"skip"`` logs each
            problem and keeps the remaining events.

        Raises
        ------
        CodingError
            Under ``"abort"`` when any row is invalid.
        ValueError
            If ``on_error`` is unknown or ``threshold`` is negative.
        """

        if on_error not in ON_ERROR_POLICIES:
            raise ValueError(
                f"Unknown on_error policy {on_error!r}; "
                f"expected one of {', '.join(ON_ERROR_POLICIES)}."
            )

        result = parse_rows(rows, name, threshold)
        if result.issues:
            if on_error == ON_ERROR_ABORT:
                raise result.issues[0].error
            for issue in result.issues:
                LOGGER.warning(
                    "Skipping row %d of observation set %s: %s",
                    issue.row_number,
                    name,
                    issue.message,
                )
        LOGGER.debug("Observation set %s holds %d events.", name, len(result.events))
        return cls(name=name, events=tuple(result.events))
