"""Time-of-day parsing and closed time intervals.

Times are carried as integer seconds since midnight so that tolerance
expansion is plain arithmetic. Helpers here cover:

* reading ``HH:MM:SS`` strings, including short forms such as ``"30"`` or
  ``"5:30"`` that are left-padded from ``"00:00:00"``,
* widening a raw ``[start, end]`` pair by a symmetric tolerance, and
* the inclusive :class:`TimeInterval` used for overlap tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from any_two.configs import LAST_SECOND_OF_DAY
from any_two.errors import MalformedTime

TIME_FORMAT = "%H:%M:%S"
_PAD_TEMPLATE = "00:00:00"


def pad_time_text(text: str) -> str:
    """Return ``text`` left-padded with the leading part of ``"00:00:00"``.

    ``"30"`` becomes ``"00:00:30"`` and ``"5:30"`` becomes ``"00:05:30"``.
    Strings that are already eight characters or longer are returned as is.
    """

    missing = len(_PAD_TEMPLATE) - len(text)
    if missing <= 0:
        return text
    return _PAD_TEMPLATE[:missing] + text


def parse_time_of_day(value: object) -> int:
    """Return the second of day encoded by ``value``.

    Parameters
    ----------
    value:
        Raw time field. Surrounding whitespace is ignored.

    Returns
    -------
    int
        Seconds since midnight in ``[0, 86399]``.

    Raises
    ------
    MalformedTime
        If ``value`` is missing, empty, or does not parse as ``HH:MM:SS``
        after padding.
    """

    if value is None:
        raise MalformedTime(value, "missing time")
    text = str(value).strip()
    if not text:
        raise MalformedTime(value, "missing time")
    try:
        parsed = datetime.strptime(pad_time_text(text), TIME_FORMAT)
    except ValueError as err:
        raise MalformedTime(value) from err
    return parsed.hour * 3600 + parsed.minute * 60 + parsed.second


def format_time_of_day(seconds: int) -> str:
    """Return ``seconds`` since midnight rendered as ``HH:MM:SS``."""

    hours, remainder = divmod(int(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


@dataclass(frozen=True)
class TimeInterval:
    """Closed range of seconds since midnight.

    Parameters
    ----------
    start:
        First second included in the interval.
    end:
        Last second included in the interval; never before ``start``.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(
                f"Interval end {self.end} precedes start {self.start}."
            )

    def contains(self, instant: int) -> bool:
        """Return whether ``instant`` lies in the interval, both ends included."""

        return self.start <= instant <= self.end

    @property
    def duration(self) -> int:
        return self.end - self.start

    def __str__(self) -> str:
        return f"{format_time_of_day(self.start)} - {format_time_of_day(self.end)}"


def expand_interval(start: int, end: Optional[int], threshold: int) -> TimeInterval:
    """Widen a raw start/end pair by ``threshold`` seconds on each side.

    A missing ``end`` defaults to ``start``. The widened start floors at
    midnight and the widened end is clamped at ``23:59:59`` so that an
    interval never leaves the day it was recorded in.

    Parameters
    ----------
    start:
        Raw start as seconds since midnight.
    end:
        Raw end as seconds since midnight, or ``None``.
    threshold:
        Non-negative tolerance in seconds.

    Returns
    -------
    TimeInterval
        The expanded interval.

    Raises
    ------
    MalformedTime
        If the widened end still precedes the widened start.
    ValueError
        If ``threshold`` is negative.
    """

    if threshold < 0:
        raise ValueError(f"Threshold must be non-negative, got {threshold}.")
    if end is None:
        end = start
    expanded_start = max(0, start - threshold)
    expanded_end = min(LAST_SECOND_OF_DAY, end + threshold)
    if expanded_end < expanded_start:
        raise MalformedTime(
            format_time_of_day(end),
            f"end precedes start {format_time_of_day(start)} "
            f"even with a {threshold}s tolerance",
        )
    return TimeInterval(start=expanded_start, end=expanded_end)
