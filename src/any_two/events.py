"""Coded events ("breakdowns") recorded by a single observer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from any_two.codes import split_codes, validate_code
from any_two.configs import CODE_DELIMITER
from any_two.errors import InvalidCode
from any_two.times import TimeInterval


@dataclass(frozen=True)
class Event:
    """One coded occurrence on an observer's timeline.

    Equality and hashing cover ``codes`` (as an ordered sequence) and the
    interval bounds only. ``owner`` identifies the observation set the event
    came from and is left out of comparisons, so the same
    occurrence coded identically by two observers compares equal.

    Parameters
    ----------
    codes:
        Non-empty ordered tuple of vocabulary codes; duplicates allowed.
    interval:
        Expanded closed time interval.
    owner:
        Name of the owning observation set.
    """

    codes: Tuple[str, ...]
    interval: TimeInterval
    owner: str = field(compare=False)

    def __post_init__(self) -> None:
        if not self.codes:
            raise InvalidCode("")
        for code in self.codes:
            validate_code(code)

    @classmethod
    def from_codes_field(
        cls, codes_field: str, interval: TimeInterval, owner: str
    ) -> "Event":
        """Build an event from a raw ``/``-delimited code field."""

        return cls(codes=split_codes(codes_field), interval=interval, owner=owner)

    @property
    def start(self) -> int:
        return self.interval.start

    @property
    def end(self) -> int:
        return self.interval.end

    def overlaps_with(self, other: "Event") -> bool:
        """Return whether either endpoint of ``other`` falls inside this event.

        The test is one-sided: ``other`` fully containing this event without
        either of its endpoints landing inside does not count.
        """

        return self.interval.contains(other.start) or self.interval.contains(
            other.end
        )

    def with_single_code(self, code: str) -> "Event":
        """Return a copy carrying only ``code`` with the same interval and owner."""

        return Event(codes=(code,), interval=self.interval, owner=self.owner)

    @property
    def codes_label(self) -> str:
        return CODE_DELIMITER.join(self.codes)

    def __str__(self) -> str:
        return f"[{self.codes_label}] {self.interval}"
