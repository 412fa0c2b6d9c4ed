"""Comparison units: single-code pairings between two observers.

A multi-code event is never compared as a whole. Each of its codes is paired
with each code of every overlapping event from the other observer, or with
nothing when no such event exists.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from any_two.events import Event

AGREEMENT = "agreement"
DISAGREEMENT = "disagreement"
SINGLE_POINT = "single_point"


def _side_key(event: Event) -> Tuple[Tuple[str, ...], int, int]:
    return (event.codes, event.start, event.end)


class ComparisonUnit:
    """Unordered pairing of two single-code events, or of one event with nothing.

    ``ComparisonUnit(a, b)`` and ``ComparisonUnit(b, a)`` are equal and hash
    alike. The hash is built from the two sides in a canonical order so that
    units spread across hash buckets like ordinary values.

    Parameters
    ----------
    a:
        Single-code event from the source observer.
    b:
        Single-code event from the other observer, or ``None`` for a single
        point.
    """

    __slots__ = ("a", "b", "_key")

    def __init__(self, a: Event, b: Optional[Event] = None) -> None:
        self.a = a
        self.b = b
        if b is None:
            self._key = (_side_key(a), None)
        else:
            self._key = tuple(sorted((_side_key(a), _side_key(b))))

    @property
    def classification(self) -> str:
        if self.b is None:
            return SINGLE_POINT
        if self.a.codes == self.b.codes:
            return AGREEMENT
        return DISAGREEMENT

    @property
    def is_single_point(self) -> bool:
        return self.classification == SINGLE_POINT

    @property
    def is_agreement(self) -> bool:
        return self.classification == AGREEMENT

    @property
    def is_disagreement(self) -> bool:
        return self.classification == DISAGREEMENT

    def oriented(self, first_owner: str) -> Tuple[Event, Optional[Event]]:
        """Return both sides with the event owned by ``first_owner`` first."""

        if self.b is not None and self.a.owner != first_owner:
            return self.b, self.a
        return self.a, self.b

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComparisonUnit):
            return NotImplemented
        if self.a == other.a and self.b == other.b:
            return True
        return self.a == other.b and self.b == other.a

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return f"ComparisonUnit(a={self.a!r}, b={self.b!r})"

    def __str__(self) -> str:
        second = "" if self.b is None else str(self.b)
        return "-" * 25 + f"\n{self.a}\n{second}"


def expand_pair(first: Event, second: Optional[Event]) -> List[ComparisonUnit]:
    """Decompose two events into one unit per code pairing.

    Parameters
    ----------
    first:
        Event from the source observer.
    second:
        Overlapping event from the other observer, or ``None``.

    Returns
    -------
    list[ComparisonUnit]
        ``len(first.codes)`` single points when ``second`` is ``None``;
        otherwise one unit per element of ``first.codes x second.codes`` in
        row-major order.
    """

    if second is None:
        return [ComparisonUnit(first.with_single_code(code)) for code in first.codes]
    return [
        ComparisonUnit(first.with_single_code(code_a), second.with_single_code(code_b))
        for code_a in first.codes
        for code_b in second.codes
    ]
