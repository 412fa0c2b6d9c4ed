"""Pairwise any-two matching between two observation sets.

For a pair ``(X, Y)`` every event of ``X`` is tested against every event of
``Y`` and vice versa. Overlapping events are decomposed into comparison
units, events without any overlap become single points for their own
observer, and the units from both directions are merged into one
deduplicated set from which the agreement statistics are derived.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from any_two.observations import ObservationSet
from any_two.points import ComparisonUnit, expand_pair

LOGGER = logging.getLogger(__name__)


class AnyTwo:
    """Any-two agreement result for one pair of observation sets.

    The comparison runs once at construction; the instance is read-only
    afterwards.

    Parameters
    ----------
    first:
        First observation set of the pair.
    second:
        Second observation set of the pair.
    """

    def __init__(self, first: ObservationSet, second: ObservationSet) -> None:
        self.first = first
        self.second = second
        # Insertion-ordered set: keys are units, values unused.
        self._points: Dict[ComparisonUnit, None] = {}
        self._single_points: Dict[str, List[ComparisonUnit]] = {
            first.name: [],
            second.name: [],
        }
        self._compare(first, second)
        self._compare(second, first)

    def _compare(self, source: ObservationSet, target: ObservationSet) -> None:
        for event in source.events:
            matches: List[ComparisonUnit] = []
            for other in target.events:
                if event.overlaps_with(other):
                    matches.extend(expand_pair(event, other))

            if not matches:
                matches = expand_pair(event, None)
                self._single_points.setdefault(event.owner, []).extend(matches)

            for unit in matches:
                self._points.setdefault(unit, None)

    @property
    def points(self) -> List[ComparisonUnit]:
        """Deduplicated units over both directions, in discovery order."""

        return list(self._points)

    @property
    def agreements(self) -> List[ComparisonUnit]:
        return [unit for unit in self._points if unit.is_agreement]

    @property
    def disagreements(self) -> List[ComparisonUnit]:
        return [unit for unit in self._points if unit.is_disagreement]

    @property
    def single_points(self) -> List[ComparisonUnit]:
        return [unit for unit in self._points if unit.is_single_point]

    def single_points_for(self, name: str) -> List[ComparisonUnit]:
        """Return the unmatched units recorded for observation set ``name``.

        These lists are kept per direction and are not deduplicated, so a
        code repeated within one event contributes once per occurrence.
        """

        return list(self._single_points.get(name, []))

    @property
    def single_points_by_owner(self) -> Dict[str, List[ComparisonUnit]]:
        return {name: list(units) for name, units in self._single_points.items()}

    @property
    def unique_a(self) -> List[ComparisonUnit]:
        return self.single_points_for(self.first.name)

    @property
    def unique_b(self) -> List[ComparisonUnit]:
        return self.single_points_for(self.second.name)

    @property
    def label(self) -> str:
        return f"({self.first.name}, {self.second.name})"

    @property
    def total(self) -> int:
        return len(self._points)

    @property
    def any_two(self) -> Optional[float]:
        """Return agreements over all units, or ``None`` when there are no units."""

        if not self._points:
            return None
        return len(self.agreements) / float(len(self._points))

    def summary(self) -> Dict[str, object]:
        """Return the per-pair statistics behind the report and ``results.csv``."""

        return {
            "label": self.label,
            "first": self.first.name,
            "second": self.second.name,
            "any_two": self.any_two,
            "agreements": len(self.agreements),
            "disagreements": len(self.disagreements),
            "single_points": len(self.single_points),
            "unique_a": len(self.unique_a),
            "unique_b": len(self.unique_b),
            "total": self.total,
        }

    def __repr__(self) -> str:
        return f"AnyTwo{self.label}"


def compare_pair(first: ObservationSet, second: ObservationSet) -> AnyTwo:
    """Return the any-two result for one pair; usable as a worker function."""

    result = AnyTwo(first, second)
    LOGGER.debug(
        "Compared %s: %d units, %d agreements.",
        result.label,
        result.total,
        len(result.agreements),
    )
    return result

