"""Any-two inter-rater agreement for time-coded observation data.

Submodules
----------
codes
    Fixed code vocabulary and validation.
times
    Time-of-day parsing, tolerance expansion and closed intervals.
events
    Single coded events.
observations
    Observation sets built from raw rows.
points
    Comparison units and code-pair expansion.
matcher
    Pairwise any-two matching and statistics.
kappa
    Code-level Cohen's kappa for a pair.
pipeline
    Comparison of every pair of observation sets.
commands
    Command-line entry point.
"""

from __future__ import annotations

from any_two.errors import CodingError, InvalidCode, MalformedTime
from any_two.events import Event
from any_two.matcher import AnyTwo
from any_two.observations import ObservationSet, parse_rows
from any_two.pipeline import AgreementPipeline
from any_two.points import ComparisonUnit, expand_pair
from any_two.times import TimeInterval

__all__ = [
    "AgreementPipeline",
    "AnyTwo",
    "CodingError",
    "ComparisonUnit",
    "Event",
    "InvalidCode",
    "MalformedTime",
    "ObservationSet",
    "TimeInterval",
    "expand_pair",
    "parse_rows",
]
