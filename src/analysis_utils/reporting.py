"""Console summaries for pairwise any-two results."""

from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO

from any_two.matcher import AnyTwo


def format_rate3(value: Optional[float]) -> str:
    """Return ``value`` with three decimals, or ``"n/a"`` when undefined."""

    if value is None:
        return "n/a"
    return f"{round(float(value), 3):.3f}"


def format_pair_report(result: AnyTwo) -> List[str]:
    """Return the report lines for one pair, ending with a blank line."""

    summary = result.summary()
    return [
        f"============ {summary['label']} ===============",
        f"Any-Two: {format_rate3(summary['any_two'])}",
        f"Agreements: {summary['agreements']}",
        f"Disagreements: {summary['disagreements']}",
        f"Unique {summary['first']}: {summary['unique_a']}",
        f"Unique {summary['second']}: {summary['unique_b']}",
        "",
    ]


def print_results(
    results: Sequence[AnyTwo], stream: Optional[TextIO] = None
) -> None:
    """Print one report block per pair to ``stream`` (stdout by default)."""

    stream = sys.stdout if stream is None else stream
    for result in results:
        for line in format_pair_report(result):
            print(line, file=stream)
