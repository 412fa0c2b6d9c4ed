"""Build and write the any-two result tables.

Three tables are produced from a list of pairwise results:

* ``results.csv`` with one summary row per pair,
* ``agreements_<A>-<B>.csv`` listing the agreeing units of one pair with the
  first observer's times before the second's, and
* ``all_agreements.csv`` holding, for every agreement, the side with the
  tighter interval, sorted by start time.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from analysis_utils.csv_utils import write_frame, write_table
from any_two.events import Event
from any_two.kappa import code_kappa
from any_two.matcher import AnyTwo
from any_two.times import format_time_of_day
from utils.schema import (
    AGREEMENT_COLUMN_CODE,
    AGREEMENT_COLUMN_END_TEMPLATE,
    AGREEMENT_COLUMN_START_TEMPLATE,
    ALL_AGREEMENTS_COLUMNS,
    ALL_AGREEMENTS_FILENAME,
    PAIR_AGREEMENTS_FILENAME_TEMPLATE,
    RESULTS_COLUMN_AGREEMENTS,
    RESULTS_COLUMN_ANY_TWO,
    RESULTS_COLUMN_CODE_KAPPA,
    RESULTS_COLUMN_DISAGREEMENTS,
    RESULTS_COLUMN_EVALUATIONS,
    RESULTS_COLUMN_UNIQUE_A,
    RESULTS_COLUMN_UNIQUE_B,
    RESULTS_COLUMNS,
    RESULTS_FILENAME,
)

LOGGER = logging.getLogger(__name__)


def results_to_frame(results: Sequence[AnyTwo]) -> pd.DataFrame:
    """Return the per-pair summary table.

    Undefined ratios (pairs without any comparison unit) and undefined kappas
    are stored as missing values.
    """

    records = []
    for result in results:
        summary = result.summary()
        if summary["any_two"] is None:
            LOGGER.warning(
                "Pair %s has no comparison units; any-two is undefined.",
                summary["label"],
            )
        records.append(
            {
                RESULTS_COLUMN_EVALUATIONS: summary["label"],
                RESULTS_COLUMN_ANY_TWO: summary["any_two"],
                RESULTS_COLUMN_AGREEMENTS: summary["agreements"],
                RESULTS_COLUMN_DISAGREEMENTS: summary["disagreements"],
                RESULTS_COLUMN_UNIQUE_A: summary["unique_a"],
                RESULTS_COLUMN_UNIQUE_B: summary["unique_b"],
                RESULTS_COLUMN_CODE_KAPPA: code_kappa(result),
            }
        )
    frame = pd.DataFrame.from_records(records, columns=RESULTS_COLUMNS)
    for column in (RESULTS_COLUMN_ANY_TWO, RESULTS_COLUMN_CODE_KAPPA):
        frame[column] = pd.to_numeric(frame[column], errors="coerce")
    return frame


def pair_agreement_table(result: AnyTwo) -> Tuple[List[str], List[List[str]]]:
    """Return the header and rows listing the agreements of one pair.

    Each agreement is oriented so the first observer's event supplies the
    code and the first pair of time columns.
    """

    first_name = result.first.name
    second_name = result.second.name
    header = [
        AGREEMENT_COLUMN_CODE,
        AGREEMENT_COLUMN_START_TEMPLATE.format(name=first_name),
        AGREEMENT_COLUMN_END_TEMPLATE.format(name=first_name),
        AGREEMENT_COLUMN_START_TEMPLATE.format(name=second_name),
        AGREEMENT_COLUMN_END_TEMPLATE.format(name=second_name),
    ]
    rows: List[List[str]] = []
    for unit in result.agreements:
        first, second = unit.oriented(first_name)
        rows.append(
            [
                first.codes_label,
                format_time_of_day(first.start),
                format_time_of_day(first.end),
                format_time_of_day(second.start),
                format_time_of_day(second.end),
            ]
        )
    return header, rows


def _tighter_side(first: Event, second: Optional[Event]) -> Event:
    if second is None or first.interval.duration < second.interval.duration:
        return first
    return second


def all_agreement_events(results: Sequence[AnyTwo]) -> List[Event]:
    """Return the tighter side of every agreement across all pairs.

    Ties in interval duration keep the second side. The result is sorted by
    start time; agreements starting together keep their discovery order.
    """

    events = [
        _tighter_side(unit.a, unit.b)
        for result in results
        for unit in result.agreements
    ]
    return sorted(events, key=lambda event: event.start)


def write_results_csv(results: Sequence[AnyTwo], output_dir: Path) -> Path:
    return write_frame(
        results_to_frame(results),
        output_dir / RESULTS_FILENAME,
        description="pairwise any-two results",
    )


def write_pair_agreements_csv(result: AnyTwo, output_dir: Path) -> Path:
    header, rows = pair_agreement_table(result)
    filename = PAIR_AGREEMENTS_FILENAME_TEMPLATE.format(
        first=result.first.name, second=result.second.name
    )
    return write_table(
        output_dir / filename,
        header,
        rows,
        description=f"agreements for {result.first.name} and {result.second.name}",
    )


def write_all_agreements_csv(results: Sequence[AnyTwo], output_dir: Path) -> Path:
    rows = [
        [event.codes_label, format_time_of_day(event.start), format_time_of_day(event.end)]
        for event in all_agreement_events(results)
    ]
    return write_table(
        output_dir / ALL_AGREEMENTS_FILENAME,
        ALL_AGREEMENTS_COLUMNS,
        rows,
        description="all agreements",
    )


def write_agreement_exports(results: Sequence[AnyTwo], output_dir: Path) -> List[Path]:
    """Write every result table under ``output_dir`` and return their paths."""

    written = [write_results_csv(results, output_dir)]
    for result in results:
        written.append(write_pair_agreements_csv(result, output_dir))
    written.append(write_all_agreements_csv(results, output_dir))
    return written
