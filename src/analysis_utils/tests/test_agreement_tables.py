"""
Tests for any-two result tables and console reports.
"""

from __future__ import annotations

import contextlib
import csv
import io
import math
from pathlib import Path

import pytest

from analysis_utils.agreement_tables import (
    all_agreement_events,
    pair_agreement_table,
    results_to_frame,
    write_agreement_exports,
)
from analysis_utils.reporting import format_pair_report, format_rate3, print_results
from any_two.matcher import AnyTwo
from any_two.observations import ObservationSet
from utils.schema import RESULTS_COLUMNS


def _make_result() -> AnyTwo:
    first = ObservationSet.from_rows(
        [
            ("ACE", "10:00:00", None),
            ("CON", "10:05:10", None),
            ("PAS", "08:00:00", None),
        ],
        "A",
    )
    second = ObservationSet.from_rows(
        [("ACE", "10:00:02", None), ("CON", "10:05:00", "10:05:10")],
        "B",
    )
    return AnyTwo(first, second)


def _read_csv(path: Path) -> list[list[str]]:
    with path.open("r", encoding="utf-8", newline="") as handle:
        return list(csv.reader(handle))


def test_results_frame_holds_one_row_per_pair() -> None:
    empty = AnyTwo(
        ObservationSet.from_rows([], "C"), ObservationSet.from_rows([], "D")
    )

    frame = results_to_frame([_make_result(), empty])

    assert list(frame.columns) == RESULTS_COLUMNS
    first_row = frame.iloc[0]
    assert first_row["Evaluations"] == "(A, B)"
    assert first_row["Any-Two"] == pytest.approx(2 / 3)
    assert first_row["Agreements"] == 2
    assert first_row["Disagreements"] == 0
    assert first_row["Unique A"] == 1
    assert first_row["Unique B"] == 0
    assert math.isnan(frame.iloc[1]["Any-Two"])
    assert math.isnan(frame.iloc[1]["Code Kappa"])


def test_pair_agreement_table_orients_first_observer_first() -> None:
    header, rows = pair_agreement_table(_make_result())

    assert header == [
        "CODE",
        "Start time - A",
        "End time - A",
        "Start time - B",
        "End time - B",
    ]
    assert rows == [
        ["ACE", "09:59:56", "10:00:04", "09:59:58", "10:00:06"],
        ["CON", "10:05:06", "10:05:14", "10:04:56", "10:05:14"],
    ]


def test_all_agreements_keep_tighter_side_sorted_by_start() -> None:
    events = all_agreement_events([_make_result()])

    # Equal durations keep the second observer; a tighter interval wins.
    assert [(event.owner, event.codes) for event in events] == [
        ("B", ("ACE",)),
        ("A", ("CON",)),
    ]
    assert [event.start for event in events] == sorted(event.start for event in events)


def test_write_agreement_exports_creates_all_tables(tmp_path: Path) -> None:
    written = write_agreement_exports([_make_result()], tmp_path / "out")

    names = sorted(path.name for path in written)
    assert names == ["agreements_A-B.csv", "all_agreements.csv", "results.csv"]

    results_rows = _read_csv(tmp_path / "out" / "results.csv")
    assert results_rows[0] == RESULTS_COLUMNS
    assert results_rows[1][0] == "(A, B)"

    all_rows = _read_csv(tmp_path / "out" / "all_agreements.csv")
    assert all_rows[0] == ["CODE", "Start time", "End time"]
    assert all_rows[1] == ["ACE", "09:59:58", "10:00:06"]


def test_pair_report_matches_console_layout() -> None:
    lines = format_pair_report(_make_result())

    assert lines == [
        "============ (A, B) ===============",
        "Any-Two: 0.667",
        "Agreements: 2",
        "Disagreements: 0",
        "Unique A: 1",
        "Unique B: 0",
        "",
    ]


def test_print_results_writes_every_pair() -> None:
    stream = io.StringIO()
    print_results([_make_result(), _make_result()], stream=stream)

    assert stream.getvalue().count("============ (A, B)") == 2


def test_print_results_defaults_to_current_stdout() -> None:
    captured = io.StringIO()
    with contextlib.redirect_stdout(captured):
        print_results([_make_result()])

    assert captured.getvalue().splitlines() == format_pair_report(_make_result())


def test_report_and_results_frame_follow_pair_summary() -> None:
    result = _make_result()
    summary = result.summary()

    row = results_to_frame([result]).iloc[0]
    lines = format_pair_report(result)

    assert row["Evaluations"] == summary["label"]
    assert row["Agreements"] == summary["agreements"]
    assert row["Disagreements"] == summary["disagreements"]
    assert row["Unique A"] == summary["unique_a"]
    assert row["Unique B"] == summary["unique_b"]
    assert f"Agreements: {summary['agreements']}" in lines
    assert f"Unique {summary['first']}: {summary['unique_a']}" in lines


def test_format_rate3_handles_undefined_values() -> None:
    assert format_rate3(None) == "n/a"
    assert format_rate3(0.5) == "0.500"
