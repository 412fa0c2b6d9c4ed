"""
Tests for observer CSV discovery and loading helpers.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from any_two.errors import InvalidCode
from utils.io import (
    assign_labels,
    discover_observation_files,
    load_observation_set,
    load_observation_sets,
    read_raw_rows,
)


def _write_csv(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_discover_observation_files_returns_sorted_csvs(tmp_path: Path) -> None:
    _write_csv(tmp_path / "b.csv", "")
    _write_csv(tmp_path / "a.csv", "")
    _write_csv(tmp_path / "notes.txt", "")
    (tmp_path / "nested").mkdir()
    _write_csv(tmp_path / "nested" / "c.csv", "")

    found = discover_observation_files(tmp_path)

    assert [path.name for path in found] == ["a.csv", "b.csv"]


def test_discover_observation_files_requires_directory(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        discover_observation_files(tmp_path / "missing")


def test_assign_labels_by_letter_and_stem() -> None:
    paths = [Path("x/first.csv"), Path("x/second.csv"), Path("x/third.csv")]

    assert [label for _, label in assign_labels(paths)] == ["A", "B", "C"]
    assert [label for _, label in assign_labels(paths, "stem")] == [
        "first",
        "second",
        "third",
    ]


def test_assign_labels_rejects_unusable_inputs() -> None:
    too_many = [Path(f"obs_{index}.csv") for index in range(27)]
    with pytest.raises(ValueError):
        assign_labels(too_many, "letter")
    with pytest.raises(ValueError):
        assign_labels([Path("a/x.csv"), Path("b/x.csv")], "stem")
    with pytest.raises(ValueError):
        assign_labels([Path("a.csv")], "number")


def test_read_raw_rows_normalizes_cells(tmp_path: Path) -> None:
    path = _write_csv(
        tmp_path / "obs.csv",
        "ACE,10:00:00\n"
        ",10:00:10,10:00:20\n"
        "\n"
        " ACE/CON , 30 , 40 ,extra\n",
    )

    rows = read_raw_rows(path)

    assert rows == [
        ("ACE", "10:00:00", None),
        (None, "10:00:10", "10:00:20"),
        (None, None, None),
        ("ACE/CON", "30", "40"),
    ]


def test_read_raw_rows_reports_undecodable_file_with_path(tmp_path: Path) -> None:
    path = tmp_path / "obs.csv"
    path.write_bytes(b"ACE,10:00:00\n\xff\xfe\xfa,10:00:05\n")

    with pytest.raises(ValueError, match="obs.csv") as excinfo:
        read_raw_rows(path)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_read_raw_rows_reports_missing_file_with_path(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="missing.csv"):
        read_raw_rows(tmp_path / "missing.csv")


def test_load_observation_set_builds_events(tmp_path: Path) -> None:
    path = _write_csv(tmp_path / "obs.csv", "ACE,10:00:00\n,10:00:05\nCON,10:01:00,10:01:10\n")

    observation = load_observation_set(path, "A", threshold=4)

    assert observation.name == "A"
    assert [event.codes for event in observation.events] == [("ACE",), ("CON",)]


def test_load_observation_sets_propagates_invalid_codes(tmp_path: Path, caplog) -> None:
    good = _write_csv(tmp_path / "a.csv", "ACE,10:00:00\n")
    bad = _write_csv(tmp_path / "b.csv", "NOPE,10:00:00\n")

    with pytest.raises(InvalidCode):
        load_observation_sets([(good, "A"), (bad, "B")])
    assert any("b.csv" in record.getMessage() for record in caplog.records)

    loaded = load_observation_sets([(good, "A"), (bad, "B")], on_error="skip")
    assert [len(observation.events) for observation in loaded] == [1, 0]
