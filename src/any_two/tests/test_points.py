"""
Tests for comparison units and code-pair expansion.
"""

from __future__ import annotations

import itertools

import pytest

from any_two.events import Event
from any_two.points import (
    AGREEMENT,
    DISAGREEMENT,
    SINGLE_POINT,
    ComparisonUnit,
    expand_pair,
)
from any_two.times import TimeInterval


def _make_event(codes: str, start: int = 100, end: int = 108, owner: str = "A") -> Event:
    return Event.from_codes_field(codes, TimeInterval(start, end), owner)


_SAMPLE_EVENTS = [
    _make_event("ACE", owner="A"),
    _make_event("ACE", owner="B"),
    _make_event("CON", owner="B"),
    _make_event("ACE", start=90, end=98, owner="B"),
    _make_event("ANT", start=0, end=4, owner="C"),
]


def test_classification_follows_codes_and_presence() -> None:
    ace_a = _make_event("ACE", owner="A")
    ace_b = _make_event("ACE", start=102, end=110, owner="B")
    con_b = _make_event("CON", owner="B")

    assert ComparisonUnit(ace_a).classification == SINGLE_POINT
    assert ComparisonUnit(ace_a, ace_b).classification == AGREEMENT
    assert ComparisonUnit(ace_a, con_b).classification == DISAGREEMENT
    assert ComparisonUnit(ace_a, ace_b).is_agreement
    assert ComparisonUnit(ace_a, con_b).is_disagreement
    assert ComparisonUnit(ace_a).is_single_point


@pytest.mark.parametrize(
    "first, second", list(itertools.product(_SAMPLE_EVENTS, _SAMPLE_EVENTS))
)
def test_swapped_units_are_equal_and_hash_alike(first: Event, second: Event) -> None:
    forward = ComparisonUnit(first, second)
    backward = ComparisonUnit(second, first)

    assert forward == backward
    assert hash(forward) == hash(backward)
    assert len({forward, backward}) == 1


def test_units_with_different_sides_are_not_equal() -> None:
    ace_a = _make_event("ACE", owner="A")
    con_b = _make_event("CON", owner="B")
    ant_b = _make_event("ANT", owner="B")

    assert ComparisonUnit(ace_a, con_b) != ComparisonUnit(ace_a, ant_b)
    assert ComparisonUnit(ace_a) != ComparisonUnit(ace_a, con_b)
    assert ComparisonUnit(ace_a) == ComparisonUnit(_make_event("ACE", owner="Z"))


def test_expand_pair_without_target_gives_one_single_point_per_code() -> None:
    event = _make_event("ACE/CON/ACE")

    units = expand_pair(event, None)

    assert len(units) == 3
    assert [unit.a.codes for unit in units] == [("ACE",), ("CON",), ("ACE",)]
    assert all(unit.b is None for unit in units)
    assert all(unit.a.interval == event.interval for unit in units)


@pytest.mark.parametrize(
    "codes_a, codes_b",
    [("ACE", "ACE"), ("ACE/CON", "ACE"), ("ACE/CON", "ANT/IMP/PAS"), ("TED", "STP/RAN")],
)
def test_expand_pair_is_cartesian_product(codes_a: str, codes_b: str) -> None:
    first = _make_event(codes_a, owner="A")
    second = _make_event(codes_b, start=104, end=112, owner="B")

    units = expand_pair(first, second)

    expected = list(itertools.product(first.codes, second.codes))
    assert [(unit.a.codes[0], unit.b.codes[0]) for unit in units] == expected
    assert all(unit.a.owner == "A" and unit.b.owner == "B" for unit in units)
    assert all(unit.b.interval == second.interval for unit in units)


def test_multi_code_event_against_single_code_event() -> None:
    units = expand_pair(_make_event("ACE/CON"), _make_event("ACE", owner="B"))

    assert [unit.classification for unit in units] == [AGREEMENT, DISAGREEMENT]


def test_oriented_puts_requested_owner_first() -> None:
    ace_a = _make_event("ACE", owner="A")
    con_b = _make_event("CON", owner="B")

    assert ComparisonUnit(con_b, ace_a).oriented("A") == (ace_a, con_b)
    assert ComparisonUnit(ace_a, con_b).oriented("A") == (ace_a, con_b)
    assert ComparisonUnit(ace_a).oriented("B") == (ace_a, None)


def test_str_shows_both_sides_under_a_rule() -> None:
    unit = ComparisonUnit(_make_event("ACE"), _make_event("CON", owner="B"))
    lines = str(unit).splitlines()

    assert lines[0] == "-" * 25
    assert lines[1].startswith("[ACE]")
    assert lines[2].startswith("[CON]")
