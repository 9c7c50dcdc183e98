"""Tests for the weekly session scheduler."""

from datetime import date

import pytest

from clubcoach.calendar.schedule import (
    DAY_LABELS,
    get_week_schedule,
    next_date_for_day_number,
    next_session_date,
    primary_focus,
)

FOCUS = "Fundamentos e controle de bola, cooperacao"


def _session_labels(slots):
    return [slot.label for slot in slots if not slot.is_rest]


def test_explicit_weekdays_get_the_sessions():
    slots = get_week_schedule(FOCUS, 3, frozenset({1, 3, 5}))

    assert [slot.label for slot in slots] == list(DAY_LABELS)
    assert _session_labels(slots) == ["Seg", "Qua", "Sex"]
    assert {slot.day_number for slot in slots if not slot.is_rest} == {1, 3, 5}
    assert all(slot.session == "Fundamentos e controle de bola" for slot in slots if not slot.is_rest)
    assert all(slot.session is None for slot in slots if slot.label in ("Ter", "Qui", "Sab", "Dom"))


def test_weekdays_are_taken_monday_first():
    """Sunday (0) is the last slot of the week."""
    slots = get_week_schedule(FOCUS, 2, frozenset({0, 2, 6}))
    assert _session_labels(slots) == ["Ter", "Sab"]


def test_fewer_weekdays_than_sessions_uses_all_weekdays():
    slots = get_week_schedule(FOCUS, 5, frozenset({2, 4}))
    assert _session_labels(slots) == ["Ter", "Qui"]


@pytest.mark.parametrize(
    ("sessions", "expected"),
    [
        (2, ["Seg", "Qua"]),
        (3, ["Seg", "Qua", "Sex"]),
        (4, ["Seg", "Ter", "Qui", "Sab"]),
        (5, ["Seg", "Ter", "Qua", "Sex", "Sab"]),
        (6, ["Seg", "Ter", "Qua", "Qui", "Sex", "Sab"]),
        (7, list(DAY_LABELS)),
        (12, list(DAY_LABELS)),
        (1, ["Seg", "Qua"]),
    ],
)
def test_fallback_pattern_without_weekdays(sessions, expected):
    assert _session_labels(get_week_schedule(FOCUS, sessions, frozenset())) == expected


def test_empty_focus_uses_fallback_title():
    slots = get_week_schedule("", 2, frozenset(), fallback_title="Base")
    assert {slot.session for slot in slots if not slot.is_rest} == {"Base"}


def test_primary_focus():
    assert primary_focus(" Toque , manchete") == "Toque"
    assert primary_focus(", manchete", "Base") == "Base"


class TestNextDates:
    def test_same_day_counts(self):
        monday = date(2026, 3, 2)
        assert next_date_for_day_number(1, monday) == monday

    def test_rolls_into_next_week(self):
        monday = date(2026, 3, 2)
        assert next_date_for_day_number(0, monday) == date(2026, 3, 8)
        assert next_date_for_day_number(6, monday) == date(2026, 3, 7)

    def test_next_session_is_earliest_weekday(self):
        thursday = date(2026, 3, 5)
        assert next_session_date(frozenset({1, 3}), thursday) == date(2026, 3, 9)
        assert next_session_date(frozenset({1, 4}), thursday) == thursday

    def test_no_weekdays(self):
        assert next_session_date(frozenset(), date(2026, 3, 5)) is None
