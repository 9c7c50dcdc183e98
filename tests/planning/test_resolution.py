"""Tests for effective class parameter resolution."""

from datetime import date

import pytest
from pydantic import ValidationError

from clubcoach.planning.resolution import (
    resolve_cycle_length,
    resolve_cycle_start_date,
    resolve_duration_minutes,
    resolve_jump_target,
    resolve_mv_level,
    resolve_sessions_per_week,
)
from clubcoach.planning.types import ClassDescriptor


def test_mv_level_prefers_explicit_value():
    assert resolve_mv_level("MV3", "06-08") == "MV3"
    assert resolve_mv_level(None, "06-08") == "MV1"
    assert resolve_mv_level("", "12-14") == "MV3"


def test_unknown_mv_level_gets_highest_jump_range():
    assert resolve_jump_target("Elite", "06-08") == "30-60"


def test_cycle_length_default():
    assert resolve_cycle_length(4) == 4
    assert resolve_cycle_length(None) == 12


class TestSessionsPerWeek:
    def test_explicit_value_wins(self):
        descriptor = ClassDescriptor(id="c1", sessions_per_week=5, days_of_week=frozenset({1, 3}))
        assert resolve_sessions_per_week(descriptor) == 5

    def test_derived_from_weekdays(self):
        descriptor = ClassDescriptor(id="c1", days_of_week=frozenset({1, 3, 5}))
        assert resolve_sessions_per_week(descriptor) == 3

    @pytest.mark.parametrize("days", [frozenset(), frozenset({2})])
    def test_falls_back_to_two(self, days):
        assert resolve_sessions_per_week(ClassDescriptor(id="c1", days_of_week=days)) == 2


def test_cycle_start_falls_back_to_today():
    descriptor = ClassDescriptor(id="c1")
    assert resolve_cycle_start_date(descriptor, today=date(2026, 1, 5)) == date(2026, 1, 5)
    dated = ClassDescriptor(id="c1", cycle_start_date=date(2026, 2, 2))
    assert resolve_cycle_start_date(dated, today=date(2026, 1, 5)) == date(2026, 2, 2)


def test_duration_falls_back_to_configured_default():
    assert resolve_duration_minutes(ClassDescriptor(id="c1", duration_minutes=90)) == 90
    assert resolve_duration_minutes(ClassDescriptor(id="c1")) == 60


def test_descriptor_rejects_invalid_weekdays():
    with pytest.raises(ValidationError):
        ClassDescriptor(id="c1", days_of_week=frozenset({7}))
