"""Tests for deterministic phase resolution.

Tests that:
- Long cycles (>= 9 weeks) use fixed 4-week Base and Desenvolvimento blocks
- Short cycles are split into thirds
- Each phase maps to its perceived-effort target
"""

import pytest

from clubcoach.planning.phase import get_phase_for_week, get_rpe_target


@pytest.mark.parametrize("cycle_length", [9, 10, 12, 16])
def test_long_cycles_use_fixed_cutoffs(cycle_length):
    """Weeks 1-4 are Base, 5-8 Desenvolvimento, 9+ Consolidacao."""
    for week in range(1, cycle_length + 1):
        phase = get_phase_for_week(week, cycle_length)
        if week <= 4:
            assert phase == "Base"
        elif week <= 8:
            assert phase == "Desenvolvimento"
        else:
            assert phase == "Consolidacao"


def test_four_week_cycle_splits_into_thirds():
    """chunk = ceil(4 / 3) = 2: two Base weeks, two Desenvolvimento weeks.

    The chunk rule leaves nothing for Consolidacao in a 4-week cycle, the
    same split the mobile app's periodization screen shows.
    """
    phases = [get_phase_for_week(week, 4) for week in range(1, 5)]
    assert phases == ["Base", "Base", "Desenvolvimento", "Desenvolvimento"]
    assert "Consolidacao" not in phases


@pytest.mark.parametrize(
    ("cycle_length", "expected"),
    [
        (1, ["Base"]),
        (2, ["Base", "Desenvolvimento"]),
        (3, ["Base", "Desenvolvimento", "Consolidacao"]),
        (6, ["Base", "Base", "Desenvolvimento", "Desenvolvimento", "Consolidacao", "Consolidacao"]),
        (8, ["Base"] * 3 + ["Desenvolvimento"] * 3 + ["Consolidacao"] * 2),
    ],
)
def test_short_cycle_phases(cycle_length, expected):
    assert [get_phase_for_week(week, cycle_length) for week in range(1, cycle_length + 1)] == expected


def test_eight_week_cycle_has_no_fixed_base_block():
    """An 8-week cycle is below the fixed cutoff, so week 4 is already Desenvolvimento."""
    assert get_phase_for_week(4, 8) == "Desenvolvimento"
    assert get_phase_for_week(4, 9) == "Base"


class TestRpeTarget:
    @pytest.mark.parametrize(
        ("phase", "expected"),
        [("Base", "4-5"), ("Desenvolvimento", "5-6"), ("Consolidacao", "6-7")],
    )
    def test_phase_targets(self, phase, expected):
        assert get_rpe_target(phase) == expected

    def test_unknown_phase_uses_highest_target(self):
        assert get_rpe_target("Pre-temporada") == "6-7"
