"""Deterministic phase resolution.

This module computes the training phase of a cycle week from its
position in the mesocycle. No state is involved - phase is a pure
function of week number and cycle length.
"""

import math
from types import MappingProxyType
from typing import Mapping

from clubcoach.planning.types import Phase

# Cycles this long get fixed 4-week Base and Desenvolvimento blocks.
FIXED_CUTOFF_MIN_CYCLE = 9

RPE_TARGET_BY_PHASE: Mapping[str, str] = MappingProxyType(
    {
        "Base": "4-5",
        "Desenvolvimento": "5-6",
        "Consolidacao": "6-7",
    }
)


def get_phase_for_week(week_number: int, cycle_length: int) -> Phase:
    """Resolve training phase for a cycle week.

    Phase determination logic:
    - cycle_length >= 9: weeks 1-4 Base, 5-8 Desenvolvimento, 9+ Consolidacao
    - shorter cycles: split into thirds with chunk = ceil(cycle_length / 3);
      weeks 1..chunk Base, chunk+1..2*chunk Desenvolvimento, rest Consolidacao

    Args:
        week_number: 1-based week in the cycle
        cycle_length: Mesocycle length in weeks

    Returns:
        Phase string: "Base" | "Desenvolvimento" | "Consolidacao"
    """
    if cycle_length >= FIXED_CUTOFF_MIN_CYCLE:
        if week_number <= 4:
            return "Base"
        if week_number <= 8:
            return "Desenvolvimento"
        return "Consolidacao"

    chunk = max(1, math.ceil(cycle_length / 3))
    if week_number <= chunk:
        return "Base"
    if week_number <= chunk * 2:
        return "Desenvolvimento"
    return "Consolidacao"


def get_rpe_target(phase: str) -> str:
    """Target perceived-effort range (0-10 scale) for a phase.

    Unknown phase labels (e.g., coach-typed text) get the Consolidacao range.
    """
    return RPE_TARGET_BY_PHASE.get(phase, RPE_TARGET_BY_PHASE["Consolidacao"])
