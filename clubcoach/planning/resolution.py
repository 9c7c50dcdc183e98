"""Explicit fallback chains for effective class parameters.

Each resolver documents its precedence so callers never rely on inline
optional chaining to decide which value wins.
"""

from datetime import date

from clubcoach.config.settings import settings
from clubcoach.planning.templates import DEFAULT_MV_LEVEL_BY_BAND, JUMP_TARGET_BY_MV_LEVEL
from clubcoach.planning.types import SESSIONS_PER_WEEK_OPTIONS, ClassDescriptor, PlanBand

DEFAULT_SESSIONS_PER_WEEK = 2
HIGHEST_JUMP_TARGET = JUMP_TARGET_BY_MV_LEVEL["MV3"]


def resolve_mv_level(mv_level: str | None, band: PlanBand) -> str:
    """Effective skill level.

    Order: explicit non-blank level -> band default (MV1/MV2/MV3).
    """
    if mv_level and mv_level.strip():
        return mv_level.strip()
    return DEFAULT_MV_LEVEL_BY_BAND[band]


def resolve_jump_target(mv_level: str | None, band: PlanBand) -> str:
    """Jump-count range for the effective skill level.

    Order: resolved skill level lookup -> highest range for unknown levels.
    """
    level = resolve_mv_level(mv_level, band)
    return JUMP_TARGET_BY_MV_LEVEL.get(level, HIGHEST_JUMP_TARGET)


def resolve_cycle_length(cycle_length: int | None) -> int:
    """Order: explicit length -> configured default (12)."""
    if cycle_length is not None:
        return cycle_length
    return settings.default_cycle_length_weeks


def resolve_sessions_per_week(descriptor: ClassDescriptor) -> int:
    """Effective microcycle density.

    Order: explicit sessions_per_week -> number of configured weekdays
    (when it is a supported option) -> 2.
    """
    if descriptor.sessions_per_week is not None:
        return descriptor.sessions_per_week
    day_count = len(descriptor.days_of_week)
    if day_count in SESSIONS_PER_WEEK_OPTIONS:
        return day_count
    return DEFAULT_SESSIONS_PER_WEEK


def resolve_cycle_start_date(descriptor: ClassDescriptor, today: date | None = None) -> date:
    """Order: configured cycle start -> today."""
    if descriptor.cycle_start_date is not None:
        return descriptor.cycle_start_date
    return today or date.today()


def resolve_duration_minutes(descriptor: ClassDescriptor) -> int:
    """Order: class duration -> configured default session duration (60)."""
    if descriptor.duration_minutes:
        return descriptor.duration_minutes
    return settings.default_session_duration_minutes
