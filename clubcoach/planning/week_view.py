"""Derived, non-persisted week views.

WeekPlan combines a stored ClassPlan (or a template stand-in when the
class has no stored plans) with the template volume level used for load
warnings and cycle overviews. Volume always comes from the base
template, never from the stored plan.
"""

from collections import Counter
from dataclasses import dataclass
from datetime import date

from clubcoach.planning.age_band import resolve_plan_band
from clubcoach.planning.phase import get_phase_for_week, get_rpe_target
from clubcoach.planning.resolution import resolve_jump_target
from clubcoach.planning.templates import (
    MV_FORMAT_BY_BAND,
    PHYSICAL_FOCUS_BY_BAND,
    VOLUME_ORDER,
    VOLUME_TO_RATIO,
    get_template_for_week,
)
from clubcoach.planning.types import ClassDescriptor, ClassPlan, PlanSource, VolumeLevel


@dataclass(frozen=True)
class WeekPlan:
    week: int
    title: str
    focus: str
    volume: VolumeLevel
    notes: tuple[str, ...]
    jump_target: str
    rpe_target: str

    @property
    def volume_ratio(self) -> float:
        return VOLUME_TO_RATIO[self.volume]


@dataclass(frozen=True)
class PeriodizationRow:
    """Flat row describing one cycle week for tables and exports."""

    week: int
    phase: str
    theme: str
    technical_focus: str
    physical_focus: str
    constraints: str
    mv_format: str
    jump_target: str
    rpe_target: str
    source: PlanSource


def build_week_plans(plans: list[ClassPlan], descriptor: ClassDescriptor) -> list[WeekPlan]:
    """Build the week views for a class.

    Stored plans win when present; otherwise one template stand-in is
    generated per cycle week.
    """
    band = resolve_plan_band(descriptor.age_band)

    if plans:
        weeks: list[WeekPlan] = []
        for plan in sorted(plans, key=lambda p: p.week_number):
            template = get_template_for_week(band, plan.week_number)
            weeks.append(
                WeekPlan(
                    week=plan.week_number,
                    title=plan.phase,
                    focus=plan.theme,
                    volume=template.volume,
                    notes=tuple(note for note in (plan.constraints, plan.warmup_profile) if note),
                    jump_target=plan.jump_target or resolve_jump_target(descriptor.mv_level, band),
                    rpe_target=plan.rpe_target or get_rpe_target(plan.phase),
                )
            )
        return weeks

    length = descriptor.cycle_length_weeks
    weeks = []
    for week_number in range(1, length + 1):
        template = get_template_for_week(band, week_number)
        phase = get_phase_for_week(week_number, length)
        weeks.append(
            WeekPlan(
                week=week_number,
                title=phase,
                focus=template.focus,
                volume=template.volume,
                notes=template.notes,
                jump_target=resolve_jump_target(descriptor.mv_level, band),
                rpe_target=get_rpe_target(phase),
            )
        )
    return weeks


def get_current_week(start_date: date | None, total_weeks: int, today: date | None = None) -> int:
    """1-based cycle week containing today, clamped to the cycle.

    Returns 1 when the cycle has no start date or no weeks.
    """
    if start_date is None or total_weeks < 1:
        return 1
    today = today or date.today()
    week = (today - start_date).days // 7 + 1
    return max(1, min(week, total_weeks))


def get_active_week(week_plans: list[WeekPlan], current_week: int) -> WeekPlan | None:
    if not week_plans:
        return None
    index = max(0, min(current_week - 1, len(week_plans) - 1))
    return week_plans[index]


def count_volumes(week_plans: list[WeekPlan]) -> dict[VolumeLevel, int]:
    """Number of weeks per volume level, in baixo/medio/alto order."""
    counts = Counter(week.volume for week in week_plans)
    return {level: counts.get(level, 0) for level in VOLUME_ORDER}


def build_periodization_rows(
    plans: list[ClassPlan],
    week_plans: list[WeekPlan],
    descriptor: ClassDescriptor,
) -> list[PeriodizationRow]:
    """Rows for the cycle table: stored plans when present, else template weeks."""
    if plans:
        return [
            PeriodizationRow(
                week=plan.week_number,
                phase=plan.phase,
                theme=plan.theme,
                technical_focus=plan.technical_focus,
                physical_focus=plan.physical_focus,
                constraints=plan.constraints,
                mv_format=plan.mv_format,
                jump_target=plan.jump_target,
                rpe_target=plan.rpe_target,
                source=plan.source,
            )
            for plan in sorted(plans, key=lambda p: p.week_number)
        ]

    band = resolve_plan_band(descriptor.age_band)
    return [
        PeriodizationRow(
            week=week.week,
            phase=week.title,
            theme=week.focus,
            technical_focus=week.focus,
            physical_focus=PHYSICAL_FOCUS_BY_BAND[band],
            constraints=" | ".join(week.notes),
            mv_format=MV_FORMAT_BY_BAND[band],
            jump_target=week.jump_target,
            rpe_target=week.rpe_target,
            source="AUTO",
        )
        for week in week_plans
    ]
