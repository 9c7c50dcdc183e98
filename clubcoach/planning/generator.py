"""Plan generator.

Builds AUTO-sourced ClassPlan rows by combining the bucketed age band,
the base template for the week, the phase for the week and the class
skill level. Generation is deterministic in everything except id and
timestamps.
"""

import uuid
from datetime import date

from clubcoach.planning.age_band import resolve_plan_band
from clubcoach.planning.errors import PlanGenerationError
from clubcoach.planning.phase import get_phase_for_week, get_rpe_target
from clubcoach.planning.resolution import (
    resolve_cycle_length,
    resolve_cycle_start_date,
    resolve_jump_target,
)
from clubcoach.planning.templates import MV_FORMAT_BY_BAND, PHYSICAL_FOCUS_BY_BAND, get_template_for_week
from clubcoach.planning.types import ClassDescriptor, ClassPlan, PlanSource, utc_now


def new_plan_id(class_id: str, week_number: int) -> str:
    return f"cp_{class_id}_{uuid.uuid4().hex[:12]}_{week_number}"


def build_class_plan(
    *,
    class_id: str,
    age_band: str,
    start_date: date,
    week_number: int,
    source: PlanSource = "AUTO",
    mv_level: str | None = None,
    cycle_length: int | None = None,
) -> ClassPlan:
    """Build the plan for a single cycle week.

    Args:
        class_id: Class identifier
        age_band: Age band text (raw or already bucketed)
        start_date: Mesocycle start date
        week_number: 1-based week in the cycle
        source: Provenance tag for the new plan
        mv_level: Optional explicit skill level
        cycle_length: Cycle length in weeks (configured default when None)

    Returns:
        ClassPlan with a fresh id and timestamps

    Raises:
        PlanGenerationError: If week_number or cycle_length is not positive
    """
    length = resolve_cycle_length(cycle_length)
    if week_number < 1:
        raise PlanGenerationError(f"week_number must be >= 1, got {week_number}")
    if length < 1:
        raise PlanGenerationError(f"cycle_length must be >= 1, got {length}")

    band = resolve_plan_band(age_band)
    template = get_template_for_week(band, week_number)
    phase = get_phase_for_week(week_number, length)
    created_at = utc_now()

    return ClassPlan(
        id=new_plan_id(class_id, week_number),
        class_id=class_id,
        start_date=start_date,
        week_number=week_number,
        phase=phase,
        theme=template.focus,
        technical_focus=template.focus,
        physical_focus=PHYSICAL_FOCUS_BY_BAND[band],
        constraints=template.notes[0] if len(template.notes) > 0 else "",
        mv_format=MV_FORMAT_BY_BAND[band],
        warmup_profile=template.notes[1] if len(template.notes) > 1 else "",
        jump_target=resolve_jump_target(mv_level, band),
        rpe_target=get_rpe_target(phase),
        source=source,
        created_at=created_at,
        updated_at=created_at,
    )


def to_class_plans(
    *,
    class_id: str,
    age_band: str,
    cycle_length: int,
    start_date: date,
    mv_level: str | None = None,
) -> list[ClassPlan]:
    """Build AUTO plans for every week of a cycle (weeks 1..cycle_length)."""
    return [
        build_class_plan(
            class_id=class_id,
            age_band=age_band,
            start_date=start_date,
            week_number=week_number,
            source="AUTO",
            mv_level=mv_level,
            cycle_length=cycle_length,
        )
        for week_number in range(1, cycle_length + 1)
    ]


def build_auto_plan_for_week(
    descriptor: ClassDescriptor,
    week_number: int,
    existing: ClassPlan | None = None,
    today: date | None = None,
) -> ClassPlan:
    """Build an AUTO plan for a class week, reusing an existing row's identity.

    When existing is given the new plan keeps its id and created_at so it
    can be written back as an in-place update.
    """
    plan = build_class_plan(
        class_id=descriptor.id,
        age_band=descriptor.age_band,
        start_date=resolve_cycle_start_date(descriptor, today),
        week_number=week_number,
        source="AUTO",
        mv_level=descriptor.mv_level,
        cycle_length=descriptor.cycle_length_weeks,
    )
    if existing is not None:
        plan = plan.model_copy(update={"id": existing.id, "created_at": existing.created_at})
    return plan


def build_class_cycle(descriptor: ClassDescriptor, today: date | None = None) -> list[ClassPlan]:
    """Build the full AUTO cycle for a class."""
    return to_class_plans(
        class_id=descriptor.id,
        age_band=descriptor.age_band,
        cycle_length=descriptor.cycle_length_weeks,
        start_date=resolve_cycle_start_date(descriptor, today),
        mv_level=descriptor.mv_level,
    )
