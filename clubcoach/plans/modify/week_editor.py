"""MODIFY -> week editor.

Coach-facing operations on single cycle weeks:
- open_week_draft: editor content for a week (stored plan or generated stand-in)
- save_week: persist a draft, promoting provenance to MANUAL on any change
- reset_week_to_auto: discard manual edits and restore generated content
- apply_draft_to_weeks: copy a draft onto other weeks as MANUAL plans
"""

from datetime import date

from loguru import logger

from clubcoach.db.plan_store import PlanStore
from clubcoach.planning.errors import InvalidWeekError
from clubcoach.planning.generator import build_auto_plan_for_week
from clubcoach.planning.provenance import build_plan_from_draft, changed_fields, resolve_source
from clubcoach.planning.types import ClassDescriptor, ClassPlan, PlanDraft, PlanSource, utc_now


def _validate_week(descriptor: ClassDescriptor, week_number: int) -> None:
    if week_number < 1 or week_number > descriptor.cycle_length_weeks:
        raise InvalidWeekError(week_number, descriptor.cycle_length_weeks)


def _find_week(plans: list[ClassPlan], week_number: int) -> ClassPlan | None:
    return next((plan for plan in plans if plan.week_number == week_number), None)


def open_week_draft(
    store: PlanStore,
    descriptor: ClassDescriptor,
    week_number: int,
    today: date | None = None,
) -> tuple[PlanDraft, PlanSource]:
    """Editor content for a week and the provenance shown alongside it.

    Weeks without a stored plan are pre-filled with generated AUTO content.
    """
    _validate_week(descriptor, week_number)
    existing = _find_week(store.list_plans(descriptor.id), week_number)
    if existing is not None:
        return PlanDraft.from_plan(existing), existing.source
    generated = build_auto_plan_for_week(descriptor, week_number, today=today)
    return PlanDraft.from_plan(generated), "AUTO"


def save_week(
    store: PlanStore,
    descriptor: ClassDescriptor,
    week_number: int,
    draft: PlanDraft,
    today: date | None = None,
) -> ClassPlan:
    """Persist an edited week.

    Provenance is decided by the diff against the stored plan alone:
    - draft differs from the stored plan in any content field: MANUAL
    - no stored plan for the week: MANUAL
    - identical draft: stored source is kept

    Args:
        store: Plan store
        descriptor: Class owning the week
        week_number: Week being edited
        draft: Edited content
        today: Fallback cycle start date

    Returns:
        The saved plan

    Raises:
        InvalidWeekError: If week_number is outside the cycle
    """
    _validate_week(descriptor, week_number)
    existing = _find_week(store.list_plans(descriptor.id), week_number)
    plan = build_plan_from_draft(
        descriptor,
        week_number,
        draft,
        existing=existing,
        today=today,
    )
    plan = plan.model_copy(update={"source": resolve_source(existing, plan)})

    if existing is not None:
        store.update_plan(plan)
    else:
        store.create_plan(plan)

    logger.info(
        "Saved class plan week",
        class_id=descriptor.id,
        week_number=week_number,
        source=plan.source,
        changed=changed_fields(existing, plan) if existing is not None else "new",
    )
    return plan


def reset_week_to_auto(
    store: PlanStore,
    descriptor: ClassDescriptor,
    week_number: int,
    today: date | None = None,
) -> ClassPlan:
    """Discard manual edits of a week and store freshly generated AUTO content.

    The stored row keeps its id and created_at; a week without a row gets one.

    Raises:
        InvalidWeekError: If week_number is outside the cycle
    """
    _validate_week(descriptor, week_number)
    existing = _find_week(store.list_plans(descriptor.id), week_number)
    plan = build_auto_plan_for_week(descriptor, week_number, existing=existing, today=today)

    if existing is not None:
        plan = plan.model_copy(update={"updated_at": utc_now()})
        store.update_plan(plan)
    else:
        store.create_plan(plan)

    logger.info(
        "Reset class plan week to AUTO",
        class_id=descriptor.id,
        week_number=week_number,
        previous_source=existing.source if existing is not None else None,
    )
    return plan


def apply_draft_to_weeks(
    store: PlanStore,
    descriptor: ClassDescriptor,
    editing_week: int,
    draft: PlanDraft,
    weeks: list[int],
    today: date | None = None,
) -> list[ClassPlan]:
    """Copy a draft onto other weeks of the cycle.

    Target weeks outside [1, cycle_length] and the week being edited are
    ignored. Weeks with a stored plan are updated in place, the rest are
    bulk-created. Every copy is MANUAL.

    Returns:
        The written plans, ordered by week number
    """
    targets = sorted(
        {week for week in weeks if 1 <= week <= descriptor.cycle_length_weeks and week != editing_week}
    )
    if not targets:
        logger.debug("No target weeks to apply draft to", class_id=descriptor.id, editing_week=editing_week)
        return []

    existing_by_week = {plan.week_number: plan for plan in store.list_plans(descriptor.id)}
    to_create: list[ClassPlan] = []
    to_update: list[ClassPlan] = []
    for week_number in targets:
        existing = existing_by_week.get(week_number)
        plan = build_plan_from_draft(
            descriptor,
            week_number,
            draft,
            source="MANUAL",
            existing=existing,
            today=today,
        )
        if existing is not None:
            to_update.append(plan)
        else:
            to_create.append(plan)

    if to_create:
        store.create_plans(to_create)
    for plan in to_update:
        store.update_plan(plan)

    logger.info(
        "Applied draft to weeks",
        class_id=descriptor.id,
        editing_week=editing_week,
        created=[plan.week_number for plan in to_create],
        updated=[plan.week_number for plan in to_update],
    )
    return sorted(to_create + to_update, key=lambda plan: plan.week_number)
