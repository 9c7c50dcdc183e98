"""Executor for class plan regeneration.

Applies a validated regeneration request through the plan store. Writes
are issued sequentially, one call per affected week (bulk create where
possible). A failure part-way leaves earlier weeks written; "fill" and
"auto" are safe to retry.
"""

from loguru import logger

from clubcoach.db.plan_store import PlanStore
from clubcoach.planning.generator import build_auto_plan_for_week, build_class_cycle
from clubcoach.planning.types import ClassDescriptor, ClassPlan, utc_now
from clubcoach.plans.regenerate.types import RegenerationRequest, RegenerationResult


def execute_regeneration(
    *,
    store: PlanStore,
    descriptor: ClassDescriptor,
    req: RegenerationRequest,
) -> RegenerationResult:
    """Execute class plan regeneration.

    Flow ("fill" / "auto"):
    1. Load stored plans for the class
    2. For each cycle week: create when missing; in "auto" mode rebuild stored AUTO plans
    3. Bulk-create new weeks, then update rebuilt weeks one by one

    Flow ("all"):
    1. Build the full AUTO cycle
    2. Delete every stored plan for the class
    3. Bulk-create the cycle

    Args:
        store: Plan store
        descriptor: Class being regenerated
        req: Validated regeneration request

    Returns:
        RegenerationResult describing what was written
    """
    if req.mode == "all":
        plans = build_class_cycle(descriptor, today=req.today)
        deleted = store.delete_plans_by_class(descriptor.id)
        store.create_plans(plans)
        logger.info(
            "Recreated full class cycle",
            class_id=descriptor.id,
            deleted=deleted,
            weeks=len(plans),
        )
        return RegenerationResult(
            mode=req.mode,
            created=[plan.week_number for plan in plans],
            deleted=deleted,
        )

    existing_by_week = {plan.week_number: plan for plan in store.list_plans(descriptor.id)}
    to_create: list[ClassPlan] = []
    to_update: list[ClassPlan] = []
    skipped: list[int] = []

    for week_number in range(1, descriptor.cycle_length_weeks + 1):
        existing = existing_by_week.get(week_number)
        if existing is None:
            to_create.append(build_auto_plan_for_week(descriptor, week_number, today=req.today))
            continue
        if req.mode == "auto" and existing.source == "AUTO":
            plan = build_auto_plan_for_week(descriptor, week_number, existing=existing, today=req.today)
            to_update.append(plan.model_copy(update={"updated_at": utc_now()}))
            continue
        skipped.append(week_number)

    if to_create:
        store.create_plans(to_create)
    for plan in to_update:
        store.update_plan(plan)

    logger.info(
        "Regenerated class plans",
        class_id=descriptor.id,
        mode=req.mode,
        created=len(to_create),
        updated=len(to_update),
        skipped=len(skipped),
    )
    return RegenerationResult(
        mode=req.mode,
        created=[plan.week_number for plan in to_create],
        updated=[plan.week_number for plan in to_update],
        skipped=skipped,
    )
