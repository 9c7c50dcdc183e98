"""Service orchestrator for class plan regeneration.

This is the public entry point for plan regeneration.
"""

from datetime import date

from loguru import logger

from clubcoach.db.plan_store import PlanStore
from clubcoach.planning.types import ClassDescriptor
from clubcoach.plans.regenerate.regeneration_executor import execute_regeneration
from clubcoach.plans.regenerate.regeneration_validators import validate_regeneration
from clubcoach.plans.regenerate.types import RegenerationMode, RegenerationRequest, RegenerationResult


def regenerate_plan(
    *,
    store: PlanStore,
    descriptor: ClassDescriptor,
    req: RegenerationRequest,
) -> RegenerationResult:
    """Regenerate a class's plans.

    Flow:
    1. Run validators (nothing is written when they fail)
    2. Execute regeneration through the store

    Raises:
        RegenerationNotConfirmedError: If "all" is requested without confirmation
        Exception: Store errors propagate unchanged
    """
    logger.info(
        "Starting class plan regeneration",
        class_id=descriptor.id,
        mode=req.mode,
        reason=req.reason,
    )
    validate_regeneration(req, descriptor)
    try:
        return execute_regeneration(store=store, descriptor=descriptor, req=req)
    except Exception:
        logger.exception("Class plan regeneration failed", class_id=descriptor.id, mode=req.mode)
        raise


def regenerate_class_plans(
    store: PlanStore,
    descriptor: ClassDescriptor,
    mode: RegenerationMode,
    *,
    confirm: bool = False,
    today: date | None = None,
) -> RegenerationResult:
    """Convenience wrapper building the RegenerationRequest."""
    return regenerate_plan(
        store=store,
        descriptor=descriptor,
        req=RegenerationRequest(mode=mode, confirm=confirm, today=today),
    )
