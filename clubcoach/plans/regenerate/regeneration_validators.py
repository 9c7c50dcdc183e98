"""Validators for class plan regeneration.

Hard safety layer that runs before any write.
"""

from loguru import logger

from clubcoach.planning.errors import RegenerationNotConfirmedError
from clubcoach.planning.types import ClassDescriptor
from clubcoach.plans.regenerate.types import RegenerationRequest


def validate_regeneration(req: RegenerationRequest, descriptor: ClassDescriptor) -> None:
    """Validate a regeneration request.

    Rules:
    1. "all" mode requires explicit confirmation (it destroys MANUAL weeks)

    Args:
        req: Regeneration request
        descriptor: Class being regenerated

    Raises:
        RegenerationNotConfirmedError: If "all" is requested without confirm
    """
    if req.mode == "all" and not req.confirm:
        raise RegenerationNotConfirmedError(
            f"Regenerating all weeks of class {descriptor.id} replaces AUTO and MANUAL weeks. "
            "Set confirm=True to proceed."
        )

    logger.info(
        "Regeneration validation passed",
        class_id=descriptor.id,
        mode=req.mode,
        cycle_length=descriptor.cycle_length_weeks,
    )
