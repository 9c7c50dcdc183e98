"""Domain types for class plan regeneration.

Regeneration rebuilds AUTO content for a class cycle. Three modes exist:
- fill: create AUTO plans only for weeks with no stored plan
- auto: fill gaps and rebuild every stored AUTO plan in place; MANUAL untouched
- all: delete every stored plan and recreate the full AUTO cycle (destructive)
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

RegenerationMode = Literal["fill", "auto", "all"]


class RegenerationRequest(BaseModel):
    """Request to regenerate a class's plans.

    Attributes:
        mode: Regeneration mode ("fill", "auto" or "all")
        confirm: Explicit confirmation, required by the destructive "all" mode
        today: Fallback cycle start date when the class has none (defaults to today)
        reason: Optional reason for regeneration
    """

    mode: RegenerationMode = "fill"
    confirm: bool = False
    today: date | None = None
    reason: str | None = None


class RegenerationResult(BaseModel):
    """Outcome of a regeneration.

    Attributes:
        mode: Mode that was applied
        created: Week numbers that received a new AUTO plan
        updated: Week numbers whose AUTO plan was rebuilt in place
        deleted: Number of stored plans removed ("all" mode only)
        skipped: Week numbers left untouched
    """

    mode: RegenerationMode
    created: list[int] = Field(default_factory=list)
    updated: list[int] = Field(default_factory=list)
    deleted: int = 0
    skipped: list[int] = Field(default_factory=list)
