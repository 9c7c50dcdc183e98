"""Domain types for class periodization.

This module defines the records exchanged between the planning core
and its collaborators:
- ClassDescriptor: read-only class configuration supplied by the caller
- ClassPlan: one persisted plan row per class and week
- SessionLog: one logged session with perceived effort
- PlanDraft: coach-edited week content before it is saved
"""

from datetime import date, datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field, field_validator

PlanBand = Literal["06-08", "09-11", "12-14"]
Phase = Literal["Base", "Desenvolvimento", "Consolidacao"]
PlanSource = Literal["AUTO", "MANUAL"]
VolumeLevel = Literal["baixo", "medio", "alto"]

CYCLE_LENGTH_OPTIONS: tuple[int, ...] = (2, 3, 4, 5, 6, 8, 10, 12)
SESSIONS_PER_WEEK_OPTIONS: tuple[int, ...] = tuple(range(2, 15))


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on read)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ClassDescriptor(BaseModel):
    """Read-only class configuration consumed by the planner.

    Attributes:
        id: Class identifier
        name: Display name
        age_band: Free-text age band (e.g., "9-11", "09-11 anos")
        cycle_start_date: First day of the current mesocycle (today when None)
        cycle_length_weeks: Mesocycle length in weeks
        sessions_per_week: Target microcycle density (derived from days_of_week when None)
        mv_level: Explicit skill level override ("MV1" | "MV2" | "MV3")
        days_of_week: Weekdays the class meets (0=Sunday..6=Saturday)
        duration_minutes: Nominal session duration
    """

    id: str
    name: str = ""
    age_band: str = ""
    cycle_start_date: date | None = None
    cycle_length_weeks: int = Field(default=12, ge=1)
    sessions_per_week: int | None = Field(default=None, ge=1)
    mv_level: str | None = None
    days_of_week: frozenset[int] = frozenset()
    duration_minutes: int | None = Field(default=None, gt=0)

    @field_validator("days_of_week")
    @classmethod
    def validate_days_of_week(cls, value: frozenset[int]) -> frozenset[int]:
        """Validate weekday numbers are within 0 (Sunday) to 6 (Saturday)."""
        invalid = sorted(day for day in value if day < 0 or day > 6)
        if invalid:
            raise ValueError(f"days_of_week must be between 0 and 6, got {invalid}")
        return value


class ClassPlan(BaseModel):
    """Persisted periodization plan for one class week.

    At most one plan exists per (class_id, week_number).
    """

    id: str
    class_id: str
    start_date: date
    week_number: int = Field(ge=1)
    phase: str
    theme: str = ""
    technical_focus: str = ""
    physical_focus: str = ""
    constraints: str = ""
    mv_format: str = ""
    warmup_profile: str = ""
    jump_target: str = ""
    rpe_target: str = ""
    source: PlanSource = "AUTO"
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


class SessionLog(BaseModel):
    """Logged class session used for workload monitoring.

    Attributes:
        class_id: Class the session belongs to
        created_at: When the session was logged
        pse: Perceived effort on a 0-10 scale
        pain_score: Optional reported pain level
        technique: Optional technique rating ("boa" | "ok" | "ruim")
        attendance: Optional number of attending students
    """

    class_id: str
    created_at: datetime
    pse: float = Field(ge=0, le=10)
    pain_score: float | None = None
    technique: Literal["boa", "ok", "ruim"] | None = None
    attendance: int | None = Field(default=None, ge=0)


class PlanDraft(BaseModel):
    """Coach-edited content for a week.

    Blank fields fall back to generated defaults when the draft is
    turned into a plan.
    """

    phase: str = ""
    theme: str = ""
    technical_focus: str = ""
    physical_focus: str = ""
    constraints: str = ""
    mv_format: str = ""
    warmup_profile: str = ""
    jump_target: str = ""
    rpe_target: str = ""

    @classmethod
    def from_plan(cls, plan: ClassPlan) -> "PlanDraft":
        """Build a draft pre-filled with a stored plan's content."""
        return cls(
            phase=plan.phase,
            theme=plan.theme,
            technical_focus=plan.technical_focus,
            physical_focus=plan.physical_focus,
            constraints=plan.constraints,
            mv_format=plan.mv_format,
            warmup_profile=plan.warmup_profile,
            jump_target=plan.jump_target,
            rpe_target=plan.rpe_target,
        )
