"""AUTO/MANUAL provenance rules.

A stored plan is promoted to MANUAL as soon as a saved draft differs from
it in any content field. Saving an unchanged draft keeps whatever
provenance the stored plan already had.
"""

from datetime import date

from clubcoach.planning.age_band import resolve_plan_band
from clubcoach.planning.generator import new_plan_id
from clubcoach.planning.phase import get_phase_for_week, get_rpe_target
from clubcoach.planning.resolution import resolve_cycle_start_date, resolve_jump_target
from clubcoach.planning.templates import MV_FORMAT_BY_BAND, PHYSICAL_FOCUS_BY_BAND
from clubcoach.planning.types import ClassDescriptor, ClassPlan, PlanDraft, PlanSource, utc_now

DEFAULT_THEME = "Fundamentos"

# Content fields compared when deciding provenance. Identity and timestamps are excluded.
PLAN_CONTENT_FIELDS: tuple[str, ...] = (
    "phase",
    "theme",
    "technical_focus",
    "physical_focus",
    "constraints",
    "mv_format",
    "warmup_profile",
    "jump_target",
    "rpe_target",
)


def plan_content(plan: ClassPlan) -> tuple[str, ...]:
    """Content values of a plan in PLAN_CONTENT_FIELDS order."""
    return tuple(getattr(plan, field) for field in PLAN_CONTENT_FIELDS)


def changed_fields(existing: ClassPlan, draft: ClassPlan) -> list[str]:
    """Names of content fields whose values differ between two plans."""
    return [
        field
        for field, old, new in zip(PLAN_CONTENT_FIELDS, plan_content(existing), plan_content(draft), strict=True)
        if old != new
    ]


def has_plan_changes(existing: ClassPlan | None, draft: ClassPlan) -> bool:
    """Whether saving draft over existing changes any content field.

    A draft with no stored counterpart always counts as a change.
    """
    if existing is None:
        return True
    return plan_content(existing) != plan_content(draft)


def resolve_source(existing: ClassPlan | None, draft: ClassPlan) -> PlanSource:
    """Provenance a saved draft ends up with.

    Rules:
    - any content change (or no stored plan): MANUAL
    - unchanged content: the stored plan's source
    """
    if existing is None or has_plan_changes(existing, draft):
        return "MANUAL"
    return existing.source


def build_plan_from_draft(
    descriptor: ClassDescriptor,
    week_number: int,
    draft: PlanDraft,
    *,
    source: PlanSource = "MANUAL",
    existing: ClassPlan | None = None,
    today: date | None = None,
) -> ClassPlan:
    """Turn an edited draft into a full plan for a week.

    Draft text is trimmed; blank fields fall back in this order:
    - phase: phase for the week in the class cycle
    - theme: "Fundamentos"
    - technical_focus: theme -> "Fundamentos"
    - physical_focus, mv_format, jump_target: band defaults
    - rpe_target: target for the week's generated phase
    - constraints, warmup_profile: empty

    The existing row's id and created_at are kept when given.
    """
    band = resolve_plan_band(descriptor.age_band)
    cycle_phase = get_phase_for_week(week_number, descriptor.cycle_length_weeks)
    now = utc_now()
    theme = draft.theme.strip()

    return ClassPlan(
        id=existing.id if existing is not None else new_plan_id(descriptor.id, week_number),
        class_id=descriptor.id,
        start_date=resolve_cycle_start_date(descriptor, today),
        week_number=week_number,
        phase=draft.phase.strip() or cycle_phase,
        theme=theme or DEFAULT_THEME,
        technical_focus=draft.technical_focus.strip() or theme or DEFAULT_THEME,
        physical_focus=draft.physical_focus.strip() or PHYSICAL_FOCUS_BY_BAND[band],
        constraints=draft.constraints.strip(),
        mv_format=draft.mv_format.strip() or MV_FORMAT_BY_BAND[band],
        warmup_profile=draft.warmup_profile.strip(),
        jump_target=draft.jump_target.strip() or resolve_jump_target(descriptor.mv_level, band),
        rpe_target=draft.rpe_target.strip() or get_rpe_target(cycle_phase),
        source=source,
        created_at=existing.created_at if existing is not None else now,
        updated_at=now,
    )
