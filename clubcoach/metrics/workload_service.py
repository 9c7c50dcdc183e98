"""Workload report for a class.

Loads the last 28 days of session logs through the plan store and
combines ACWR, pain streak and cycle load warnings into one report.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone

from loguru import logger

from clubcoach.db.plan_store import PlanStore
from clubcoach.metrics.workload import (
    ACWR_EXPLANATION,
    CHRONIC_WINDOW_DAYS,
    PAIN_ALERT_MESSAGE,
    AcwrResult,
    build_load_warning,
    compute_acwr,
    detect_pain_streak,
)
from clubcoach.planning.resolution import resolve_duration_minutes
from clubcoach.planning.types import ClassDescriptor, as_utc
from clubcoach.planning.week_view import build_week_plans, get_active_week, get_current_week


@dataclass(frozen=True)
class WorkloadReport:
    """Load signals for a class.

    Attributes:
        acwr: Workload ratio, None when there is no chronic load
        pain_alert: Pain streak message, None when no alert
        load_warning: Cycle volume warning, None when no warning
        guidance: Items to surface to the coach, in display order
        details: Explanations keyed by guidance item
    """

    acwr: AcwrResult | None
    pain_alert: str | None
    load_warning: str | None
    guidance: list[str] = field(default_factory=list)
    details: dict[str, str] = field(default_factory=dict)


def assess_class_workload(
    store: PlanStore,
    descriptor: ClassDescriptor,
    now: datetime | None = None,
    today: date | None = None,
) -> WorkloadReport:
    """Build the workload report for a class.

    Store errors propagate to the caller.
    """
    now = as_utc(now or datetime.now(timezone.utc))
    today = today or now.date()
    start = now - timedelta(days=CHRONIC_WINDOW_DAYS)

    logs = [log for log in store.list_session_logs(start, now) if log.class_id == descriptor.id]
    acwr = compute_acwr(logs, resolve_duration_minutes(descriptor), now=now)
    pain_alert = PAIN_ALERT_MESSAGE if detect_pain_streak(logs) else None

    plans = store.list_plans(descriptor.id)
    week_plans = build_week_plans(plans, descriptor)
    cycle_start = descriptor.cycle_start_date or (plans[0].start_date if plans else None)
    current_week = get_current_week(cycle_start, len(week_plans), today)
    load_warning = build_load_warning(week_plans, get_active_week(week_plans, current_week))

    guidance: list[str] = []
    details: dict[str, str] = {}
    if load_warning:
        guidance.append(load_warning)
    if acwr is not None:
        acwr_summary = f"ACWR {acwr.ratio}"
        guidance.append(acwr_summary)
        details[acwr_summary] = ACWR_EXPLANATION

    logger.info(
        "Assessed class workload",
        class_id=descriptor.id,
        logs=len(logs),
        acwr=acwr.ratio if acwr else None,
        pain_alert=pain_alert is not None,
        current_week=current_week,
    )
    return WorkloadReport(
        acwr=acwr,
        pain_alert=pain_alert,
        load_warning=load_warning,
        guidance=guidance,
        details=details,
    )
