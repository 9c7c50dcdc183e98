"""Workload monitoring for class sessions (ACWR, pain and high-load streaks).

Session load is session-RPE style: perceived effort (PSE, 0-10) times the
nominal session duration in minutes.

Metrics:
- Acute load: sum of session load over the last 7 days
- Chronic load: sum of session load over the last 28 days divided by 4
- ACWR: acute / chronic, rounded to 2 decimals

The chronic sum includes the acute week, so a class with sessions only in
the last 7 days always reads ACWR 4.0. This matches the simplified formula
used by coaches in the field and is kept as-is.

Properties:
- Deterministic: Same input produces same output
- No signal instead of errors: an empty chronic window yields None
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Literal

from clubcoach.planning.types import SessionLog, as_utc
from clubcoach.planning.week_view import WeekPlan

ACUTE_WINDOW_DAYS = 7
CHRONIC_WINDOW_DAYS = 28
CHRONIC_WINDOW_WEEKS = CHRONIC_WINDOW_DAYS // 7

ACWR_HIGH_THRESHOLD = 1.3
ACWR_LOW_THRESHOLD = 0.8

PAIN_STREAK_LENGTH = 3
PAIN_SCORE_THRESHOLD = 2

AcwrStatus = Literal["high", "low", "normal"]

ACWR_MESSAGES: dict[AcwrStatus, str] = {
    "high": "Carga subiu mais de 30% nesta semana.",
    "low": "Carga semanal abaixo do padrao recente.",
    "normal": "Carga semanal dentro do esperado.",
}
ACWR_EXPLANATION = "ACWR e a razao entre a carga da ultima semana e a media das ultimas 4."
PAIN_ALERT_MESSAGE = "Dor nivel 2+ por 3 registros. Considere avaliar com profissional."
HIGH_LOAD_STREAK_MESSAGE = "Duas semanas seguidas em carga alta. Considere uma semana de recuperacao."
HIGH_LOAD_WEEK_MESSAGE = "Semana atual com carga alta. Monitore recuperacao e PSE."


@dataclass(frozen=True)
class AcwrResult:
    """Acute:chronic workload ratio with its classification.

    Attributes:
        ratio: ACWR rounded to 2 decimals
        status: "high" (> 1.3), "low" (< 0.8) or "normal"
        message: Coach-facing message for the status
        acute_load: Sum of PSE x duration over the acute window
        chronic_load: Weekly average load over the chronic window
    """

    ratio: float
    status: AcwrStatus
    message: str
    acute_load: float
    chronic_load: float


def session_load(log: SessionLog, duration_minutes: int) -> float:
    """Load of a single session (PSE x duration)."""
    return log.pse * duration_minutes


def classify_acwr(ratio: float) -> AcwrStatus:
    if ratio > ACWR_HIGH_THRESHOLD:
        return "high"
    if ratio < ACWR_LOW_THRESHOLD:
        return "low"
    return "normal"


def compute_acwr(
    logs: list[SessionLog],
    duration_minutes: int = 60,
    now: datetime | None = None,
) -> AcwrResult | None:
    """Compute the acute:chronic workload ratio for a class.

    Args:
        logs: Session logs of one class (logs outside the 28-day window are ignored)
        duration_minutes: Nominal session duration
        now: Reference time (defaults to current UTC time)

    Returns:
        AcwrResult, or None when the chronic load is zero

    Example:
        >>> now = datetime(2026, 3, 1, tzinfo=timezone.utc)
        >>> logs = [SessionLog(class_id="c1", created_at=now - timedelta(days=d), pse=6) for d in range(7)]
        >>> compute_acwr(logs, 60, now=now).ratio
        4.0
    """
    now = as_utc(now or datetime.now(timezone.utc))
    chronic_start = now - timedelta(days=CHRONIC_WINDOW_DAYS)
    acute_start = now - timedelta(days=ACUTE_WINDOW_DAYS)

    window = [log for log in logs if chronic_start <= as_utc(log.created_at) <= now]
    acute_load = sum(session_load(log, duration_minutes) for log in window if as_utc(log.created_at) >= acute_start)
    chronic_load = sum(session_load(log, duration_minutes) for log in window) / CHRONIC_WINDOW_WEEKS

    if chronic_load <= 0:
        return None

    ratio = round(acute_load / chronic_load, 2)
    status = classify_acwr(ratio)
    return AcwrResult(
        ratio=ratio,
        status=status,
        message=ACWR_MESSAGES[status],
        acute_load=acute_load,
        chronic_load=chronic_load,
    )


def detect_pain_streak(logs: list[SessionLog]) -> bool:
    """Whether the 3 most recent pain-scored logs all report pain >= 2.

    Logs without a pain score are ignored. Fewer than 3 pain-scored logs
    never raise the alert.
    """
    scored = sorted(
        (log for log in logs if log.pain_score is not None),
        key=lambda log: as_utc(log.created_at),
        reverse=True,
    )[:PAIN_STREAK_LENGTH]
    streak = sum(1 for log in scored if (log.pain_score or 0) >= PAIN_SCORE_THRESHOLD)
    return streak >= PAIN_STREAK_LENGTH


def has_high_load_streak(week_plans: list[WeekPlan]) -> bool:
    """Whether two consecutive weeks are both high ("alto") volume."""
    streak = 0
    for week in week_plans:
        streak = streak + 1 if week.volume == "alto" else 0
        if streak >= 2:
            return True
    return False


def build_load_warning(week_plans: list[WeekPlan], active_week: WeekPlan | None) -> str | None:
    """Cycle-level load warning.

    Priority: consecutive high weeks -> active week is high -> no warning.
    """
    if has_high_load_streak(week_plans):
        return HIGH_LOAD_STREAK_MESSAGE
    if active_week is not None and active_week.volume == "alto":
        return HIGH_LOAD_WEEK_MESSAGE
    return None
