"""Weekly session scheduling.

Maps a target sessions-per-week count and a class's configured weekdays
onto a Monday-first 7-day session/rest pattern.

Day numbers follow the class configuration convention: 0=Sunday..6=Saturday.
Slots are always returned Monday first (Seg, Ter, Qua, Qui, Sex, Sab, Dom).
"""

from dataclasses import dataclass
from datetime import date, timedelta
from types import MappingProxyType
from typing import Mapping

DAY_LABELS: tuple[str, ...] = ("Seg", "Ter", "Qua", "Qui", "Sex", "Sab", "Dom")
DAY_NUMBERS_BY_LABEL_INDEX: tuple[int, ...] = (1, 2, 3, 4, 5, 6, 0)
MAX_SESSIONS_PER_WEEK = 7

# Slot indexes (0=Mon) used when the class has no configured weekdays.
FALLBACK_SLOTS_BY_SESSION_COUNT: Mapping[int, tuple[int, ...]] = MappingProxyType(
    {
        2: (0, 2),
        3: (0, 2, 4),
        4: (0, 1, 3, 5),
        5: (0, 1, 2, 4, 5),
        6: (0, 1, 2, 3, 4, 5),
        7: (0, 1, 2, 3, 4, 5, 6),
    }
)


@dataclass(frozen=True)
class ScheduleSlot:
    """One day of the weekly schedule.

    Attributes:
        label: Short weekday label ("Seg".."Dom")
        day_number: Weekday number (0=Sunday..6=Saturday)
        session: Session focus, or None on rest days
    """

    label: str
    day_number: int
    session: str | None = None

    @property
    def is_rest(self) -> bool:
        return self.session is None


def primary_focus(week_focus: str, fallback_title: str = "") -> str:
    """First comma-separated segment of the focus text, else the fallback title."""
    first = week_focus.split(",")[0].strip()
    return first or fallback_title


def _selected_slots(sessions_per_week: int, class_weekdays: frozenset[int] | set[int]) -> tuple[int, ...]:
    target_count = min(sessions_per_week, MAX_SESSIONS_PER_WEEK)
    ordered_class_slots = [
        index for index, day_number in enumerate(DAY_NUMBERS_BY_LABEL_INDEX) if day_number in class_weekdays
    ]
    if ordered_class_slots:
        return tuple(ordered_class_slots[: max(0, min(target_count, len(ordered_class_slots)))])
    return FALLBACK_SLOTS_BY_SESSION_COUNT.get(target_count, FALLBACK_SLOTS_BY_SESSION_COUNT[2])


def get_week_schedule(
    week_focus: str,
    sessions_per_week: int,
    class_weekdays: frozenset[int] | set[int],
    fallback_title: str = "",
) -> list[ScheduleSlot]:
    """Build the Monday-first schedule for a week.

    Rules:
    - sessions_per_week is capped at 7
    - with configured weekdays: first min(sessions, len(weekdays)) of them, Monday first
    - without: fixed pattern by session count (counts below 2 use the 2-session pattern)
    - every selected slot carries the week's primary focus; the rest are rest days

    Args:
        week_focus: Focus text of the week (comma-separated)
        sessions_per_week: Target number of sessions
        class_weekdays: Weekdays the class meets (0=Sunday..6=Saturday)
        fallback_title: Label used when the focus text is empty (usually the phase)

    Returns:
        Seven ScheduleSlot entries, Monday to Sunday
    """
    focus = primary_focus(week_focus, fallback_title)
    selected = set(_selected_slots(sessions_per_week, class_weekdays))
    return [
        ScheduleSlot(
            label=label,
            day_number=DAY_NUMBERS_BY_LABEL_INDEX[index],
            session=focus if index in selected else None,
        )
        for index, label in enumerate(DAY_LABELS)
    ]


def next_date_for_day_number(day_number: int, today: date | None = None) -> date:
    """Next date (today included) falling on a weekday number (0=Sunday)."""
    today = today or date.today()
    # date.weekday() is Monday=0; shift to the Sunday=0 convention.
    today_number = (today.weekday() + 1) % 7
    return today + timedelta(days=(day_number - today_number) % 7)


def next_session_date(class_weekdays: frozenset[int] | set[int], today: date | None = None) -> date | None:
    """Earliest upcoming class date, None when the class has no weekdays."""
    if not class_weekdays:
        return None
    return min(next_date_for_day_number(day, today) for day in class_weekdays)
