"""
Deadline Service

PURPOSE:
Surface saved postings whose application deadline is close, and
back the dashboard's deadline calendar.

HOW IT WORKS:
1. Days remaining = deadline day - today, both as calendar dates
2. Keep deadlines due today through 7 days out (fixed window)
3. Sort soonest first
4. Calendar: 35 days (5 weeks x 7) starting on the Sunday of this week
5. Selecting a calendar day narrows the list to deadlines on that day

"today" is always passed in by the caller so results are deterministic.
"""

from datetime import date, datetime, timedelta
from typing import List, Optional, Union

from jobboard.core.logging import get_logger
from jobboard.schemas.schemas import SavedPosting, DeadlineEntry, CalendarDay

log = get_logger(__name__)

DEADLINE_WINDOW_DAYS = 7
URGENT_WINDOW_DAYS = 2
CALENDAR_WEEKS = 5
CALENDAR_DAYS = CALENDAR_WEEKS * 7

DateLike = Union[date, datetime]


def _as_date(value: DateLike) -> date:
    """Truncate a timestamp to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_until_deadline(deadline: DateLike, today: DateLike) -> int:
    """Whole days from today to the deadline. Negative once it has passed."""
    return (_as_date(deadline) - _as_date(today)).days


def is_past_date(day: DateLike, today: DateLike) -> bool:
    """True if day is strictly before today."""
    return _as_date(day) < _as_date(today)


# ============================================================
# UPCOMING DEADLINES
# ============================================================

def upcoming_deadlines(saved: List[SavedPosting], today: DateLike) -> List[DeadlineEntry]:
    """
    Deadlines among saved postings that fall between today and a week out.

    Postings without a deadline are skipped. A job saved more than once
    yields a single entry.

    Returns:
        DeadlineEntry list sorted by deadline, soonest first
    """
    entries = []
    seen = set()

    for saved_posting in saved or []:
        job = saved_posting.job
        if job.deadline is None or job.id in seen:
            continue

        days = days_until_deadline(job.deadline, today)
        if 0 <= days <= DEADLINE_WINDOW_DAYS:
            seen.add(job.id)
            entries.append(DeadlineEntry(job=job, days_until_deadline=days))

    entries.sort(key=lambda e: e.job.deadline)
    log.debug("Found %d upcoming deadlines in %d saved jobs", len(entries), len(saved or []))
    return entries


def urgent_deadlines(entries: List[DeadlineEntry], within_days: int = URGENT_WINDOW_DAYS) -> List[DeadlineEntry]:
    """Entries due within the next couple of days (dashboard alert)."""
    return [e for e in entries if e.days_until_deadline <= within_days]


def deadline_label(days: int) -> str:
    """Human-readable countdown for a deadline."""
    if days < 0:
        return "Expired"
    if days == 0:
        return "Due today!"
    if days == 1:
        return "Due tomorrow!"
    return f"{days} days left"


# ============================================================
# CALENDAR
# ============================================================

def build_calendar_grid(today: DateLike) -> List[date]:
    """
    35 consecutive dates starting at the Sunday on or before today.

    This is a fixed 5-week window, not the calendar month.
    """
    today = _as_date(today)
    # date.weekday(): Monday == 0 ... Sunday == 6
    start = today - timedelta(days=(today.weekday() + 1) % 7)
    return [start + timedelta(days=i) for i in range(CALENDAR_DAYS)]


def filter_by_date(entries: List[DeadlineEntry], selected: Optional[DateLike]) -> List[DeadlineEntry]:
    """
    Narrow entries to a selected calendar day.

    No selection returns the entries unchanged (the "all upcoming" view).
    """
    if selected is None:
        return entries
    selected = _as_date(selected)
    return [e for e in entries if e.job.deadline == selected]


def count_deadlines_on(entries: List[DeadlineEntry], day: DateLike) -> int:
    day = _as_date(day)
    return sum(1 for e in entries if e.job.deadline == day)


def has_deadline_on(entries: List[DeadlineEntry], day: DateLike) -> bool:
    return count_deadlines_on(entries, day) > 0


def is_selectable(entries: List[DeadlineEntry], day: DateLike, today: DateLike) -> bool:
    """A calendar day can be picked only if something is due and it is not past."""
    return has_deadline_on(entries, day) and not is_past_date(day, today)


def build_calendar_days(
    entries: List[DeadlineEntry],
    today: DateLike,
    selected: Optional[DateLike] = None
) -> List[CalendarDay]:
    """The calendar grid with per-day deadline counts and selection state."""
    today = _as_date(today)
    selected = _as_date(selected) if selected is not None else None

    days = []
    for day in build_calendar_grid(today):
        count = count_deadlines_on(entries, day)
        past = is_past_date(day, today)
        days.append(CalendarDay(
            day=day,
            deadline_count=count,
            is_past=past,
            is_today=day == today,
            is_selectable=count > 0 and not past,
            is_selected=selected is not None and day == selected,
        ))
    return days
