#!/usr/bin/env python3
"""
Deadline Service Test Script

Tests:
1. Days-until-deadline arithmetic on calendar dates
2. The 7-day upcoming window, ordering and de-duplication
3. The 35-day calendar grid
4. Filtering by a selected calendar day and selection rules

No database needed.
Run: python scripts/test_deadlines.py  (or pytest)
"""
import sys
sys.path.insert(0, '.')

from datetime import date, datetime, timedelta

from jobboard.schemas.schemas import DeadlineEntry
from jobboard.services.deadline_service import (
    days_until_deadline, upcoming_deadlines, urgent_deadlines, deadline_label,
    build_calendar_grid, filter_by_date, count_deadlines_on, has_deadline_on,
    is_past_date, is_selectable, build_calendar_days
)
from sample_data import make_job, make_saved, TODAY


def test_days_until_deadline():
    print("\n[1] Testing days until deadline...")

    assert days_until_deadline(date(2024, 3, 12), TODAY) == 2
    assert days_until_deadline(date(2024, 3, 20), TODAY) == 10
    assert days_until_deadline(date(2024, 3, 5), TODAY) == -5
    # Time of day never matters
    assert days_until_deadline(datetime(2024, 3, 11, 0, 5), datetime(2024, 3, 10, 23, 55)) == 1
    assert days_until_deadline(datetime(2024, 3, 10, 23, 59), datetime(2024, 3, 10, 0, 1)) == 0
    print("    ✅ Whole-day differences")


def test_upcoming_window_scenario():
    print("\n[2] Testing the 7-day window...")
    saved = [
        make_saved("soon", date(2024, 3, 12)),
        make_saved("later", date(2024, 3, 20)),
        make_saved("past", date(2024, 3, 5)),
    ]

    entries = upcoming_deadlines(saved, TODAY)

    print(f"    Entries: {[(e.job.id, e.days_until_deadline) for e in entries]} (expected: [('soon', 2)])")
    assert [(e.job.id, e.days_until_deadline) for e in entries] == [("soon", 2)]


def test_window_is_inclusive_and_sorted():
    saved = [
        make_saved("week", date(2024, 3, 17)),
        make_saved("today", date(2024, 3, 10)),
        make_saved("eight", date(2024, 3, 18)),
        make_saved("no-deadline", None),
        make_saved("mid", date(2024, 3, 13)),
        make_saved("today", date(2024, 3, 10)),
    ]

    entries = upcoming_deadlines(saved, TODAY)

    assert [e.job.id for e in entries] == ["today", "mid", "week"]
    assert [e.days_until_deadline for e in entries] == [0, 3, 7]
    assert all(0 <= e.days_until_deadline <= 7 for e in entries)
    assert upcoming_deadlines([], TODAY) == []


def test_urgent_and_labels():
    entries = upcoming_deadlines(
        [make_saved("a", date(2024, 3, 10)), make_saved("b", date(2024, 3, 11)),
         make_saved("c", date(2024, 3, 12)), make_saved("d", date(2024, 3, 15))],
        TODAY
    )

    assert [e.job.id for e in urgent_deadlines(entries)] == ["a", "b", "c"]
    assert [deadline_label(e.days_until_deadline) for e in entries] == [
        "Due today!", "Due tomorrow!", "2 days left", "5 days left"
    ]
    assert deadline_label(-1) == "Expired"


def test_calendar_grid():
    print("\n[3] Testing calendar grid...")

    for offset in range(14):
        today = date(2024, 2, 25) + timedelta(days=offset)
        grid = build_calendar_grid(today)

        assert len(grid) == 35
        assert grid[0].weekday() == 6  # Sunday
        assert grid[0] <= today < grid[0] + timedelta(days=7)
        assert grid[-1] == grid[0] + timedelta(days=34)
        assert all(b - a == timedelta(days=1) for a, b in zip(grid, grid[1:]))

    # Wednesday 2024-03-13 -> Sunday 2024-03-10, Sunday stays put
    assert build_calendar_grid(date(2024, 3, 13))[0] == date(2024, 3, 10)
    assert build_calendar_grid(TODAY)[0] == TODAY
    assert build_calendar_grid(datetime(2024, 3, 16, 18, 30))[0] == date(2024, 3, 10)
    print("    ✅ 35 days from Sunday")


def test_filter_by_date():
    print("\n[4] Testing date filter...")
    entries = [
        DeadlineEntry(job=make_job("a", deadline=date(2024, 3, 11)), days_until_deadline=1),
        DeadlineEntry(job=make_job("b", deadline=date(2024, 3, 12)), days_until_deadline=2),
        DeadlineEntry(job=make_job("c", deadline=date(2024, 3, 12)), days_until_deadline=2),
    ]

    assert filter_by_date(entries, None) == entries
    assert [e.job.id for e in filter_by_date(entries, date(2024, 3, 12))] == ["b", "c"]
    assert [e.job.id for e in filter_by_date(entries, datetime(2024, 3, 11, 15, 0))] == ["a"]
    assert filter_by_date(entries, date(2024, 3, 14)) == []
    assert filter_by_date([], date(2024, 3, 14)) == []


def test_selection_rules():
    entries = upcoming_deadlines(
        [make_saved("a", date(2024, 3, 12)), make_saved("b", date(2024, 3, 12))], TODAY
    )

    assert count_deadlines_on(entries, date(2024, 3, 12)) == 2
    assert has_deadline_on(entries, date(2024, 3, 12))
    assert not has_deadline_on(entries, date(2024, 3, 13))

    assert is_past_date(date(2024, 3, 9), TODAY)
    assert not is_past_date(TODAY, TODAY)

    assert is_selectable(entries, date(2024, 3, 12), TODAY)
    assert not is_selectable(entries, date(2024, 3, 13), TODAY)
    # Past days are never selectable, even with a deadline on them
    assert not is_selectable(entries, date(2024, 3, 12), date(2024, 3, 13))


def test_calendar_days():
    print("\n[5] Testing annotated calendar...")
    today = date(2024, 3, 13)
    entries = upcoming_deadlines(
        [make_saved("a", date(2024, 3, 15)), make_saved("b", date(2024, 3, 15)),
         make_saved("c", date(2024, 3, 20))],
        today
    )

    days = build_calendar_days(entries, today, selected=date(2024, 3, 15))
    by_day = {d.day: d for d in days}

    assert len(days) == 35
    assert days[0].day == date(2024, 3, 10)
    assert by_day[date(2024, 3, 11)].is_past and not by_day[date(2024, 3, 11)].is_selectable
    assert by_day[today].is_today and not by_day[today].is_past
    assert by_day[date(2024, 3, 15)].deadline_count == 2
    assert by_day[date(2024, 3, 15)].is_selectable and by_day[date(2024, 3, 15)].is_selected
    assert by_day[date(2024, 3, 20)].deadline_count == 1
    assert sum(d.is_selected for d in days) == 1
    assert sum(d.deadline_count for d in days) == 3
    print("    ✅ Calendar annotations correct")


def main():
    print("=" * 60)
    print("DEADLINE SERVICE TEST")
    print("=" * 60)

    try:
        test_days_until_deadline()
        test_upcoming_window_scenario()
        test_window_is_inclusive_and_sorted()
        test_urgent_and_labels()
        test_calendar_grid()
        test_filter_by_date()
        test_selection_rules()
        test_calendar_days()

        print("\n" + "=" * 60)
        print("✅ ALL DEADLINE TESTS PASSED!")
        print("=" * 60)
    except AssertionError as e:
        print(f"\n❌ Test failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
