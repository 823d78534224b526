"""
Calculate habit streaks from a set of completion days.
"""

from datetime import date, datetime, timedelta
from typing import Iterable

from habit_tracker.intervals import to_calendar_day


def calculate_streak(
    completions: Iterable[date | datetime | str],
    today: date | str | None = None,
) -> dict:
    """
    Calculate streak information for one habit.

    Args:
        completions: Days the habit was completed, in any order.
            Dates, datetimes and YYYY-MM-DD strings are accepted;
            duplicates collapse to one day.
        today: Override today's date for testing. Defaults to the
            current local date.

    Returns:
        Dictionary with streak statistics:
        - current: Consecutive completed days ending today (0 if today is missing)
        - longest: Longest run of consecutive completed days
        - active: Whether the habit was completed today
        - last_completion_date: Most recent completion (YYYY-MM-DD) or None
    """
    days = {to_calendar_day(day) for day in completions}

    if not days:
        return {
            "current": 0,
            "longest": 0,
            "active": False,
            "last_completion_date": None,
        }

    if today is None:
        today = date.today()
    else:
        today = to_calendar_day(today)

    return {
        "current": _calculate_current_streak(days, today),
        "longest": _calculate_longest_streak(sorted(days)),
        "active": today in days,
        "last_completion_date": max(days).isoformat(),
    }


def _calculate_current_streak(days: set[date], today: date) -> int:
    """
    Count consecutive completed days walking backwards from today.

    Args:
        days: Set of completion days
        today: Anchor day; the streak is 0 unless it is completed

    Returns:
        Current streak count
    """
    streak = 0
    cursor = today

    while cursor in days:
        streak += 1
        cursor -= timedelta(days=1)

    return streak


def _calculate_longest_streak(days: list[date]) -> int:
    """
    Calculate the longest run of consecutive days.

    Args:
        days: Sorted list of unique completion days (ascending)

    Returns:
        Longest streak count
    """
    if not days:
        return 0

    longest = 1
    run = 1

    for previous, current in zip(days, days[1:]):
        if current - previous == timedelta(days=1):
            run += 1
            longest = max(longest, run)
        else:
            run = 1

    return longest
