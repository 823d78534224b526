"""
Per-day series for the month charts.

Builds the combined daily progress line and the per-habit completion
matrix for every day of a month.
"""

from datetime import date
from typing import Iterable, Optional

from habit_tracker.aggregator import calculate_progress, filter_habits
from habit_tracker.calendar_partitioner import days_in_month
from habit_tracker.models import Cadence, Habit, Timeframe


def calculate_progress_series(
    habits: Iterable[Habit],
    reference_day: Optional[date] = None,
    focused_habit_id: Optional[str] = None,
) -> list[dict]:
    """
    Calculate the daily completion percentage for each day of a month.

    Args:
        habits: All habits
        reference_day: Any day of the month (defaults to today)
        focused_habit_id: Chart a single habit instead of all daily habits

    Returns:
        List of {day, date, value} where value is the percentage of the
        filtered habits completed that day. A focused habit charts 100 or 0.
    """
    if reference_day is None:
        reference_day = date.today()

    selected = filter_habits(habits, Cadence.DAILY, focused_habit_id)

    return [
        {
            "day": day.day,
            "date": day.isoformat(),
            "value": calculate_progress(selected, Timeframe.DAILY, day),
        }
        for day in days_in_month(reference_day)
    ]


def calculate_completion_matrix(
    habits: Iterable[Habit],
    reference_day: Optional[date] = None,
    focused_habit_id: Optional[str] = None,
) -> list[dict]:
    """
    Calculate per-habit completion flags for each day of a month.

    Args:
        habits: All habits
        reference_day: Any day of the month (defaults to today)
        focused_habit_id: Only include this habit

    Returns:
        List with one row per day: {day, date, <habit id>: 0 or 1, ...}
    """
    if reference_day is None:
        reference_day = date.today()

    selected = filter_habits(habits, Cadence.DAILY, focused_habit_id)

    rows = []
    for day in days_in_month(reference_day):
        row = {"day": day.day, "date": day.isoformat()}
        for habit in selected:
            row[habit.id] = 1 if day in habit.completions else 0
        rows.append(row)

    return rows
