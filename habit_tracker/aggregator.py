"""
Aggregate completion progress and rankings across habits.
"""

import math
from datetime import date, datetime
from typing import Iterable

from habit_tracker.calendar_partitioner import (
    days_in_month,
    month_interval,
    week_containing,
    year_interval,
)
from habit_tracker.intervals import DateInterval, contains, to_calendar_day
from habit_tracker.models import Cadence, Habit, Timeframe

DAILY_RANKING_LIMIT = 10
WEEKLY_RANKING_LIMIT = 3

# Expected completions per habit in a weekly window
DAYS_PER_WEEK = 7
MONTHS_PER_YEAR = 12


def round_percent(value: float) -> int:
    """Round a percentage half-up to the nearest integer."""
    return int(math.floor(value + 0.5))


def filter_habits(
    habits: Iterable[Habit],
    cadence: Cadence | str = Cadence.DAILY,
    focused_habit_id: str | None = None,
) -> list[Habit]:
    """
    Select the habits a progress figure is computed over.

    Args:
        habits: All habits, in display order
        cadence: Cadence to keep when no habit is focused
        focused_habit_id: Restrict the set to this habit when given

    Returns:
        The focused habit alone (empty if it is unknown), otherwise the
        habits with the given cadence in their original order
    """
    if focused_habit_id is not None:
        return [habit for habit in habits if habit.id == focused_habit_id][:1]

    cadence = Cadence(cadence)
    return [habit for habit in habits if habit.cadence == cadence]


def timeframe_window(timeframe: Timeframe | str, focused_day: date | datetime | str) -> DateInterval:
    """
    Return the date window a timeframe covers around the focused day.

    Weekly is the Sunday-start week containing the day, monthly and yearly
    are the calendar month and year containing it, daily is the day itself.
    """
    timeframe = Timeframe(timeframe)
    focused_day = to_calendar_day(focused_day)

    if timeframe == Timeframe.WEEKLY:
        return week_containing(focused_day)
    if timeframe == Timeframe.MONTHLY:
        return month_interval(focused_day)
    if timeframe == Timeframe.YEARLY:
        return year_interval(focused_day)
    return DateInterval(focused_day, focused_day)


def _expected_count(habit: Habit, timeframe: Timeframe) -> int:
    if timeframe == Timeframe.WEEKLY:
        return DAYS_PER_WEEK
    if timeframe == Timeframe.MONTHLY:
        return habit.goal
    return habit.goal * MONTHS_PER_YEAR


def calculate_progress(
    habits: Iterable[Habit],
    timeframe: Timeframe | str,
    focused_day: date | datetime | str,
) -> float:
    """
    Calculate the completion percentage of a habit set for a timeframe.

    Args:
        habits: The already filtered habit set
        timeframe: daily, weekly, monthly or yearly
        focused_day: Day the timeframe is anchored to

    Returns:
        Unrounded percentage. Daily progress is the share of habits
        completed on the focused day. The other timeframes divide the
        completions inside the window by the expected count: 7 per habit
        for a week, the goal for a month, twelve times the goal for a
        year. An empty set or a non-positive target gives 0.0.
    """
    habits = list(habits)
    timeframe = Timeframe(timeframe)
    focused_day = to_calendar_day(focused_day)

    if not habits:
        return 0.0

    if timeframe == Timeframe.DAILY:
        done = sum(1 for habit in habits if focused_day in habit.completions)
        return done / len(habits) * 100

    window = timeframe_window(timeframe, focused_day)
    done_total = 0
    target_total = 0

    for habit in habits:
        done_total += sum(1 for day in habit.completions if contains(day, window))
        target_total += _expected_count(habit, timeframe)

    if target_total <= 0:
        return 0.0

    return done_total / target_total * 100


def rank_daily_habits(
    habits: Iterable[Habit],
    reference_day: date | datetime | str,
    limit: int = DAILY_RANKING_LIMIT,
) -> list[dict]:
    """
    Rank daily habits by how many days of the month they were completed.

    Args:
        habits: All habits; weekly ones are skipped
        reference_day: Any day of the month to rank
        limit: Number of entries kept after sorting

    Returns:
        List of {id, name, percent} sorted by percent descending. Ties keep
        their input order.
    """
    month_days = days_in_month(reference_day)
    month = DateInterval(month_days[0], month_days[-1])

    ranking = []
    for habit in filter_habits(habits, Cadence.DAILY):
        done = sum(1 for day in habit.completions if contains(day, month))
        ranking.append({
            "id": habit.id,
            "name": habit.name,
            "percent": round_percent(done / len(month_days) * 100),
        })

    ranking.sort(key=lambda entry: entry["percent"], reverse=True)
    return ranking[:limit]


def rank_weekly_habits(
    habits: Iterable[Habit],
    limit: int = WEEKLY_RANKING_LIMIT,
) -> list[dict]:
    """
    Rank weekly habits by completions against their goal.

    Args:
        habits: All habits; daily ones are skipped
        limit: Number of entries kept after sorting

    Returns:
        List of {id, name, percent} sorted by percent descending. Ties keep
        their input order. A non-positive goal ranks at 0.
    """
    ranking = []
    for habit in filter_habits(habits, Cadence.WEEKLY):
        if habit.goal > 0:
            percent = round_percent(len(habit.completions) / habit.goal * 100)
        else:
            percent = 0
        ranking.append({"id": habit.id, "name": habit.name, "percent": percent})

    ranking.sort(key=lambda entry: entry["percent"], reverse=True)
    return ranking[:limit]
