"""
Per-habit summaries for the monthly habit tables.
"""

from datetime import date, datetime
from typing import Optional

from habit_tracker.aggregator import round_percent
from habit_tracker.calendar_partitioner import days_in_month, month_interval, weeks_in_month
from habit_tracker.intervals import contains, to_calendar_day
from habit_tracker.models import Cadence, Habit
from habit_tracker.streak_calculator import calculate_streak


def default_goal(cadence: Cadence | str, reference_day: date | datetime | str) -> int:
    """
    Return the default (and maximum) goal for a new habit.

    Daily habits default to one completion per day of the month, weekly
    habits to one per week shown in the month.
    """
    if Cadence(cadence) == Cadence.DAILY:
        return len(days_in_month(reference_day))
    return len(weeks_in_month(reference_day))


def _goal_percent(done: int, goal: int) -> int:
    if goal <= 0:
        return 0
    return round_percent(done / goal * 100)


def summarize_daily_habit(
    habit: Habit,
    reference_day: date | datetime | str,
    today: Optional[date] = None,
) -> dict:
    """
    Summarize a daily habit for one month.

    Args:
        habit: The habit to summarize
        reference_day: Any day of the month shown
        today: Streak anchor override for testing

    Returns:
        Dictionary with:
            - id, name, goal, color
            - done: Completions inside the month
            - remaining: Completions still needed to reach the goal
            - percent: done / goal, rounded
            - current_streak, longest_streak
            - weeks: For each week of the month, its in-month days with
              a completed flag
    """
    month = month_interval(reference_day)
    done = sum(1 for day in habit.completions if contains(day, month))
    streak = calculate_streak(habit.completions, today=today)

    weeks = []
    for week in weeks_in_month(reference_day):
        weeks.append({
            "start": week.start.isoformat(),
            "end": week.end.isoformat(),
            "days": [
                {"date": day.isoformat(), "completed": day in habit.completions}
                for day in week.days()
                if contains(day, month)
            ],
        })

    return {
        "id": habit.id,
        "name": habit.name,
        "goal": habit.goal,
        "color": habit.color,
        "done": done,
        "remaining": max(0, habit.goal - done),
        "percent": _goal_percent(done, habit.goal),
        "current_streak": streak["current"],
        "longest_streak": streak["longest"],
        "weeks": weeks,
    }


def summarize_weekly_habit(habit: Habit, reference_day: date | datetime | str) -> dict:
    """
    Summarize a weekly habit for one month.

    Weekly goals are absolute counts, so done covers every completion the
    habit has. A week is active when any completion falls inside it.
    """
    reference_day = to_calendar_day(reference_day)
    done = len(habit.completions)

    weeks = []
    for week in weeks_in_month(reference_day):
        weeks.append({
            "start": week.start.isoformat(),
            "end": week.end.isoformat(),
            "active": any(contains(day, week) for day in habit.completions),
        })

    return {
        "id": habit.id,
        "name": habit.name,
        "goal": habit.goal,
        "color": habit.color,
        "done": done,
        "remaining": max(0, habit.goal - done),
        "percent": _goal_percent(done, habit.goal),
        "weeks": weeks,
    }
