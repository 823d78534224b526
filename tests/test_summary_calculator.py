"""
Tests for the per-habit monthly summaries.
"""

from datetime import date

from habit_tracker.models import Habit
from habit_tracker.summary_calculator import default_goal, summarize_daily_habit, summarize_weekly_habit


class TestDefaultGoal:
    """Tests for default_goal."""

    def test_daily_goal_is_days_in_month(self):
        assert default_goal("daily", date(2024, 2, 10)) == 29
        assert default_goal("daily", date(2026, 1, 10)) == 31

    def test_weekly_goal_is_weeks_in_month(self):
        assert default_goal("weekly", date(2026, 2, 10)) == 4
        assert default_goal("weekly", date(2024, 1, 10)) == 5


class TestSummarizeDailyHabit:
    """Tests for summarize_daily_habit."""

    def test_counts_only_reference_month(self):
        habit = Habit(
            id="a",
            name="Cardio",
            goal=4,
            color="#4cceac",
            completions={"2026-01-30", "2026-01-31", "2026-02-01"},
        )

        summary = summarize_daily_habit(habit, date(2026, 1, 15), today=date(2026, 2, 1))

        assert summary["done"] == 2
        assert summary["remaining"] == 2
        assert summary["percent"] == 50
        assert summary["color"] == "#4cceac"
        assert summary["current_streak"] == 3
        assert summary["longest_streak"] == 3

    def test_remaining_never_negative(self):
        habit = Habit(id="a", name="Cardio", goal=1, completions={"2026-01-02", "2026-01-03"})

        summary = summarize_daily_habit(habit, date(2026, 1, 15), today=date(2026, 1, 3))

        assert summary["remaining"] == 0
        assert summary["percent"] == 200

    def test_zero_goal_percent_is_zero(self):
        habit = Habit(id="a", name="Cardio", goal=0, completions={"2026-01-02"})

        summary = summarize_daily_habit(habit, date(2026, 1, 15), today=date(2026, 1, 3))

        assert summary["percent"] == 0

    def test_weeks_list_only_in_month_days(self):
        # January 2024: first week starts Sunday 2023-12-31
        habit = Habit(id="a", name="Cardio", goal=10, completions={"2024-01-01"})

        summary = summarize_daily_habit(habit, date(2024, 1, 15), today=date(2024, 1, 1))
        first_week = summary["weeks"][0]

        assert first_week["start"] == "2023-12-31"
        assert [d["date"] for d in first_week["days"]][0] == "2024-01-01"
        assert len(first_week["days"]) == 6
        assert first_week["days"][0]["completed"] is True
        assert sum(len(w["days"]) for w in summary["weeks"]) == 31


class TestSummarizeWeeklyHabit:
    """Tests for summarize_weekly_habit."""

    def test_week_active_when_any_completion_inside(self):
        habit = Habit(
            id="w",
            name="Meal Prep",
            cadence="weekly",
            goal=4,
            completions={"2026-02-01", "2026-02-18"},
        )

        summary = summarize_weekly_habit(habit, date(2026, 2, 10))

        assert [w["active"] for w in summary["weeks"]] == [True, False, True, False]
        assert summary["done"] == 2
        assert summary["remaining"] == 2
        assert summary["percent"] == 50

    def test_done_counts_all_completions(self):
        habit = Habit(
            id="w",
            name="Meal Prep",
            cadence="weekly",
            goal=2,
            completions={"2025-12-07", "2026-02-01", "2026-03-01"},
        )

        summary = summarize_weekly_habit(habit, date(2026, 2, 10))

        assert summary["done"] == 3
        assert summary["remaining"] == 0
        assert summary["percent"] == 150
