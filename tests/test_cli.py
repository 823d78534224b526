"""
Tests for CLI display functions.
"""

import io
from contextlib import redirect_stdout
from datetime import date

from habit_tracker.cli import (
    display_month_grid,
    display_progress,
    display_ranking,
    display_streak,
    format_habit_row,
    get_milestone_message,
)


def capture(func, *args, **kwargs) -> str:
    output = io.StringIO()
    with redirect_stdout(output):
        func(*args, **kwargs)
    return output.getvalue()


class TestGetMilestoneMessage:
    """Tests for milestone messages."""

    def test_7_day_milestone(self):
        assert get_milestone_message(7) == "One week strong!"

    def test_30_day_milestone(self):
        assert get_milestone_message(30) == "One month champion!"

    def test_100_day_milestone(self):
        assert get_milestone_message(100) == "100 days - legendary!"

    def test_no_milestone(self):
        assert get_milestone_message(5) is None
        assert get_milestone_message(99) is None


class TestDisplayStreak:
    """Tests for streak display."""

    def test_no_active_streak(self):
        result = capture(display_streak, "Cardio", {"current": 0, "longest": 4, "active": False})
        assert "Cardio: No active streak" in result
        assert "best 4" in result

    def test_single_day_streak(self):
        result = capture(display_streak, "Cardio", {"current": 1, "longest": 1, "active": True})
        assert "1 day " in result

    def test_streak_with_milestone(self):
        result = capture(display_streak, "Cardio", {"current": 7, "longest": 7, "active": True})
        assert "7 days" in result
        assert "One week strong!" in result


class TestDisplayMonthGrid:
    """Tests for the month grid."""

    def test_header_and_week_rows(self):
        # February 2026 is exactly four Sunday-start weeks
        result = capture(display_month_grid, set(), date(2026, 2, 10))
        lines = [line for line in result.splitlines() if line.strip()]

        assert lines[0] == "February 2026"
        assert lines[1].strip().startswith("Sun")
        assert len(lines) == 2 + 4

    def test_completed_days_marked(self):
        result = capture(display_month_grid, {date(2026, 2, 1)}, date(2026, 2, 10))
        first_week = result.splitlines()[2]

        assert first_week.strip().startswith("[*]")
        assert first_week.count("[ ]") == 6

    def test_focused_day_highlighted(self):
        result = capture(
            display_month_grid, {date(2026, 2, 3)}, date(2026, 2, 10), focused_day="2026-02-03"
        )
        assert "<*>" in result

    def test_days_outside_month_blank(self):
        # January 2024 starts on Monday, so Sunday 2023-12-31 is blank
        result = capture(display_month_grid, set(), date(2024, 1, 10))
        first_week = result.splitlines()[2]

        assert first_week.count("[ ]") == 6


class TestDisplayProgress:
    """Tests for progress display."""

    def test_rounds_for_display(self):
        result = capture(display_progress, "weekly", 42.857)
        assert "Weekly progress: 43%" in result


class TestDisplayRanking:
    """Tests for ranking display."""

    def test_entries_are_numbered(self):
        ranking = [
            {"id": "a", "name": "Cardio", "percent": 90},
            {"id": "b", "name": "Reading", "percent": 40},
        ]
        result = capture(display_ranking, "Top daily habits", ranking)

        assert "Top daily habits" in result
        assert " 1. Cardio" in result
        assert " 2. Reading" in result
        assert "90%" in result

    def test_empty_ranking(self):
        result = capture(display_ranking, "Top weekly habits", [])
        assert "(no habits)" in result


class TestFormatHabitRow:
    """Tests for habit row formatting."""

    def test_daily_row_includes_streak(self):
        summary = {
            "name": "Cardio",
            "done": 5,
            "goal": 16,
            "remaining": 11,
            "percent": 31,
            "current_streak": 2,
            "longest_streak": 4,
        }
        row = format_habit_row(summary)

        assert "Cardio" in row
        assert "5/16" in row
        assert "left  11" in row
        assert "streak 2/4" in row

    def test_weekly_row_has_no_streak(self):
        summary = {"name": "Meal Prep", "done": 1, "goal": 4, "remaining": 3, "percent": 25}
        assert "streak" not in format_habit_row(summary)

    def test_long_names_truncated(self):
        summary = {"name": "A" * 40, "done": 0, "goal": 1, "remaining": 1, "percent": 0}
        assert "A" * 21 + "..." in format_habit_row(summary)
