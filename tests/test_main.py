"""
Tests for the console dashboard entry point.
"""

import io
from contextlib import redirect_stdout
from datetime import date
from unittest.mock import patch

import pytest

from habit_tracker.main import main
from habit_tracker.storage import HabitStore


@pytest.fixture
def store(tmp_path):
    return HabitStore(tmp_path / "habits.db")


@patch("habit_tracker.main.SEED_DEFAULT_HABITS", False)
def test_empty_store(store):
    output = io.StringIO()
    with redirect_stdout(output):
        code = main(today=date(2026, 1, 20), store=store)

    assert code == 0
    assert "No habits yet." in output.getvalue()


@patch("habit_tracker.main.SEED_DEFAULT_HABITS", True)
def test_dashboard_with_seeded_habits(store):
    output = io.StringIO()
    with redirect_stdout(output):
        code = main(today=date(2026, 1, 20), store=store)

    result = output.getvalue()
    assert code == 0
    assert "January 2026" in result
    assert "Daily progress: 0%" in result
    assert "Morning Cardio" in result
    assert "Meal Prep" in result
    assert "Top daily habits" in result


@patch("habit_tracker.main.SEED_DEFAULT_HABITS", False)
def test_dashboard_reflects_completions(store):
    habit = store.add_habit("Cardio", goal=10)
    store.toggle_completion(habit.id, "2026-01-19")
    store.toggle_completion(habit.id, "2026-01-20")

    output = io.StringIO()
    with redirect_stdout(output):
        main(today=date(2026, 1, 20), store=store)

    result = output.getvalue()
    assert "Daily progress: 100%" in result
    assert "Cardio: 2 days (best 2)" in result


@patch("habit_tracker.main.validate_config")
def test_config_error_returns_1(mock_validate, store):
    mock_validate.side_effect = ValueError("Invalid configuration: HABITS_LOG_LEVEL")

    output = io.StringIO()
    with redirect_stdout(output):
        code = main(today=date(2026, 1, 20), store=store)

    assert code == 1
    assert "Configuration Error" in output.getvalue()
