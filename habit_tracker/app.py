"""
FastAPI web application for habit-tracker.

Provides REST API endpoints for habits, progress and streak data.
"""

import logging
from datetime import date

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from habit_tracker.aggregator import (
    calculate_progress,
    filter_habits,
    rank_daily_habits,
    rank_weekly_habits,
)
from habit_tracker.calendar_partitioner import days_in_month, weeks_in_month
from habit_tracker.config import SEED_DEFAULT_HABITS, validate_config
from habit_tracker.models import Cadence, Habit, Timeframe
from habit_tracker.series_calculator import calculate_completion_matrix, calculate_progress_series
from habit_tracker.storage import HabitStore
from habit_tracker.streak_calculator import calculate_streak
from habit_tracker.summary_calculator import (
    default_goal,
    summarize_daily_habit,
    summarize_weekly_habit,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="habit-tracker",
    description="Daily and weekly habit tracking with streaks and progress",
    version="0.1.0",
)


class HabitCreate(BaseModel):
    """Request model for creating a habit."""

    name: str = Field(..., min_length=1, max_length=200, description="Habit name")
    cadence: Cadence = Field(Cadence.DAILY, description="daily or weekly")
    goal: int = Field(..., ge=1, le=366, description="Target completions")
    color: str | None = Field(None, max_length=32, description="Display color")


class CompletionToggle(BaseModel):
    """Request model for toggling a completion day."""

    day: date = Field(..., alias="date", description="Calendar day (YYYY-MM-DD)")


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


def _open_store() -> HabitStore:
    """
    Open the habit store, seeding starter habits when configured.

    Raises:
        HTTPException: on configuration errors
    """
    try:
        validate_config()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")

    store = HabitStore()
    if SEED_DEFAULT_HABITS:
        store.seed_default_habits()
    return store


def _require_habit(habits: list[Habit], habit_id: str | None) -> None:
    """Raise 404 if a focused habit id is not in the snapshot."""
    if habit_id is not None and not any(h.id == habit_id for h in habits):
        raise HTTPException(status_code=404, detail="Habit not found")


@app.get("/api/habits")
def list_habits():
    """
    Get all habits with their completion days.

    Returns:
        JSON with the habits list
    """
    store = _open_store()
    return {"habits": [habit.model_dump(mode="json") for habit in store.get_habits()]}


@app.post("/api/habits")
def create_habit(habit: HabitCreate):
    """
    Create a new habit.

    Args:
        habit: HabitCreate with name, cadence, goal and optional color

    Returns:
        JSON with the created habit
    """
    store = _open_store()
    created = store.add_habit(
        name=habit.name,
        goal=habit.goal,
        cadence=habit.cadence,
        color=habit.color,
    )
    return {"habit": created.model_dump(mode="json")}


@app.delete("/api/habits/{habit_id}")
def delete_habit(habit_id: str):
    """Delete a habit and its completions."""
    store = _open_store()
    if not store.delete_habit(habit_id):
        raise HTTPException(status_code=404, detail="Habit not found")
    return {"deleted": habit_id}


@app.post("/api/habits/{habit_id}/toggle")
def toggle_completion(habit_id: str, toggle: CompletionToggle):
    """
    Toggle a habit's completion for one day.

    Returns:
        JSON with the new completed state and the updated habit
    """
    store = _open_store()
    completed = store.toggle_completion(habit_id, toggle.day)
    if completed is None:
        raise HTTPException(status_code=404, detail="Habit not found")

    habit = store.get_habit(habit_id)
    return {
        "date": toggle.day.isoformat(),
        "completed": completed,
        "habit": habit.model_dump(mode="json"),
    }


@app.get("/api/habits/{habit_id}/streak")
def get_streak(habit_id: str):
    """Get the current and longest streak of a habit."""
    store = _open_store()
    habit = store.get_habit(habit_id)
    if habit is None:
        raise HTTPException(status_code=404, detail="Habit not found")

    return {"habit_id": habit_id, "streak": calculate_streak(habit.completions)}


@app.get("/api/calendar")
def get_calendar(month: date | None = None):
    """
    Get the days and Sunday-start weeks of a month.

    Args:
        month: Any day in the month (defaults to today)
    """
    month = month or date.today()
    return {
        "days": [day.isoformat() for day in days_in_month(month)],
        "weeks": [
            {"start": week.start.isoformat(), "end": week.end.isoformat()}
            for week in weeks_in_month(month)
        ],
        "default_goals": {
            cadence.value: default_goal(cadence, month) for cadence in Cadence
        },
    }


@app.get("/api/progress")
def get_progress(
    timeframe: Timeframe = Timeframe.DAILY,
    focused: date | None = None,
    cadence: Cadence = Cadence.DAILY,
    habit_id: str | None = None,
):
    """
    Get the completion percentage for a timeframe around the focused day.

    Returns:
        JSON with the unrounded progress percentage
    """
    focused = focused or date.today()
    habits = _open_store().get_habits()
    _require_habit(habits, habit_id)

    selected = filter_habits(habits, cadence, habit_id)
    return {
        "timeframe": timeframe.value,
        "focused": focused.isoformat(),
        "habit_count": len(selected),
        "progress": calculate_progress(selected, timeframe, focused),
    }


@app.get("/api/rankings")
def get_rankings(month: date | None = None):
    """Get the top daily and weekly habits."""
    month = month or date.today()
    habits = _open_store().get_habits()
    return {
        "daily": rank_daily_habits(habits, month),
        "weekly": rank_weekly_habits(habits),
    }


@app.get("/api/series")
def get_series(month: date | None = None, habit_id: str | None = None):
    """Get the per-day chart series for a month."""
    month = month or date.today()
    habits = _open_store().get_habits()
    _require_habit(habits, habit_id)

    return {
        "progress": calculate_progress_series(habits, month, habit_id),
        "completions": calculate_completion_matrix(habits, month, habit_id),
    }


@app.get("/api/dashboard")
def get_dashboard(
    month: date | None = None,
    focused: date | None = None,
    timeframe: Timeframe = Timeframe.DAILY,
    habit_id: str | None = None,
):
    """
    Get everything the month dashboard shows in one response.

    Args:
        month: Any day in the month shown (defaults to today)
        focused: Day the progress timeframe is anchored to (defaults to today)
        timeframe: Progress timeframe
        habit_id: Focus a single habit
    """
    today = date.today()
    month = month or today
    focused = focused or today

    habits = _open_store().get_habits()
    _require_habit(habits, habit_id)
    logger.debug("Building dashboard for %s with %d habits", month, len(habits))

    selected = filter_habits(habits, Cadence.DAILY, habit_id)

    return {
        "month": month.isoformat(),
        "focused": focused.isoformat(),
        "progress": {
            "timeframe": timeframe.value,
            "value": calculate_progress(selected, timeframe, focused),
        },
        "daily_habits": [
            summarize_daily_habit(h, month)
            for h in filter_habits(habits, Cadence.DAILY)
        ],
        "weekly_habits": [
            summarize_weekly_habit(h, month)
            for h in filter_habits(habits, Cadence.WEEKLY)
        ],
        "rankings": {
            "daily": rank_daily_habits(habits, month),
            "weekly": rank_weekly_habits(habits),
        },
        "series": calculate_progress_series(habits, month, habit_id),
    }
