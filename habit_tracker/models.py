"""
Habit data model shared by the store, the calculators and the web API.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_serializer, field_validator

from habit_tracker.intervals import to_calendar_day


class Cadence(str, Enum):
    """How often a habit is tracked."""

    DAILY = "daily"
    WEEKLY = "weekly"


class Timeframe(str, Enum):
    """Granularity of the progress percentage."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class Habit(BaseModel):
    """
    A tracked habit and the calendar days it was completed on.

    The goal is a per-month target for daily habits and an absolute count
    for weekly habits. The color is display-only and passed through as-is.
    """

    id: str
    name: str
    cadence: Cadence = Cadence.DAILY
    goal: int = Field(..., description="Target completions (per month for daily habits)")
    color: str | None = None
    completions: set[date] = Field(default_factory=set)

    @field_validator("completions", mode="before")
    @classmethod
    def _normalize_completions(cls, value):
        if value is None:
            return set()
        return {to_calendar_day(item) for item in value}

    @field_serializer("completions")
    def _serialize_completions(self, completions: set[date]) -> list[str]:
        return sorted(day.isoformat() for day in completions)
