"""
Calendar-day normalization and inclusive date intervals.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta


def to_calendar_day(value: date | datetime | str) -> date:
    """
    Truncate a date-like value to its calendar day.

    Args:
        value: A date, a datetime (time component dropped) or a
            YYYY-MM-DD string.

    Returns:
        The calendar day as a date

    Raises:
        ValueError: If a string is not a valid YYYY-MM-DD date
        TypeError: If the value is not date-like
    """
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return datetime.strptime(value, "%Y-%m-%d").date()
    raise TypeError(f"Expected a date, datetime or YYYY-MM-DD string, got {type(value).__name__}")


@dataclass(frozen=True)
class DateInterval:
    """An inclusive [start, end] range of calendar days."""

    start: date
    end: date

    @property
    def start_instant(self) -> datetime:
        return datetime.combine(self.start, time.min)

    @property
    def end_instant(self) -> datetime:
        return datetime.combine(self.end, time.max)

    @property
    def length(self) -> int:
        """Number of calendar days covered, both bounds included."""
        return (self.end - self.start).days + 1

    def days(self) -> list[date]:
        return [self.start + timedelta(days=i) for i in range(self.length)]

    def __contains__(self, value) -> bool:
        return contains(value, self)


def contains(day: date | datetime | str, interval: DateInterval) -> bool:
    """
    Check whether a day falls inside an interval, both bounds inclusive.

    Dates and strings are compared by calendar day. A datetime is compared
    as an instant against the interval's first midnight and the last
    microsecond of its final day.
    """
    if isinstance(day, datetime):
        return interval.start_instant <= day <= interval.end_instant
    return interval.start <= to_calendar_day(day) <= interval.end
