"""
Calendar partitions for the month view.

Weeks always start on Sunday and are never clipped to the month, so the
first and last week of a month usually spill into the adjacent months.
"""

import calendar
from datetime import date, datetime, timedelta

from habit_tracker.intervals import DateInterval, to_calendar_day

WEEK_START = calendar.SUNDAY


def start_of_week(day: date | datetime | str) -> date:
    """Return the Sunday on or before the given day."""
    day = to_calendar_day(day)
    offset = (day.weekday() - WEEK_START) % 7
    return day - timedelta(days=offset)


def week_containing(day: date | datetime | str) -> DateInterval:
    """Return the 7-day week interval that contains the given day."""
    start = start_of_week(day)
    return DateInterval(start, start + timedelta(days=6))


def month_interval(day: date | datetime | str) -> DateInterval:
    """Return the calendar month containing the given day."""
    day = to_calendar_day(day)
    last_day = calendar.monthrange(day.year, day.month)[1]
    return DateInterval(day.replace(day=1), day.replace(day=last_day))


def year_interval(day: date | datetime | str) -> DateInterval:
    """Return the calendar year containing the given day."""
    day = to_calendar_day(day)
    return DateInterval(date(day.year, 1, 1), date(day.year, 12, 31))


def days_in_month(reference: date | datetime | str) -> list[date]:
    """
    List every day of the reference's month.

    Args:
        reference: Any day inside the month

    Returns:
        Days from the 1st to the last day of the month, ascending
    """
    return month_interval(reference).days()


def weeks_in_month(reference: date | datetime | str) -> list[DateInterval]:
    """
    List the Sunday-start weeks covering the reference's month.

    Starts from the week containing the 1st and emits consecutive 7-day
    weeks until a week would start after the month's last day. The first
    week may start in the previous month and the last week may end in the
    next one.

    Args:
        reference: Any day inside the month

    Returns:
        Contiguous, non-overlapping week intervals in ascending order
    """
    month = month_interval(reference)

    weeks = []
    current = start_of_week(month.start)
    while current <= month.end:
        weeks.append(DateInterval(current, current + timedelta(days=6)))
        current += timedelta(days=7)

    return weeks
