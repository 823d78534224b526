"""
CLI display functions for habit-tracker.
"""

from datetime import date

from habit_tracker.calendar_partitioner import weeks_in_month
from habit_tracker.intervals import to_calendar_day


def get_milestone_message(streak_days: int) -> str | None:
    """
    Get milestone message for a given streak length.

    Args:
        streak_days: Current streak in days

    Returns:
        Milestone message string or None if no milestone
    """
    milestones = {
        7: "One week strong!",
        14: "Two weeks of consistency!",
        30: "One month champion!",
        60: "Two months unstoppable!",
        100: "100 days - legendary!",
    }
    return milestones.get(streak_days)


def display_streak(name: str, streak_info: dict) -> None:
    """
    Display a habit's streak with milestone messages.

    Args:
        name: Habit name
        streak_info: Dictionary from calculate_streak() containing:
            - current: int
            - longest: int
            - active: bool
    """
    current = streak_info["current"]
    longest = streak_info["longest"]

    if current == 0:
        status = "No active streak"
    else:
        day_word = "day" if current == 1 else "days"
        status = f"{current} {day_word}"

        milestone = get_milestone_message(current)
        if milestone:
            status = f"{status} - {milestone}"

    print(f"🔥 {name}: {status} (best {longest})")


def display_month_grid(
    completions: set[date],
    reference_day: date | str,
    focused_day: date | str | None = None,
) -> None:
    """
    Display a Sunday-start month grid of completed days.

    Days outside the month are left blank; the focused day is bracketed
    with <> instead of [].

    Args:
        completions: Completion days of one habit
        reference_day: Any day of the month to show
        focused_day: Day to highlight
    """
    reference_day = to_calendar_day(reference_day)
    focused_day = to_calendar_day(focused_day) if focused_day else None

    print(reference_day.strftime("%B %Y"))
    print("  " + " ".join(["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]))

    for week in weeks_in_month(reference_day):
        row = "  "
        for day in week.days():
            if day.month != reference_day.month:
                row += "    "
                continue
            mark = "*" if day in completions else " "
            if day == focused_day:
                row += f"<{mark}> "
            else:
                row += f"[{mark}] "
        print(row.rstrip())

    print()


def display_progress(timeframe: str, progress: float) -> None:
    """Display the timeframe progress percentage, rounded for display."""
    print(f"📊 {timeframe.capitalize()} progress: {round(progress)}%")


def display_ranking(title: str, ranking: list[dict]) -> None:
    """
    Display a ranking list.

    Args:
        title: Heading for the list
        ranking: Entries from rank_daily_habits() or rank_weekly_habits()
    """
    print(f"🏆 {title}:")
    if not ranking:
        print("   (no habits)")
    for position, entry in enumerate(ranking, start=1):
        name = entry["name"]
        if len(name) > 30:
            name = name[:27] + "..."
        print(f"   {position:>2}. {name:<30} {entry['percent']:>4}%")
    print()


def format_habit_row(summary: dict) -> str:
    """
    Format a habit summary for display.

    Args:
        summary: Dictionary from summarize_daily_habit() or
            summarize_weekly_habit()

    Returns:
        Formatted string for display
    """
    name = summary["name"]
    if len(name) > 24:
        name = name[:21] + "..."

    row = (
        f"  {name:<24} {summary['done']:>3}/{summary['goal']:<3} "
        f"left {summary['remaining']:>3}  {summary['percent']:>4}%"
    )
    if "current_streak" in summary:
        row += f"  streak {summary['current_streak']}/{summary['longest_streak']}"
    return row
