"""
habit-tracker: Daily and weekly habit tracking

Entry point for the console dashboard.
"""

from datetime import date

from habit_tracker.aggregator import calculate_progress, filter_habits, rank_daily_habits, rank_weekly_habits
from habit_tracker.cli import display_progress, display_ranking, display_streak, format_habit_row
from habit_tracker.config import SEED_DEFAULT_HABITS, configure_logging, validate_config
from habit_tracker.models import Cadence, Timeframe
from habit_tracker.storage import HabitStore
from habit_tracker.streak_calculator import calculate_streak
from habit_tracker.summary_calculator import summarize_daily_habit, summarize_weekly_habit


def main(today: date | None = None, store: HabitStore | None = None) -> int:
    today = today or date.today()

    print("habit-tracker - Keep your habits going!")
    print("-" * 50)

    try:
        validate_config()
    except ValueError as e:
        print(f"\nConfiguration Error:\n{e}")
        return 1

    configure_logging()

    if store is None:
        store = HabitStore()
    if SEED_DEFAULT_HABITS:
        store.seed_default_habits()

    habits = store.get_habits()
    if not habits:
        print("No habits yet.")
        return 0

    print(f"\n{today.strftime('%B %Y')}\n")

    daily = filter_habits(habits, Cadence.DAILY)
    for timeframe in Timeframe:
        display_progress(timeframe.value, calculate_progress(daily, timeframe, today))
    print()

    print("Daily habits:")
    for habit in daily:
        print(format_habit_row(summarize_daily_habit(habit, today, today=today)))
    print()

    print("Weekly habits:")
    for habit in filter_habits(habits, Cadence.WEEKLY):
        print(format_habit_row(summarize_weekly_habit(habit, today)))
    print()

    for habit in daily:
        display_streak(habit.name, calculate_streak(habit.completions, today=today))
    print()

    display_ranking("Top daily habits", rank_daily_habits(habits, today))
    display_ranking("Top weekly habits", rank_weekly_habits(habits))

    return 0


if __name__ == "__main__":
    exit(main())
