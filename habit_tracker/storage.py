"""
SQLite-based storage for habits and their completion days.

The calculators only ever see snapshots returned by get_habits(); all
mutation goes through this store.
"""

import logging
import os
import random
import sqlite3
import string
from datetime import date, datetime
from pathlib import Path

from habit_tracker.intervals import to_calendar_day
from habit_tracker.models import Cadence, Habit

logger = logging.getLogger(__name__)

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_LENGTH = 9

HABIT_COLORS = [
    "#4cceac",
    "#ff2d7d",
    "#00bfff",
    "#ffcc00",
    "#9370db",
    "#ff6b6b",
    "#4da3ff",
    "#a3a3a3",
    "#ffffff",
]

DEFAULT_HABITS = [
    {"name": "Morning Cardio", "goal": 16, "color": "#4cceac", "cadence": "daily"},
    {"name": "Deep Work", "goal": 20, "color": "#ff2d7d", "cadence": "daily"},
    {"name": "Hydration 3L", "goal": 28, "color": "#00bfff", "cadence": "daily"},
    {"name": "Meditation", "goal": 15, "color": "#ffcc00", "cadence": "daily"},
    {"name": "Read 20 Pages", "goal": 20, "color": "#9370db", "cadence": "daily"},
    {"name": "Clean Desk", "goal": 30, "color": "#ff6b6b", "cadence": "daily"},
    {"name": "Meal Prep", "goal": 4, "color": "#a3a3a3", "cadence": "weekly"},
]


def _get_default_db_path() -> Path:
    """Get the default database path."""
    env_path = os.environ.get("HABITS_DB_PATH")
    if env_path:
        return Path(env_path)
    return Path.home() / ".habit-tracker" / "habits.db"


def generate_id() -> str:
    """Generate a short random alphanumeric habit id."""
    return "".join(random.choices(ID_ALPHABET, k=ID_LENGTH))


class HabitStore:
    """SQLite-based storage for habits."""

    def __init__(self, db_path: str | Path | None = None):
        """
        Initialize the habit store.

        Args:
            db_path: Path to the SQLite database file.
                     Defaults to ~/.habit-tracker/habits.db
        """
        if db_path is None:
            db_path = _get_default_db_path()
        self.db_path = Path(db_path)
        self._init_db()

    def _init_db(self) -> None:
        """Create tables and indexes if they don't exist."""
        # Ensure parent directory exists
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        with sqlite3.connect(self.db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS habits (
                    position INTEGER PRIMARY KEY AUTOINCREMENT,
                    id TEXT NOT NULL UNIQUE,
                    name TEXT NOT NULL,
                    cadence TEXT NOT NULL,
                    goal INTEGER NOT NULL,
                    color TEXT,
                    created_at TEXT DEFAULT CURRENT_TIMESTAMP
                )
            """)
            conn.execute("""
                CREATE TABLE IF NOT EXISTS completions (
                    habit_id TEXT NOT NULL,
                    date TEXT NOT NULL,
                    UNIQUE(habit_id, date)
                )
            """)
            conn.execute("""
                CREATE INDEX IF NOT EXISTS idx_completions_habit ON completions(habit_id)
            """)
            conn.commit()

    def add_habit(
        self,
        name: str,
        goal: int,
        cadence: Cadence | str = Cadence.DAILY,
        color: str | None = None,
    ) -> Habit:
        """
        Add a new habit with no completions.

        Args:
            name: Display name
            goal: Target completions (per month for daily habits)
            cadence: "daily" or "weekly"
            color: Display color. Defaults to the next palette color.

        Returns:
            The created habit
        """
        cadence = Cadence(cadence)

        with sqlite3.connect(self.db_path) as conn:
            if color is None:
                count = conn.execute("SELECT COUNT(*) FROM habits").fetchone()[0]
                color = HABIT_COLORS[count % len(HABIT_COLORS)]

            habit_id = generate_id()
            while conn.execute("SELECT 1 FROM habits WHERE id = ?", (habit_id,)).fetchone():
                habit_id = generate_id()

            conn.execute(
                """
                INSERT INTO habits (id, name, cadence, goal, color)
                VALUES (?, ?, ?, ?, ?)
                """,
                (habit_id, name, cadence.value, goal, color),
            )
            conn.commit()

        logger.info("Added %s habit %s (%s)", cadence.value, habit_id, name)
        return Habit(id=habit_id, name=name, cadence=cadence, goal=goal, color=color)

    def delete_habit(self, habit_id: str) -> bool:
        """
        Delete a habit and its completions.

        Returns:
            True if a habit was deleted, False if the id is unknown
        """
        with sqlite3.connect(self.db_path) as conn:
            cursor = conn.execute("DELETE FROM habits WHERE id = ?", (habit_id,))
            conn.execute("DELETE FROM completions WHERE habit_id = ?", (habit_id,))
            conn.commit()
            deleted = cursor.rowcount > 0

        if deleted:
            logger.info("Deleted habit %s", habit_id)
        return deleted

    def get_habits(self) -> list[Habit]:
        """
        Retrieve a snapshot of all habits.

        Returns:
            Habits in the order they were added, each with its full
            completion set.
        """
        with sqlite3.connect(self.db_path) as conn:
            conn.row_factory = sqlite3.Row
            habit_rows = conn.execute(
                """
                SELECT id, name, cadence, goal, color
                FROM habits
                ORDER BY position
                """
            ).fetchall()
            completion_rows = conn.execute(
                "SELECT habit_id, date FROM completions"
            ).fetchall()

        completions_by_habit: dict[str, set[str]] = {}
        for row in completion_rows:
            completions_by_habit.setdefault(row["habit_id"], set()).add(row["date"])

        return [
            Habit(
                id=row["id"],
                name=row["name"],
                cadence=row["cadence"],
                goal=row["goal"],
                color=row["color"],
                completions=completions_by_habit.get(row["id"], set()),
            )
            for row in habit_rows
        ]

    def get_habit(self, habit_id: str) -> Habit | None:
        """Get a single habit by id, or None if it doesn't exist."""
        for habit in self.get_habits():
            if habit.id == habit_id:
                return habit
        return None

    def toggle_completion(self, habit_id: str, day: date | datetime | str) -> bool | None:
        """
        Mark a day as completed, or unmark it if it already was.

        Args:
            habit_id: The habit to toggle
            day: Calendar day to toggle

        Returns:
            True if the day is now completed, False if it was removed,
            None if the habit doesn't exist
        """
        day_str = to_calendar_day(day).isoformat()

        with sqlite3.connect(self.db_path) as conn:
            exists = conn.execute(
                "SELECT 1 FROM habits WHERE id = ?", (habit_id,)
            ).fetchone()
            if not exists:
                return None

            cursor = conn.execute(
                "DELETE FROM completions WHERE habit_id = ? AND date = ?",
                (habit_id, day_str),
            )
            if cursor.rowcount > 0:
                completed = False
            else:
                conn.execute(
                    "INSERT INTO completions (habit_id, date) VALUES (?, ?)",
                    (habit_id, day_str),
                )
                completed = True
            conn.commit()

        logger.debug("Toggled habit %s on %s -> %s", habit_id, day_str, completed)
        return completed

    def seed_default_habits(self) -> int:
        """
        Add the starter habits if the store is empty.

        Returns:
            Number of habits added
        """
        with sqlite3.connect(self.db_path) as conn:
            count = conn.execute("SELECT COUNT(*) FROM habits").fetchone()[0]
        if count:
            return 0

        for habit in DEFAULT_HABITS:
            self.add_habit(**habit)

        logger.info("Seeded %d default habits", len(DEFAULT_HABITS))
        return len(DEFAULT_HABITS)

    def clear(self) -> None:
        """Delete all habits and completions. Primarily for testing."""
        with sqlite3.connect(self.db_path) as conn:
            conn.execute("DELETE FROM completions")
            conn.execute("DELETE FROM habits")
            conn.commit()
