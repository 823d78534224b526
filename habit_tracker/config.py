"""
Configuration management for habit-tracker.

Loads settings from environment variables.
"""

import logging
import os
from dotenv import load_dotenv

# Load .env file from project root
load_dotenv()

HABITS_DB_PATH = os.getenv("HABITS_DB_PATH")
SEED_DEFAULTS_RAW = os.getenv("HABITS_SEED_DEFAULTS", "true")
LOG_LEVEL = os.getenv("HABITS_LOG_LEVEL", "INFO").upper()

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")

SEED_DEFAULT_HABITS = SEED_DEFAULTS_RAW.strip().lower() in TRUE_VALUES


def validate_config():
    """Validate that configuration values are usable."""
    invalid = []

    if SEED_DEFAULTS_RAW.strip().lower() not in TRUE_VALUES + FALSE_VALUES:
        invalid.append("HABITS_SEED_DEFAULTS")

    if not isinstance(logging.getLevelName(LOG_LEVEL), int):
        invalid.append("HABITS_LOG_LEVEL")

    if invalid:
        raise ValueError(
            f"Invalid configuration: {', '.join(invalid)}\n"
            "HABITS_SEED_DEFAULTS must be true/false and HABITS_LOG_LEVEL "
            "a standard logging level name (DEBUG, INFO, WARNING, ...)."
        )


def configure_logging() -> None:
    """Set up root logging at the configured level."""
    logging.basicConfig(
        level=LOG_LEVEL if isinstance(logging.getLevelName(LOG_LEVEL), int) else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
