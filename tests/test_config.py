"""
Tests for configuration validation.
"""

from unittest.mock import patch

import pytest

from habit_tracker.config import validate_config


def test_valid_defaults():
    with patch("habit_tracker.config.SEED_DEFAULTS_RAW", "true"), \
            patch("habit_tracker.config.LOG_LEVEL", "INFO"):
        validate_config()


def test_invalid_seed_flag():
    with patch("habit_tracker.config.SEED_DEFAULTS_RAW", "maybe"), \
            patch("habit_tracker.config.LOG_LEVEL", "INFO"):
        with pytest.raises(ValueError, match="HABITS_SEED_DEFAULTS"):
            validate_config()


def test_invalid_log_level():
    with patch("habit_tracker.config.SEED_DEFAULTS_RAW", "false"), \
            patch("habit_tracker.config.LOG_LEVEL", "LOUD"):
        with pytest.raises(ValueError, match="HABITS_LOG_LEVEL"):
            validate_config()


def test_reports_all_invalid_settings():
    with patch("habit_tracker.config.SEED_DEFAULTS_RAW", "maybe"), \
            patch("habit_tracker.config.LOG_LEVEL", "LOUD"):
        with pytest.raises(ValueError) as exc_info:
            validate_config()

    assert "HABITS_SEED_DEFAULTS" in str(exc_info.value)
    assert "HABITS_LOG_LEVEL" in str(exc_info.value)
