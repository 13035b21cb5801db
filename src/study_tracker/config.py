"""Configuration management for study_tracker.

This module provides typed configuration classes using pydantic-settings.
Configuration is loaded from environment variables with optional .env file support.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "LoggingSettings",
    "StudyTrackerConfig",
]


class LoggingSettings(BaseSettings):
    """Logging output settings."""

    model_config = SettingsConfigDict(
        env_prefix="STUDY_TRACKER_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "INFO"
    json_output: bool = False


class StudyTrackerConfig(BaseSettings):
    """Main configuration for the study tracker engine.

    Example usage:
        config = StudyTrackerConfig()
        tracker = StudyTracker(config=config)
    """

    model_config = SettingsConfigDict(
        env_prefix="STUDY_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logging: LoggingSettings = LoggingSettings()

    # Spaced-repetition follow-ups
    review_priority: int = 85
    review_interval_days: int = Field(default=3, ge=0)
    review_title_prefix: str = "Review: "

    # Weekly plan
    default_slots_per_day: int = Field(default=3, gt=0)

    # First id handed out by the task scheduler
    first_task_id: int = Field(default=1, ge=1)
