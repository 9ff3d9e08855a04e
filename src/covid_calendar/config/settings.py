"""
Configuration management for covid-calendar.

This module provides environment-based configuration using Pydantic BaseSettings.
Values are read from environment variables prefixed with ``COVID_CAL_`` and an
optional ``.env`` file at the project root.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from covid_calendar.domain.covid_cases.constants import COVID19_JAPAN_DAILY_DATA_URL
from covid_calendar.utils.date_parser import TIME_ZONE_TOKYO

# Determine project root for resolving .env by default
PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ENV_FILE = PROJECT_ROOT / ".env"
ENV_FILE_OVERRIDE = os.getenv("COVID_CAL_ENV_FILE")
if ENV_FILE_OVERRIDE:
    env_file_candidate = Path(ENV_FILE_OVERRIDE).expanduser()
    if not env_file_candidate.is_absolute():
        env_file_candidate = PROJECT_ROOT / env_file_candidate
    SETTINGS_ENV_FILE = env_file_candidate
else:
    SETTINGS_ENV_FILE = DEFAULT_ENV_FILE


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    Environment variables are loaded with the COVID_CAL_ prefix. For example,
    COVID_CAL_TARGET_PREFECTURE=大阪府 switches the report to Osaka.

    Logging fields use unprefixed names:
    - LOG_LEVEL: Logging level (uppercase)
    - LOG_TO_FILE: Enable file logging (1, true, yes)
    - LOG_FILE_DIR: Directory for log files
    """

    LOG_LEVEL: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (uppercase)",
    )
    LOG_TO_FILE: bool = Field(
        default=False,
        validation_alias="LOG_TO_FILE",
        description="Also write logs to a daily rotating file",
    )
    LOG_FILE_DIR: str = Field(
        default="logs",
        validation_alias="LOG_FILE_DIR",
        description="Directory for log files",
    )

    data_url: str = Field(
        default=COVID19_JAPAN_DAILY_DATA_URL,
        description="URL of the per-prefecture daily patients CSV",
    )
    target_prefecture: str = Field(
        default="東京都",
        description="Prefecture name (as written in the CSV) kept in the report",
    )
    timezone: str = Field(
        default=TIME_ZONE_TOKYO,
        description="IANA time zone used to build record dates",
    )
    request_timeout: Optional[float] = Field(
        default=None,
        description="HTTP timeout in seconds (None = wait indefinitely)",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("request_timeout")
    @classmethod
    def _positive_timeout(cls, value: Optional[float]) -> Optional[float]:
        if value is not None and value <= 0:
            raise ValueError("request_timeout must be positive")
        return value

    model_config = SettingsConfigDict(
        env_prefix="COVID_CAL_",
        env_file=str(SETTINGS_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with loaded configuration
    """
    return Settings()
