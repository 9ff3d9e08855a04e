"""Configuration management for covid-calendar.

Usage:
    >>> from covid_calendar.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.target_prefecture)
"""

from covid_calendar.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
