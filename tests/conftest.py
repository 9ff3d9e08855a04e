"""Shared pytest fixtures for covid-calendar tests."""

from __future__ import annotations

import io
from typing import Generator

import pytest

from covid_calendar.config import get_settings
from covid_calendar.domain.covid_cases import Calendar
from covid_calendar.utils.date_parser import TOKYO_FIXED_ZONE

HEADER = "年,月,日,都道府県,患者数（2020年3月28日からは感染者数）,入院中,退院者,死亡者\n"

SAMPLE_CSV = (
    HEADER
    + "2020,3,15,東京都,10,5,3,1\n"
    + "2020,3,15,山梨県,2,1,0,0\n"
    + "2020,3,15,北海道,140,80,55,5\n"
    + "2020,3,16,東京都,12,6,5,1\n"
    + "2020,3,16,神奈川県,30,20,8,2\n"
    + "2020,3,17,東京都,17,9,7,1\n"
)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Keep host environment variables out of Settings and reset the cache."""
    for name in (
        "COVID_CAL_DATA_URL",
        "COVID_CAL_TARGET_PREFECTURE",
        "COVID_CAL_TIMEZONE",
        "COVID_CAL_REQUEST_TIMEOUT",
        "LOG_LEVEL",
        "LOG_TO_FILE",
        "LOG_FILE_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def tokyo_calendar() -> Calendar:
    """Tokyo calendar on a fixed UTC+9 zone, independent of the host tz database."""
    return Calendar.default(tz=TOKYO_FIXED_ZONE)


@pytest.fixture
def sample_csv() -> io.StringIO:
    return io.StringIO(SAMPLE_CSV, newline="")
