from __future__ import annotations

from typing import Sequence

# Toyo Keisai daily patients data, one row per prefecture per day
COVID19_JAPAN_DAILY_DATA_URL: str = (
    "https://raw.githubusercontent.com/kaz-ogiwara/covid19/master/data/prefectures.csv"
)

CSV_NUM_FIELD: int = 8

# Column order of the CSV above (0-indexed)
FIELD_NAMES: Sequence[str] = (
    "year",
    "month",
    "day",
    "prefecture",
    "infected",
    "hospitalized",
    "discharged",
    "dead",
)

# Calendar defaults; weekday uses datetime.weekday() numbering (Monday == 0)
DEFAULT_CALENDAR_START_DAY: int = 0
DEFAULT_CALENDAR_BEGIN_YEAR: int = 2020
DEFAULT_CALENDAR_BEGIN_MONTH: int = 3
DEFAULT_CALENDAR_BEGIN_DAY: int = 1
