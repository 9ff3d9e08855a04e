"""Per-prefecture COVID-19 case records and the calendar report."""

from .exceptions import (
    CalendarError,
    HttpStatusError,
    InvalidDateError,
    InvalidNumberError,
    MalformedRowError,
    NetworkError,
    RecordError,
)
from .models import Calendar, Prefecture, Record

__all__ = [
    "Calendar",
    "CalendarError",
    "HttpStatusError",
    "InvalidDateError",
    "InvalidNumberError",
    "MalformedRowError",
    "NetworkError",
    "Prefecture",
    "Record",
    "RecordError",
]
