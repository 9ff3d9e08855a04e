import io
import logging
import re
from datetime import datetime, tzinfo
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from covid_calendar.utils.date_parser import local_midnight, resolve_timezone

from .constants import (
    CSV_NUM_FIELD,
    DEFAULT_CALENDAR_BEGIN_DAY,
    DEFAULT_CALENDAR_BEGIN_MONTH,
    DEFAULT_CALENDAR_BEGIN_YEAR,
    DEFAULT_CALENDAR_START_DAY,
    FIELD_NAMES,
)
from .exceptions import InvalidDateError, InvalidNumberError, MalformedRowError

if TYPE_CHECKING:
    from covid_calendar.config.settings import Settings

logger = logging.getLogger(__name__)

# Same grammar as a plain base-10 integer literal with optional sign
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Numeric fields must fit a signed 64-bit integer
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Prefecture(str, Enum):
    """Prefectures known to the report, keyed by their name in the CSV."""

    HOKKAIDO = "北海道"
    TOKYO = "東京都"
    OSAKA = "大阪府"
    YAMANASHI = "山梨県"
    UNKNOWN = "不明"

    @classmethod
    def from_name(cls, name: str) -> "Prefecture":
        """Map a CSV prefecture name to a member; unknown names give UNKNOWN."""
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


def _parse_int(
    row: Sequence[str], index: int, line: Optional[int] = None
) -> int:
    raw = row[index]
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise InvalidNumberError(FIELD_NAMES[index], raw, row=row, line=line)
    try:
        value = int(raw)
    except ValueError as exc:
        raise InvalidNumberError(FIELD_NAMES[index], raw, row=row, line=line) from exc
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidNumberError(FIELD_NAMES[index], raw, row=row, line=line)
    return value


class Record(BaseModel):
    """One row of the Toyo Keisai per-prefecture CSV."""

    model_config = ConfigDict(frozen=True)

    date: datetime = Field(..., description="Local midnight of the reported day")
    prefecture: Prefecture = Field(..., description="Prefecture of the row")
    infected: int = Field(..., description="Cumulative infected count")
    hospitalized: int = Field(..., description="Currently hospitalized count")
    discharged: int = Field(..., description="Cumulative discharged count")
    dead: int = Field(..., description="Cumulative death count")

    @classmethod
    def from_row(
        cls, row: Sequence[str], tz: tzinfo, line: Optional[int] = None
    ) -> "Record":
        """
        Build a Record from raw CSV fields.

        Args:
            row: The 8 raw fields of a data row
            tz: Time zone the date is anchored in
            line: 1-based line number, used only for error context

        Raises:
            MalformedRowError: If the row does not have exactly 8 fields
            InvalidNumberError: If a numeric field is not a 64-bit integer
            InvalidDateError: If the normalized date falls outside years 1..9999
        """
        if len(row) != CSV_NUM_FIELD:
            raise MalformedRowError(
                f"Number of fields ({len(row)}) in the CSV record is wrong, "
                f"expected {CSV_NUM_FIELD}",
                row=row,
                line=line,
            )

        year = _parse_int(row, 0, line)
        month = _parse_int(row, 1, line)
        day = _parse_int(row, 2, line)
        infected = _parse_int(row, 4, line)
        hospitalized = _parse_int(row, 5, line)
        discharged = _parse_int(row, 6, line)
        dead = _parse_int(row, 7, line)

        # 2020-02-30 and similar roll over into the next month
        try:
            date = local_midnight(year, month, day, tz)
        except (ValueError, OverflowError) as exc:
            raise InvalidDateError(
                f"Invalid date {year}-{month}-{day}: {exc}", row=row, line=line
            ) from exc

        return cls(
            date=date,
            prefecture=Prefecture.from_name(row[3]),
            infected=infected,
            hospitalized=hospitalized,
            discharged=discharged,
            dead=dead,
        )


class Calendar(BaseModel):
    """
    Report configuration.

    ``start_day`` and ``begin_date`` describe the calendar grid the report is
    meant for; rendering currently filters on ``target`` only.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    start_day: int = Field(
        default=DEFAULT_CALENDAR_START_DAY,
        ge=0,
        le=6,
        description="First weekday of the calendar (Monday == 0)",
    )
    begin_date: datetime = Field(..., description="First day of the calendar")
    target: Prefecture = Field(
        default=Prefecture.TOKYO, description="Prefecture kept in the report"
    )
    tz: tzinfo = Field(..., description="Time zone record dates are built in")

    @classmethod
    def default(
        cls, tz: Optional[tzinfo] = None, target: Prefecture = Prefecture.TOKYO
    ) -> "Calendar":
        """Calendar starting on Monday, 2020-03-01, for Tokyo."""
        zone = tz if tz is not None else resolve_timezone()
        return cls(
            start_day=DEFAULT_CALENDAR_START_DAY,
            begin_date=local_midnight(
                DEFAULT_CALENDAR_BEGIN_YEAR,
                DEFAULT_CALENDAR_BEGIN_MONTH,
                DEFAULT_CALENDAR_BEGIN_DAY,
                zone,
            ),
            target=target,
            tz=zone,
        )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Calendar":
        """Build the default calendar with zone and target taken from settings."""
        target = Prefecture.from_name(settings.target_prefecture)
        if target is Prefecture.UNKNOWN:
            logger.warning(
                "Unrecognized target prefecture %r, only unknown rows will match",
                settings.target_prefecture,
            )
        return cls.default(tz=resolve_timezone(settings.timezone), target=target)

    def print(self, lines: Iterable[str]) -> io.StringIO:
        """Return the rendered report for ``lines`` as a readable text stream."""
        from .service import parse_and_filter

        return io.StringIO(parse_and_filter(lines, self))
