"""
Parse-and-filter service for the per-prefecture patients CSV.

The whole input is read and validated before any line is rendered: either
every row converts into a Record and the full report is returned, or an
exception is raised and nothing is returned.
"""

import logging
from typing import Iterable, List, Optional

from covid_calendar.io.readers.csv_reader import read_rows
from covid_calendar.utils.date_parser import format_date

from .models import Calendar, Record

logger = logging.getLogger(__name__)


def parse_records(lines: Iterable[str], calendar: Calendar) -> List[Record]:
    """
    Convert every data row of the CSV into a Record.

    The first row is the header and is skipped.

    Raises:
        MalformedRowError: If a row does not have exactly 8 fields
        InvalidNumberError: If a numeric field is not an integer
        InvalidDateError: If a row's year/month/day is not a real date
    """
    rows = read_rows(lines)
    return [Record.from_row(row, calendar.tz, line=line) for line, row in rows[1:]]


def render_line(record: Record) -> str:
    return f"{format_date(record.date)} {record.infected}\n"


def render(records: Iterable[Record], calendar: Calendar) -> str:
    """Render the records of the calendar's target prefecture, in input order."""
    return "".join(
        render_line(record) for record in records if record.prefecture == calendar.target
    )


def parse_and_filter(lines: Iterable[str], calendar: Optional[Calendar] = None) -> str:
    """
    Parse the CSV and return the report text for the target prefecture.

    Args:
        lines: CSV text stream (header row first)
        calendar: Report configuration; defaults to Tokyo in Asia/Tokyo

    Returns:
        One ``<date> <infected>`` line per matching row, possibly empty
    """
    calendar = calendar or Calendar.default()
    records = parse_records(lines, calendar)
    report = render(records, calendar)
    logger.info(
        "Rendered %d of %d records for %s",
        report.count("\n"),
        len(records),
        calendar.target.name,
    )
    return report

