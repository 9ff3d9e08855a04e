"""
Report command: fetch the dataset and print the calendar for one prefecture.

The target prefecture and time zone come from settings
(COVID_CAL_TARGET_PREFECTURE, COVID_CAL_TIMEZONE), not from flags.
"""

import argparse
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from covid_calendar import __version__
from covid_calendar.config import Settings, get_settings
from covid_calendar.domain.covid_cases import Calendar, CalendarError
from covid_calendar.io.connectors.csv_fetcher import fetch_csv
from covid_calendar.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="covid-calendar",
        description=(
            "Print daily COVID-19 infected counts for a Japanese prefecture "
            "from the Toyo Keisai per-prefecture dataset."
        ),
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        metavar="PATH",
        help="Read the CSV from a local file instead of downloading it",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override LOG_LEVEL for this run",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _render(source: Iterable[str], calendar: Calendar, out: TextIO) -> int:
    report = calendar.print(source).getvalue()
    out.write(report)
    out.flush()
    return report.count("\n")


def run(
    settings: Settings,
    input_path: Optional[Path] = None,
    out: Optional[TextIO] = None,
) -> int:
    """
    Produce the report and write it to ``out``.

    Returns:
        Number of lines written

    Raises:
        CalendarError: On fetch or parse failure; nothing is written then
        OSError: If ``input_path`` cannot be read
    """
    out = out if out is not None else sys.stdout
    calendar = Calendar.from_settings(settings)

    if input_path is not None:
        with input_path.open("r", encoding="utf-8-sig", newline="") as source:
            return _render(source, calendar, out)

    source = fetch_csv(settings.data_url, timeout=settings.request_timeout)
    return _render(source, calendar, out)


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        Exit code (0 for success, 1 for any failure)
    """
    args = build_parser().parse_args(argv)

    configure_logging(args.log_level)
    settings = get_settings()
    log = logger.bind(
        command="report",
        target=settings.target_prefecture,
        source=str(args.input) if args.input else settings.data_url,
    )

    log.info("report.started")
    try:
        lines = run(settings, args.input)
    except CalendarError as e:
        log.error("report.failed", error=str(e), error_type=type(e).__name__)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        log.error("report.input_unreadable", error=str(e))
        return 1

    log.info("report.completed", lines=lines)
    return 0
