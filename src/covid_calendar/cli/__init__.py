"""Command-line interface for covid-calendar."""

from covid_calendar.cli.report import main

__all__ = ["main"]
