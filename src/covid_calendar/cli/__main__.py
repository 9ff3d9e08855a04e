"""
CLI entry point for covid-calendar.

Usage:
    python -m covid_calendar.cli [--input PATH] [--log-level LEVEL]

Examples:
    # Tokyo report from the live dataset
    python -m covid_calendar.cli

    # Osaka report from a local copy
    COVID_CAL_TARGET_PREFECTURE=大阪府 python -m covid_calendar.cli --input prefectures.csv
"""

import sys

from covid_calendar.cli.report import main

if __name__ == "__main__":
    sys.exit(main())
