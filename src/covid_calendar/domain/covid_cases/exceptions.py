"""
Exception hierarchy for the COVID-19 case calendar.

Every failure is fatal for the current run: the CLI logs it and exits with a
non-zero status. Unknown prefecture names are deliberately not represented
here, they map to ``Prefecture.UNKNOWN``.
"""

from typing import Optional, Sequence


class CalendarError(Exception):
    """Base exception for all calendar errors."""

    pass


class NetworkError(CalendarError):
    """Raised when the dataset cannot be fetched (connection, DNS, TLS...)."""

    pass


class HttpStatusError(NetworkError):
    """Raised when the dataset URL answers with a non-2xx status."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Unexpected HTTP status {status_code} from {url}")


class RecordError(CalendarError):
    """
    Raised when a CSV row cannot be converted into a Record.

    Args:
        message: Error description
        row: Raw CSV fields of the offending row (optional)
        line: 1-based line number in the CSV input (optional)
    """

    def __init__(
        self,
        message: str,
        row: Optional[Sequence[str]] = None,
        line: Optional[int] = None,
    ):
        self.row = list(row) if row is not None else None
        self.line = line

        context_parts = []
        if line is not None:
            context_parts.append(f"line={line}")
        if row is not None:
            context_parts.append(f"row={self.row}")

        if context_parts:
            full_message = f"{message} ({', '.join(context_parts)})"
        else:
            full_message = message

        super().__init__(full_message)


class MalformedRowError(RecordError):
    """Raised when a row does not have the expected number of fields."""

    pass


class InvalidNumberError(RecordError):
    """Raised when a numeric field is not a base-10 integer."""

    def __init__(
        self,
        field_name: str,
        value: str,
        row: Optional[Sequence[str]] = None,
        line: Optional[int] = None,
    ):
        self.field_name = field_name
        self.value = value
        super().__init__(
            f"Field '{field_name}' is not an integer: {value!r}", row=row, line=line
        )


class InvalidDateError(RecordError):
    """Raised when year/month/day do not form a valid calendar date."""

    pass
