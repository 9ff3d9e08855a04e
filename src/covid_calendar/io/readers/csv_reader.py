"""
Lenient CSV reader for the per-prefecture patients dataset.

Quoting is not enforced and spaces before a field are dropped (spaces inside
a quoted field are kept). The field count is strict: every non-empty line
must have exactly ``expected_fields`` fields.
"""

import csv
import logging
from typing import Iterable, List, Tuple

from covid_calendar.domain.covid_cases.constants import CSV_NUM_FIELD
from covid_calendar.domain.covid_cases.exceptions import MalformedRowError

logger = logging.getLogger(__name__)


class LenientDialect(csv.Dialect):
    delimiter = ","
    quotechar = '"'
    doublequote = True
    skipinitialspace = True
    lineterminator = "\n"
    quoting = csv.QUOTE_MINIMAL
    strict = False


def read_rows(
    lines: Iterable[str], expected_fields: int = CSV_NUM_FIELD
) -> List[Tuple[int, List[str]]]:
    """
    Read every row of a CSV text stream.

    The whole input is consumed before returning, so a bad row anywhere
    prevents any row from being used.

    Args:
        lines: Text stream or iterable of lines (open files with newline="")
        expected_fields: Required number of fields per row

    Returns:
        List of ``(line_number, fields)`` pairs, header included, blank lines
        skipped. ``line_number`` is 1-based.

    Raises:
        MalformedRowError: If a row has a different number of fields
    """
    reader = csv.reader(lines, dialect=LenientDialect)
    rows: List[Tuple[int, List[str]]] = []
    for row in reader:
        if not row:
            continue
        if len(row) != expected_fields:
            raise MalformedRowError(
                f"Wrong number of fields: got {len(row)}, expected {expected_fields}",
                row=row,
                line=reader.line_num,
            )
        rows.append((reader.line_num, row))

    logger.debug("Read %d CSV rows", len(rows))
    return rows
