"""
HTTP connector for the per-prefecture patients dataset.

A single GET per run: no retries, no caching. The response is always closed,
including when status validation or decoding fails.
"""

import io
import logging
from typing import Optional

import requests

from covid_calendar.domain.covid_cases.constants import COVID19_JAPAN_DAILY_DATA_URL
from covid_calendar.domain.covid_cases.exceptions import HttpStatusError, NetworkError

logger = logging.getLogger(__name__)

USER_AGENT = "covid-calendar (+https://github.com/kaz-ogiwara/covid19)"


def fetch_csv(
    url: str = COVID19_JAPAN_DAILY_DATA_URL,
    *,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> io.StringIO:
    """
    Download the CSV and return it as a text stream.

    Args:
        url: Dataset URL
        timeout: Request timeout in seconds (None waits indefinitely)
        session: Optional requests session, mainly for tests

    Returns:
        UTF-8 decoded body, ready for ``csv.reader``

    Raises:
        HttpStatusError: For any non-2xx response
        NetworkError: For transport failures or an undecodable body
    """
    get = session.get if session is not None else requests.get

    logger.debug("Fetching CSV data", extra={"url": url, "timeout": timeout})
    try:
        response = get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as e:
        raise NetworkError(f"Error on fetching CSV data from {url}: {e}") from e

    with response:
        if not 200 <= response.status_code < 300:
            logger.error(
                "Dataset request failed",
                extra={"url": url, "status_code": response.status_code},
            )
            raise HttpStatusError(response.status_code, url)

        try:
            text = response.content.decode("utf-8-sig")
        except requests.RequestException as e:
            raise NetworkError(f"Error while reading response from {url}: {e}") from e
        except UnicodeDecodeError as e:
            raise NetworkError(f"Response from {url} is not UTF-8 text: {e}") from e

    logger.debug(
        "CSV data fetched",
        extra={"url": url, "status_code": response.status_code, "chars": len(text)},
    )
    return io.StringIO(text, newline="")
