"""
Single-shot page fetcher: one GET, fixed timeout, browser-like User-Agent.
"""

import logging
from typing import Optional

import requests

from errors import FetchError

logger = logging.getLogger(__name__)

FETCH_TIMEOUT_SECONDS = 10

# Some origins reject requests without a browser-like User-Agent
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


def fetch_page(
    url: str,
    timeout: float = FETCH_TIMEOUT_SECONDS,
    user_agent: str = DEFAULT_USER_AGENT,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Fetch a URL and return the decoded response body.

    Raises FetchError if the request errors, times out, or the status is not 2xx.
    """
    http = session or requests
    logger.info("Fetching %s (timeout=%ss)", url, timeout)

    try:
        response = http.get(url, headers={"User-Agent": user_agent}, timeout=timeout)
    except requests.Timeout as exc:
        logger.warning("Timeout fetching %s", url)
        raise FetchError(f"Timed out fetching {url}") from exc
    except requests.RequestException as exc:
        logger.warning("Error fetching %s: %s", url, exc)
        raise FetchError(f"Could not reach {url}") from exc

    if not 200 <= response.status_code < 300:
        logger.warning("Fetch of %s returned HTTP %d", url, response.status_code)
        raise FetchError(f"Fetching {url} failed with status code {response.status_code}")

    html = response.text
    logger.info("Successfully fetched %s (%d chars)", url, len(html))
    return html
