"""
HTML extraction: title, meta description, H1/H2 headings, body excerpt.
"""

import re
import logging
from dataclasses import dataclass

from bs4 import BeautifulSoup

from scraper.crawler import DEFAULT_USER_AGENT, FETCH_TIMEOUT_SECONDS, fetch_page

logger = logging.getLogger(__name__)

MAX_H2_HEADINGS = 10
MAX_BODY_CHARS = 3000
HEADING_SEPARATOR = " | "

# Tags whose entire subtree we discard before reading body text
_STRIP_TAGS = ["script", "style", "nav", "footer"]

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Digest:
    title: str
    meta_description: str
    headings1: tuple
    headings2: tuple
    body_excerpt: str

    @property
    def h1_line(self) -> str:
        return HEADING_SEPARATOR.join(self.headings1)

    @property
    def h2_line(self) -> str:
        return HEADING_SEPARATOR.join(self.headings2)


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def _heading_texts(soup: BeautifulSoup, level: str, limit: int = None) -> tuple:
    # The cap counts elements, empty ones included
    tags = soup.find_all(level, limit=limit)
    return tuple(_collapse(tag.get_text(separator=" ")) for tag in tags)


def extract(html: str) -> Digest:
    """
    Parse raw HTML into a Digest.

    Headings are read before noise elements are stripped, so an H2 inside a
    <nav> still counts. The body excerpt is a hard cut at MAX_BODY_CHARS.
    """
    soup = BeautifulSoup(html or "", "lxml")

    # ── Title ─────────────────────────────────────────────────────────────────
    title_tag = soup.find("title")
    title = _collapse(title_tag.get_text()) if title_tag else ""

    # ── Meta description ──────────────────────────────────────────────────────
    meta_desc = ""
    for tag in soup.find_all("meta"):
        if tag.get("name", "").lower() == "description":
            meta_desc = tag.get("content", "").strip()
            break

    # ── Headings ──────────────────────────────────────────────────────────────
    headings1 = _heading_texts(soup, "h1")
    headings2 = _heading_texts(soup, "h2", limit=MAX_H2_HEADINGS)

    # ── Strip noisy elements before extracting body text ─────────────────────
    for tag in soup.find_all(_STRIP_TAGS):
        tag.decompose()

    body_tag = soup.find("body") or soup
    body_text = _collapse(body_tag.get_text(separator=" "))
    body_excerpt = body_text[:MAX_BODY_CHARS]

    logger.debug(
        "Extracted digest — %d H1s, %d H2s, %d/%d body chars",
        len(headings1), len(headings2), len(body_excerpt), len(body_text),
    )

    return Digest(
        title=title,
        meta_description=meta_desc,
        headings1=headings1,
        headings2=headings2,
        body_excerpt=body_excerpt,
    )


def extract_digest(
    url: str,
    timeout: float = FETCH_TIMEOUT_SECONDS,
    user_agent: str = DEFAULT_USER_AGENT,
    fetch=fetch_page,
) -> Digest:
    """Fetch `url` once and reduce the page to a Digest."""
    html = fetch(url, timeout=timeout, user_agent=user_agent)
    return extract(html)
