"""
Request orchestrator: extract → prompt → complete → parse.

Stages run strictly in sequence. Any failure ends the request in FAILED with a
single user-facing message; a failed request never returns partial sections.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from analysis.prompts import build_prompt
from analysis.sections import AnalysisSections, parse_sections
from errors import AnalyzerError, UnexpectedError, ValidationError
from scraper.crawler import DEFAULT_USER_AGENT, FETCH_TIMEOUT_SECONDS, fetch_page
from scraper.extractor import extract_digest

logger = logging.getLogger(__name__)


class Stage(Enum):
    START      = "start"
    EXTRACTING = "extracting"
    PROMPTING  = "prompting"
    COMPLETING = "completing"
    PARSING    = "parsing"
    DONE       = "done"
    FAILED     = "failed"


@dataclass(frozen=True)
class AnalysisOutcome:
    stage: Stage
    status_code: int
    sections: Optional[AnalysisSections] = None
    error: Optional[str] = None
    failed_stage: Optional[Stage] = None

    @property
    def ok(self) -> bool:
        return self.stage is Stage.DONE

    def to_response(self) -> tuple:
        """(status_code, body) for the request/response boundary."""
        if self.ok:
            return self.status_code, {"analysis": self.sections.as_dict()}
        return self.status_code, {"error": self.error}


def _failed(exc: AnalyzerError, stage: Stage) -> AnalysisOutcome:
    return AnalysisOutcome(
        stage=Stage.FAILED,
        status_code=exc.status_code,
        error=str(exc),
        failed_stage=stage,
    )


def analyze(
    url,
    client,
    fetch=fetch_page,
    fetch_timeout: float = FETCH_TIMEOUT_SECONDS,
    user_agent: str = DEFAULT_USER_AGENT,
) -> AnalysisOutcome:
    """
    Run one analysis of `url`.

    `client` is anything with a `complete(prompt) -> str` method. `fetch` is
    injectable for the same reason.
    """
    stage = Stage.START
    if not isinstance(url, str) or not url.strip():
        exc = ValidationError("URL is required")
        logger.warning("Rejected request: %s", exc)
        return _failed(exc, stage)
    url = url.strip()

    try:
        stage = Stage.EXTRACTING
        logger.info("[%s] %s", stage.value, url)
        digest = extract_digest(url, timeout=fetch_timeout, user_agent=user_agent, fetch=fetch)

        stage = Stage.PROMPTING
        logger.info("[%s] %s", stage.value, url)
        prompt = build_prompt(url, digest)

        stage = Stage.COMPLETING
        logger.info("[%s] %s (%d char prompt)", stage.value, url, len(prompt))
        reply = client.complete(prompt)

        stage = Stage.PARSING
        logger.info("[%s] %s", stage.value, url)
        sections = parse_sections(reply)

    except AnalyzerError as exc:
        logger.error("Analysis of %s failed during %s: %s", url, stage.value, exc)
        return _failed(exc, stage)
    except Exception as exc:
        logger.exception("Unexpected error analysing %s during %s", url, stage.value)
        wrapped = UnexpectedError("Failed to analyze website")
        wrapped.__cause__ = exc
        return _failed(wrapped, stage)

    logger.info("[%s] %s — %d sections missing", Stage.DONE.value, url, len(sections.missing()))
    return AnalysisOutcome(stage=Stage.DONE, status_code=200, sections=sections)


def handle_analyze_request(payload, client, **kwargs) -> tuple:
    """
    Inbound operation: `{"url": ...}` → (status, `{"analysis": ...}` | `{"error": ...}`).
    """
    url = payload.get("url") if isinstance(payload, dict) else None
    return analyze(url, client, **kwargs).to_response()
