"""
Section parser: splits the model's free-text reply into the ten labelled
marketing-analysis sections.

A section starts on the first line beginning with `LABEL:` (any case) and
runs until the next line beginning with any of the ten labels, or the end of
the reply. Other `WORD:` lines (`CTA:`, `KPI:`) are section content. A
section that cannot be found, or is empty, holds SENTINEL instead; a
missing label never fails the analysis.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

SENTINEL = "Analysis not available"


class Section(Enum):
    """Fixed, ordered set of sections. Name is the reply label, value the output key."""

    BRAND_ANALYSIS          = "brandAnalysis"
    TARGET_AUDIENCE         = "targetAudience"
    COMPETITIVE_POSITION    = "competitivePosition"
    CONTENT_STRATEGY        = "contentStrategy"
    SEO_ANALYSIS            = "seoAnalysis"
    CONVERSION_OPTIMIZATION = "conversionOptimization"
    SOCIAL_MEDIA_STRATEGY   = "socialMediaStrategy"
    PAID_ADVERTISING        = "paidAdvertising"
    EMAIL_MARKETING         = "emailMarketing"
    ANALYTICS_INSIGHTS      = "analyticsInsights"

    @property
    def label(self) -> str:
        return self.name

    @property
    def key(self) -> str:
        return self.value

    @property
    def field(self) -> str:
        return self.name.lower()

    @property
    def title(self) -> str:
        return self.name.replace("_", " ").title().replace("Seo ", "SEO ")


def _starts_with(line: str, prefix: str) -> bool:
    return line[:len(prefix)].upper() == prefix


def _is_label_line(line: str) -> bool:
    stripped = line.lstrip()
    return any(_starts_with(stripped, s.label + ":") for s in Section)


def parse_section(text: str, label: str) -> str:
    """Return the trimmed text under `label`, or SENTINEL. Never raises."""
    if not isinstance(text, str) or not text:
        return SENTINEL

    prefix = label.upper() + ":"
    captured: Optional[list] = None

    for line in text.splitlines(keepends=True):
        if captured is None:
            stripped = line.lstrip()
            if _starts_with(stripped, prefix):
                captured = [stripped[len(prefix):]]
        elif _is_label_line(line):
            break
        else:
            captured.append(line)

    if captured is None:
        return SENTINEL

    content = "".join(captured).strip()
    return content or SENTINEL


@dataclass(frozen=True)
class AnalysisSections:
    brand_analysis: str
    target_audience: str
    competitive_position: str
    content_strategy: str
    seo_analysis: str
    conversion_optimization: str
    social_media_strategy: str
    paid_advertising: str
    email_marketing: str
    analytics_insights: str

    def get(self, section: Section) -> str:
        return getattr(self, section.field)

    def iter_sections(self) -> Iterator[tuple]:
        for section in Section:
            yield section, self.get(section)

    def missing(self) -> list:
        """Sections the reply did not provide."""
        return [s for s, content in self.iter_sections() if content == SENTINEL]

    def as_dict(self) -> dict:
        """Output mapping keyed by camelCase section key, in fixed order."""
        return {section.key: content for section, content in self.iter_sections()}


def parse_sections(text: str) -> AnalysisSections:
    """Parse every section, in label order. Every key is always present."""
    parsed = {section.field: parse_section(text, section.label) for section in Section}
    result = AnalysisSections(**parsed)

    missing = result.missing()
    if missing:
        logger.warning(
            "Reply missing %d/%d sections: %s",
            len(missing), len(Section), ", ".join(s.label for s in missing),
        )
    return result
