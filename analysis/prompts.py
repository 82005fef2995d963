"""
Prompt template for the ten-section marketing analysis.
"""

from analysis.sections import Section
from scraper.extractor import Digest

# What each section should cover, in the order the model must answer.
SECTION_INSTRUCTIONS = {
    Section.BRAND_ANALYSIS:
        "analyzing the brand positioning, voice, values, and unique selling proposition",
    Section.TARGET_AUDIENCE:
        "identifying the primary target audience, demographics, psychographics, and customer personas",
    Section.COMPETITIVE_POSITION:
        "analyzing market position, competitive advantages, and differentiation strategy",
    Section.CONTENT_STRATEGY:
        "with specific content recommendations, topics to cover, and content calendar suggestions",
    Section.SEO_ANALYSIS:
        "analyzing current SEO status, keyword opportunities, and technical SEO recommendations",
    Section.CONVERSION_OPTIMIZATION:
        "with specific CTA improvements, landing page optimizations, and funnel recommendations",
    Section.SOCIAL_MEDIA_STRATEGY:
        "recommending platforms, posting strategy, content types, and engagement tactics",
    Section.PAID_ADVERTISING:
        "with PPC strategy, budget allocation, platform recommendations, and targeting suggestions",
    Section.EMAIL_MARKETING:
        "with email campaign ideas, segmentation strategy, and automation recommendations",
    Section.ANALYTICS_INSIGHTS:
        "identifying key metrics to track, analytics setup, and data-driven optimization opportunities",
}


def _section_block() -> str:
    return "\n\n".join(
        f"{section.label}:\n[3-4 sentences {SECTION_INSTRUCTIONS[section]}]"
        for section in Section
    )


def build_prompt(url: str, digest: Digest) -> str:
    """Render the digest into the fixed analysis instruction."""
    return f"""You are a complete marketing expert team analyzing a website. Provide comprehensive, actionable insights.

Website URL: {url}
Title: {digest.title}
Meta Description: {digest.meta_description}
Main Headings (H1): {digest.h1_line}
Subheadings (H2): {digest.h2_line}
Content Sample: {digest.body_excerpt}

Provide a detailed marketing analysis in the following format (be specific, actionable, and comprehensive):

{_section_block()}"""
