"""Keyword extraction for resume-JD fit analysis.

Scans free text for terms from the curated vocabulary (languages,
frameworks, databases, cloud/DevOps, tools, methodology concepts) and
for an explicit experience-duration claim. Matches are reported in
their canonical vocabulary spelling, never as found in the source.
"""

import logging
import re

from services import matcher
from services.vocabulary import ALL_KEYWORDS

logger = logging.getLogger(__name__)

# "5+ years of experience", "3 years experience", "10 year of experience"
EXPERIENCE_RE = re.compile(
    r"(\d+)\+?\s*years?\s+(?:of\s+)?experience",
    re.IGNORECASE,
)


def experience_keyword(text: str) -> str | None:
    """Return the synthetic "<N>+ years" keyword for the first duration claim."""
    match = EXPERIENCE_RE.search(text)
    if match is None:
        return None
    return f"{match.group(1)}+ years"


def extract_keywords(text: str) -> set[str]:
    """Extract canonical vocabulary keywords present in text.

    Matching is case-insensitive and whole-word, so "POSTGRESQL" and
    "postgresql" both yield a single "PostgreSQL", while "javascripter"
    does not yield "JavaScript". Text with no recognised terms returns
    an empty set.
    """
    keywords = {kw for kw in ALL_KEYWORDS if matcher.contains(kw, text)}

    years = experience_keyword(text)
    if years is not None:
        keywords.add(years)

    logger.debug("Extracted %d keywords", len(keywords))
    return keywords
