"""Deterministic fit map rules: overlaps, gaps and under-evidenced skills.

Compares the vocabulary keywords of a job description and a resume.
Every finding cites the first occurrence of its keyword; findings whose
keyword cannot be cited are omitted rather than reported without one.
"""

import logging
import re

from models.schemas.fit_map import (
    GapItem,
    OverlapItem,
    Severity,
    UnderEvidencedItem,
)
from services import matcher
from services.keyword_extractor import extract_keywords
from services.span_locator import locate, locate_in_resume

logger = logging.getLogger(__name__)

OVERLAP_CONFIDENCE = 0.9

# Severity context: characters on each side of the first occurrence
CONTEXT_RADIUS = 100
# More mentions than this escalate an unqualified gap to MEDIUM
REPEAT_THRESHOLD = 2

_HIGH_CUES = re.compile(r"required|requires|must have|essential", re.IGNORECASE)
_MEDIUM_CUES = re.compile(r"responsibilities|your role|what you'll do", re.IGNORECASE)

# Evidence signals for resume bullets
_METRIC_RE = re.compile(
    r"\d+%|\d+x|\$\d+|\b(?:increased|reduced|improved)\b\D*\d",
    re.IGNORECASE,
)
_ACTION_VERB_RE = re.compile(
    r"^\s*(?:built|created|developed|designed|implemented|led)\b",
    re.IGNORECASE,
)

UNDER_EVIDENCED_REASON = (
    "Mentioned but not demonstrated with metrics or specific accomplishments"
)


def extract_context(keyword: str, text: str, radius: int = CONTEXT_RADIUS) -> str:
    """Return the text window of ``radius`` chars around the keyword's first match."""
    match = matcher.first_match(keyword, text)
    if match is None:
        return ""
    start = max(0, match.start() - radius)
    end = min(len(text), match.end() + radius)
    return text[start:end]


def determine_severity(keyword: str, jd_text: str) -> Severity:
    """Grade a missing JD keyword: HIGH, then MEDIUM, otherwise LOW."""
    context = extract_context(keyword, jd_text)

    if _HIGH_CUES.search(context):
        return Severity.HIGH

    if (
        _MEDIUM_CUES.search(context)
        or matcher.count_matches(keyword, jd_text) > REPEAT_THRESHOLD
    ):
        return Severity.MEDIUM

    return Severity.LOW


def find_overlaps(jd_text: str, resume_text: str) -> list[OverlapItem]:
    """Keywords present in both documents, ordered by position in the JD."""
    shared = extract_keywords(jd_text) & extract_keywords(resume_text)

    overlaps: list[OverlapItem] = []
    for keyword in shared:
        jd_span = locate(keyword, jd_text)
        resume_span = locate_in_resume(keyword, resume_text)
        if jd_span is None or resume_span is None:
            logger.debug("No citation for overlap %r, skipped", keyword)
            continue
        overlaps.append(OverlapItem(
            skill=keyword,
            jd_span=jd_span,
            resume_span=resume_span,
            confidence=OVERLAP_CONFIDENCE,
        ))

    overlaps.sort(key=lambda item: (item.jd_span.start, item.skill))
    return overlaps


def find_gaps(jd_text: str, resume_text: str) -> list[GapItem]:
    """JD keywords missing from the resume, ordered by position in the JD."""
    missing = extract_keywords(jd_text) - extract_keywords(resume_text)

    gaps: list[GapItem] = []
    for keyword in missing:
        jd_span = locate(keyword, jd_text)
        if jd_span is None:
            logger.debug("No citation for gap %r, skipped", keyword)
            continue
        gaps.append(GapItem(
            skill=keyword,
            jd_span=jd_span,
            severity=determine_severity(keyword, jd_text),
        ))

    gaps.sort(key=lambda item: (item.jd_span.start, item.skill))
    return gaps


def is_evidence(keyword: str, bullet: str) -> bool:
    """True if the bullet mentions keyword and backs it with a metric or action verb."""
    if not matcher.contains(keyword, bullet):
        return False
    return bool(_METRIC_RE.search(bullet) or _ACTION_VERB_RE.search(bullet))


def find_under_evidenced(
    resume_text: str, resume_bullets: list[str]
) -> list[UnderEvidencedItem]:
    """Resume keywords never backed by a qualifying bullet."""
    items: list[UnderEvidencedItem] = []
    for keyword in extract_keywords(resume_text):
        if any(is_evidence(keyword, bullet) for bullet in resume_bullets):
            continue
        resume_span = locate_in_resume(keyword, resume_text)
        if resume_span is None:
            continue
        items.append(UnderEvidencedItem(
            skill=keyword,
            resume_span=resume_span,
            reason=UNDER_EVIDENCED_REASON,
        ))

    items.sort(key=lambda item: (item.resume_span.start, item.skill))
    return items
