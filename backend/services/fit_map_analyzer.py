"""Fit map analysis: deterministic rules first, hosted model only if needed.

Flow:
    jd_text + resume_text (+ bullets)
      ├─ fit_rules.find_overlaps / find_gaps / find_under_evidenced
      ├─ fit_scorer.calculate_fit                  → initial verdict
      ├─ fit_scorer.needs_escalation?  no  → return rules-only result
      │                                yes → Gemini enhancement
      ├─ anchor model quotes to real offsets, merge with rule findings
      └─ fit_scorer.calculate_fit(merged)          → final verdict

Any escalation failure keeps the rules-only verdict and flags it degraded.
"""

import logging
import re

from pydantic import ValidationError

from config import settings
from models.schemas.enhancement import FitMapEnhancement
from models.schemas.fit_map import (
    GapItem,
    OverlapItem,
    ResumeSpan,
    TextSpan,
    UnderEvidencedItem,
)
from models.schemas.fit_map_result import FitMapResult
from services import gemini_client, prompt_builder, resume_parser
from services.fit_rules import find_gaps, find_overlaps, find_under_evidenced
from services.fit_scorer import calculate_fit, needs_escalation
from services.section_parser import locate_section

logger = logging.getLogger(__name__)


def anchor_quote(quote: str, text: str) -> TextSpan | None:
    """Locate a model-quoted passage in text, ignoring case."""
    quote = quote.strip()
    if not quote:
        return None
    match = re.search(re.escape(quote), text, re.IGNORECASE)
    if match is None:
        return None
    return TextSpan(text=match.group(0), start=match.start(), end=match.end())


def anchor_resume_quote(quote: str, resume_text: str) -> ResumeSpan | None:
    span = anchor_quote(quote, resume_text)
    if span is None:
        return None
    section, index = locate_section(resume_text, span.start)
    return ResumeSpan(**span.model_dump(), section=section, index=index)


def _build_result(
    overlaps: list[OverlapItem],
    gaps: list[GapItem],
    under_evidenced: list[UnderEvidencedItem],
    **flags,
) -> FitMapResult:
    fit = calculate_fit(overlaps, gaps)
    return FitMapResult(
        overall_fit=fit.level,
        confidence=fit.confidence,
        overlap=overlaps,
        gaps=gaps,
        under_evidenced=under_evidenced,
        **flags,
    )


def analyze_deterministic(
    jd_text: str, resume_text: str, bullets: list[str] | None = None
) -> FitMapResult:
    """Run the rules engine only; no network access."""
    if bullets is None:
        bullets = resume_parser.extract_bullets(resume_text)

    overlaps = find_overlaps(jd_text, resume_text)
    gaps = find_gaps(jd_text, resume_text)
    under_evidenced = find_under_evidenced(resume_text, bullets)

    result = _build_result(overlaps, gaps, under_evidenced)
    logger.info(
        "Fit map rules: %d overlaps, %d gaps, %d under-evidenced -> %s (%.2f)",
        len(overlaps), len(gaps), len(under_evidenced),
        result.overall_fit.value, result.confidence,
    )
    return result


def merge_enhancement(
    result: FitMapResult,
    enhancement: FitMapEnhancement,
    jd_text: str,
    resume_text: str,
) -> FitMapResult:
    """Fold model findings into the rules result and rescore.

    A model overlap for a skill the rules reported as a gap resolves
    that gap. Items whose quotes cannot be found in the source
    documents, and skills already reported in the same category, are
    dropped.
    """
    matched = {item.skill.lower() for item in result.overlap}
    weak = {item.skill.lower() for item in result.under_evidenced}

    overlaps = list(result.overlap)
    for quoted in enhancement.additional_overlaps:
        if quoted.skill.lower() in matched:
            continue
        jd_span = anchor_quote(quoted.jd_quote, jd_text)
        resume_span = anchor_resume_quote(quoted.resume_quote, resume_text)
        if jd_span is None or resume_span is None:
            logger.debug("Dropping unanchored model overlap %r", quoted.skill)
            continue
        matched.add(quoted.skill.lower())
        overlaps.append(OverlapItem(
            skill=quoted.skill,
            jd_span=jd_span,
            resume_span=resume_span,
            confidence=quoted.confidence,
        ))

    gaps = [gap for gap in result.gaps if gap.skill.lower() not in matched]
    resolved = len(result.gaps) - len(gaps)

    missing = {item.skill.lower() for item in gaps}
    for quoted in enhancement.additional_gaps:
        skill = quoted.skill.lower()
        if skill in matched or skill in missing:
            continue
        jd_span = anchor_quote(quoted.jd_quote, jd_text)
        if jd_span is None:
            logger.debug("Dropping unanchored model gap %r", quoted.skill)
            continue
        missing.add(skill)
        gaps.append(GapItem(skill=quoted.skill, jd_span=jd_span, severity=quoted.severity))

    under_evidenced = list(result.under_evidenced)
    for quoted in enhancement.under_evidenced:
        if quoted.skill.lower() in weak:
            continue
        resume_span = anchor_resume_quote(quoted.resume_quote, resume_text)
        if resume_span is None:
            continue
        weak.add(quoted.skill.lower())
        under_evidenced.append(UnderEvidencedItem(
            skill=quoted.skill,
            resume_span=resume_span,
            reason=quoted.reason or "Not backed by concrete evidence",
        ))

    logger.info(
        "Model enhancement added %d overlaps (%d resolving gaps), %d gaps, %d under-evidenced",
        len(overlaps) - len(result.overlap),
        resolved,
        len(gaps) - len(result.gaps) + resolved,
        len(under_evidenced) - len(result.under_evidenced),
    )
    return _build_result(
        overlaps, gaps, under_evidenced,
        escalated=True, scoring_method="rules+llm",
    )


async def analyze_fit_map(
    jd_text: str, resume_text: str, bullets: list[str] | None = None
) -> FitMapResult:
    """Rules pass, then an optional model pass when the signal is weak."""
    result = analyze_deterministic(jd_text, resume_text, bullets)

    if not needs_escalation(result.overlap, result.gaps):
        return result
    if not settings.escalation_enabled:
        logger.info("Fit map is ambiguous but escalation is disabled")
        return result

    logger.info("Ambiguous fit map, requesting model enhancement")
    prompt = prompt_builder.build_fit_map_prompt(
        jd_text, resume_text, result.overlap, result.gaps, result.under_evidenced,
    )
    data = await gemini_client.generate_json(prompt)
    if data is None:
        logger.warning("Model enhancement unavailable, using rules-only fit map")
        return result.model_copy(update={"degraded": True})

    try:
        enhancement = FitMapEnhancement.model_validate(data)
    except ValidationError as e:
        logger.warning("Invalid model enhancement, using rules-only fit map: %s", e)
        return result.model_copy(update={"degraded": True})

    return merge_enhancement(result, enhancement, jd_text, resume_text)
