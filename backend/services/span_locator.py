"""Citation lookup: where a keyword first appears in a document."""

from models.schemas.fit_map import ResumeSpan, TextSpan
from services import matcher
from services.section_parser import locate_section


def locate(keyword: str, text: str) -> TextSpan | None:
    """Find the first whole-word occurrence of keyword in text.

    The keyword is treated as a literal, not a pattern. The returned
    span keeps the source casing. ``None`` means no citation is
    available (e.g. "5+ years" extracted from "5 years of experience").
    """
    match = matcher.first_match(keyword, text)
    if match is None:
        return None
    return TextSpan(text=match.group(0), start=match.start(), end=match.end())


def locate_in_resume(keyword: str, resume_text: str) -> ResumeSpan | None:
    """Like :func:`locate`, also resolving the resume section and line index."""
    span = locate(keyword, resume_text)
    if span is None:
        return None
    section, index = locate_section(resume_text, span.start)
    return ResumeSpan(
        text=span.text,
        start=span.start,
        end=span.end,
        section=section,
        index=index,
    )
