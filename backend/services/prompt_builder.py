"""Prompt template for the fit map enhancement call."""

from models.schemas.fit_map import GapItem, OverlapItem, UnderEvidencedItem


def _skills(items: list) -> str:
    return ", ".join(item.skill for item in items) or "(none)"


def build_fit_map_prompt(
    jd_text: str,
    resume_text: str,
    overlaps: list[OverlapItem],
    gaps: list[GapItem],
    under_evidenced: list[UnderEvidencedItem],
) -> str:
    """Ask for findings the keyword rules missed, quoting both documents."""
    return f"""You are analyzing the fit between a job description and a candidate's resume.

A keyword rules engine already found:
- Overlapping skills: {_skills(overlaps)}
- Missing skills: {_skills(gaps)}
- Skills mentioned without evidence: {_skills(under_evidenced)}

Find ONLY what the rules above missed:
1. Additional overlaps, including skills implied by others (e.g. "React" implies "JavaScript").
2. Additional gaps: requirements in the job description the resume does not demonstrate.
3. Resume skills that lack concrete evidence (metrics, specific projects).

Every quote MUST be copied verbatim from the document it cites. Be conservative
with confidence; use high values only when the evidence is unambiguous.

JOB DESCRIPTION:
---
{jd_text}
---

RESUME:
---
{resume_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "additional_overlaps": [
    {{"skill": "<name>", "jd_quote": "<verbatim>", "resume_quote": "<verbatim>", "confidence": <0.0-1.0>}}
  ],
  "additional_gaps": [
    {{"skill": "<name>", "jd_quote": "<verbatim>", "severity": "HIGH" | "MEDIUM" | "LOW"}}
  ],
  "under_evidenced": [
    {{"skill": "<name>", "resume_quote": "<verbatim>", "reason": "<one sentence>"}}
  ],
  "confidence": <0.0-1.0>,
  "reasoning": "<two sentences at most>"
}}"""
