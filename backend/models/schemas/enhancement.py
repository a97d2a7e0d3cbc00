"""Shape of the hosted model's fit map enhancement reply.

The model only quotes text; offsets are resolved against the source
documents before items are merged into the deterministic sets.
"""

from pydantic import BaseModel, Field

from models.schemas.fit_map import Severity


class QuotedOverlap(BaseModel):
    skill: str
    jd_quote: str
    resume_quote: str
    confidence: float = Field(default=0.7, ge=0.0, le=1.0)


class QuotedGap(BaseModel):
    skill: str
    jd_quote: str
    severity: Severity = Severity.MEDIUM


class QuotedUnderEvidenced(BaseModel):
    skill: str
    resume_quote: str
    reason: str = ""


class FitMapEnhancement(BaseModel):
    """Supplemental findings returned when the rules signal is weak."""
    additional_overlaps: list[QuotedOverlap] = []
    additional_gaps: list[QuotedGap] = []
    under_evidenced: list[QuotedUnderEvidenced] = []
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    reasoning: str = ""
