"""Terminal output of one fit map analysis run."""

from pydantic import BaseModel

from models.schemas.fit_map import FitLevel, GapItem, OverlapItem, UnderEvidencedItem


class FitMapResult(BaseModel):
    """Fit verdict with the findings it was computed from.

    ``escalated`` is set when the hosted model was consulted and its
    findings were merged; ``degraded`` when escalation was wanted but
    failed and the rules-only result was kept.
    """
    overall_fit: FitLevel
    confidence: float
    overlap: list[OverlapItem] = []
    gaps: list[GapItem] = []
    under_evidenced: list[UnderEvidencedItem] = []
    escalated: bool = False
    degraded: bool = False
    scoring_method: str = "rules"
