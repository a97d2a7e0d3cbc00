"""Pydantic contracts for the fit map engine."""

from models.schemas.enhancement import FitMapEnhancement
from models.schemas.fit_map import (
    FitLevel,
    FitResult,
    GapItem,
    OverlapItem,
    ResumeSpan,
    Severity,
    TextSpan,
    UnderEvidencedItem,
)
from models.schemas.fit_map_result import FitMapResult

__all__ = [
    "FitLevel",
    "FitResult",
    "FitMapEnhancement",
    "FitMapResult",
    "GapItem",
    "OverlapItem",
    "ResumeSpan",
    "Severity",
    "TextSpan",
    "UnderEvidencedItem",
]
