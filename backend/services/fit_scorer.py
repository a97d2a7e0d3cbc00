"""Fit verdict from overlap/gap findings, and the escalation decision."""

from collections.abc import Sequence

from models.schemas.fit_map import FitLevel, FitResult, GapItem, OverlapItem, Severity

OVERLAP_WEIGHT = 2.0
GAP_PENALTIES: dict[Severity, float] = {
    Severity.HIGH: 3.0,
    Severity.MEDIUM: 1.5,
    Severity.LOW: 0.5,
}

FIT_THRESHOLD = 10.0
BORDERLINE_THRESHOLD = 5.0

BASE_CONFIDENCE = 0.5
MAX_CONFIDENCE = 0.95
# Findings needed to move confidence from 0.5 to 1.0 before the cap
CONFIDENCE_SCALE = 30

# Escalate when both sets are smaller than this
MIN_SIGNAL = 3
MIN_CONFIDENCE = 0.7


def fit_score(overlaps: Sequence[OverlapItem], gaps: Sequence[GapItem]) -> float:
    """Overlaps earn points; each gap costs according to its severity."""
    penalty = sum(GAP_PENALTIES[gap.severity] for gap in gaps)
    return OVERLAP_WEIGHT * len(overlaps) - penalty


def fit_confidence(overlaps: Sequence[OverlapItem], gaps: Sequence[GapItem]) -> float:
    total = len(overlaps) + len(gaps)
    if total == 0:
        return BASE_CONFIDENCE
    return min(MAX_CONFIDENCE, BASE_CONFIDENCE + total / CONFIDENCE_SCALE)


def calculate_fit(
    overlaps: Sequence[OverlapItem], gaps: Sequence[GapItem]
) -> FitResult:
    """Classify the findings as FIT (>= 10), BORDERLINE (>= 5) or NOT_FIT."""
    score = fit_score(overlaps, gaps)
    confidence = fit_confidence(overlaps, gaps)

    if score >= FIT_THRESHOLD:
        level = FitLevel.FIT
    elif score >= BORDERLINE_THRESHOLD:
        level = FitLevel.BORDERLINE
    else:
        level = FitLevel.NOT_FIT

    return FitResult(level=level, confidence=confidence)


def needs_escalation(
    overlaps: Sequence[OverlapItem], gaps: Sequence[GapItem]
) -> bool:
    """Whether the rules signal is too thin or ambiguous to stand alone.

    True when both sets are small, when the verdict is BORDERLINE, or
    when confidence is below 0.7. Only signals; the caller decides
    whether to consult a model and rescore.
    """
    if len(overlaps) < MIN_SIGNAL and len(gaps) < MIN_SIGNAL:
        return True

    fit = calculate_fit(overlaps, gaps)
    if fit.level == FitLevel.BORDERLINE:
        return True

    return fit.confidence < MIN_CONFIDENCE
