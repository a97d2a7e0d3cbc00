"""Tests for the fit verdict and escalation decision."""

import pytest

from models.schemas.fit_map import (
    FitLevel,
    GapItem,
    OverlapItem,
    ResumeSpan,
    Severity,
    TextSpan,
)
from services.fit_scorer import calculate_fit, fit_score, needs_escalation


def _overlaps(n: int) -> list[OverlapItem]:
    return [
        OverlapItem(
            skill=f"skill{i}",
            jd_span=TextSpan(text="x", start=i, end=i + 1),
            resume_span=ResumeSpan(text="x", start=i, end=i + 1),
            confidence=0.9,
        )
        for i in range(n)
    ]


def _gaps(high: int = 0, medium: int = 0, low: int = 0) -> list[GapItem]:
    severities = [Severity.HIGH] * high + [Severity.MEDIUM] * medium + [Severity.LOW] * low
    return [
        GapItem(skill=f"gap{i}", jd_span=TextSpan(text="y", start=i, end=i + 1), severity=s)
        for i, s in enumerate(severities)
    ]


class TestCalculateFit:
    def test_five_overlaps_is_fit(self):
        result = calculate_fit(_overlaps(5), [])
        assert result.level == FitLevel.FIT
        assert result.confidence == pytest.approx(0.5 + 5 / 30)

    def test_high_gap_sinks_small_overlap(self):
        gaps = _gaps(high=1)
        assert fit_score(_overlaps(2), gaps) == 1.0
        assert calculate_fit(_overlaps(2), gaps).level == FitLevel.NOT_FIT

    @pytest.mark.parametrize("overlaps, gaps, score, level", [
        (5, dict(), 10.0, FitLevel.FIT),
        (5, dict(low=1), 9.5, FitLevel.BORDERLINE),
        (3, dict(low=2), 5.0, FitLevel.BORDERLINE),
        (3, dict(low=3), 4.5, FitLevel.NOT_FIT),
        (4, dict(low=2), 7.0, FitLevel.BORDERLINE),
        (6, dict(medium=2), 9.0, FitLevel.BORDERLINE),
        (8, dict(high=1, medium=1, low=1), 11.0, FitLevel.FIT),
    ])
    def test_thresholds(self, overlaps, gaps, score, level):
        o, g = _overlaps(overlaps), _gaps(**gaps)
        assert fit_score(o, g) == pytest.approx(score)
        assert calculate_fit(o, g).level == level

    def test_empty_inputs(self):
        result = calculate_fit([], [])
        assert result.level == FitLevel.NOT_FIT
        assert result.confidence == 0.5

    def test_confidence_capped(self):
        assert calculate_fit(_overlaps(30), []).confidence == 0.95
        assert calculate_fit(_overlaps(5), _gaps(low=20)).confidence == 0.95

    @pytest.mark.parametrize("n_overlaps, n_gaps", [(1, 0), (0, 1), (3, 4), (40, 40)])
    def test_confidence_bounds(self, n_overlaps, n_gaps):
        confidence = calculate_fit(_overlaps(n_overlaps), _gaps(low=n_gaps)).confidence
        assert 0.5 < confidence <= 0.95


class TestNeedsEscalation:
    def test_too_little_signal(self):
        assert needs_escalation(_overlaps(2), _gaps(low=2)) is True
        assert needs_escalation([], []) is True

    def test_too_little_signal_regardless_of_score(self):
        # Score is 4 - 6 = -2 but the small sets alone trigger escalation
        assert needs_escalation(_overlaps(2), _gaps(high=2)) is True

    def test_borderline(self):
        # 12 - 4.5 = 7.5, confidence 0.8
        assert needs_escalation(_overlaps(6), _gaps(medium=3)) is True

    def test_low_confidence(self):
        # FIT with only 5 findings: confidence ~0.667
        assert needs_escalation(_overlaps(5), []) is True

    def test_clear_fit(self):
        assert needs_escalation(_overlaps(9), []) is False

    def test_clear_not_fit(self):
        # 6 - 18 = -12, confidence 0.8
        assert needs_escalation(_overlaps(3), _gaps(high=6)) is False
