"""Fit map value objects: spans, overlaps, gaps, under-evidenced skills, verdict."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Severity(str, Enum):
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


class FitLevel(str, Enum):
    FIT = "FIT"
    BORDERLINE = "BORDERLINE"
    NOT_FIT = "NOT_FIT"


class TextSpan(BaseModel):
    """A verbatim slice of a source document at [start, end)."""
    model_config = ConfigDict(frozen=True)

    text: str
    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def check_length(self) -> "TextSpan":
        if self.end - self.start != len(self.text):
            raise ValueError("span offsets do not match text length")
        return self


class ResumeSpan(TextSpan):
    """A resume span plus the structural part of the resume it sits in."""
    section: str = "skills"
    index: int = Field(default=0, ge=0)


class OverlapItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: str
    jd_span: TextSpan
    resume_span: ResumeSpan
    confidence: float = Field(ge=0.0, le=1.0)


class GapItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: str
    jd_span: TextSpan
    severity: Severity


class UnderEvidencedItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    skill: str
    resume_span: ResumeSpan
    reason: str


class FitResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    level: FitLevel
    confidence: float = Field(ge=0.0, le=1.0)
