from typing import Annotated

from pydantic import BaseModel, Field


class FitMapRequest(BaseModel):
    jd_text: str = Field(..., max_length=10000, description="Job description text")
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
    bullets: list[Annotated[str, Field(max_length=1000)]] | None = Field(
        None,
        max_length=200,
        description="Resume bullet strings; extracted from resume_text when omitted",
    )


class KeywordsRequest(BaseModel):
    text: str = Field(..., max_length=50000)
