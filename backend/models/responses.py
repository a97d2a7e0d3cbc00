from pydantic import BaseModel

from models.schemas.fit_map_result import FitMapResult


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False


class KeywordsResponse(BaseModel):
    keywords: list[str] = []


__all__ = ["FitMapResult", "HealthResponse", "KeywordsResponse"]
