from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import FitMapRequest, KeywordsRequest
from models.responses import FitMapResult, HealthResponse, KeywordsResponse
from services import fit_map_analyzer
from services.keyword_extractor import extract_keywords

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(gemini_configured=bool(settings.gemini_api_key))


@router.post("/fit-map", response_model=FitMapResult)
@limiter.limit("10/minute")
async def fit_map(request: Request, body: FitMapRequest):
    return await fit_map_analyzer.analyze_fit_map(
        body.jd_text, body.resume_text, body.bullets
    )


@router.post("/fit-map/rules", response_model=FitMapResult)
@limiter.limit("10/minute")
async def fit_map_rules(request: Request, body: FitMapRequest):
    return fit_map_analyzer.analyze_deterministic(
        body.jd_text, body.resume_text, body.bullets
    )


@router.post("/keywords", response_model=KeywordsResponse)
async def keywords(body: KeywordsRequest):
    return KeywordsResponse(keywords=sorted(extract_keywords(body.text), key=str.lower))
