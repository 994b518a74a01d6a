"""
API Routes for the Resume Analytics Backend.

Provides endpoints for:
- Computing resume analytics with suggestions and a rating
- Generating suggestions for an existing analytics result
- Mapping a score to its display rating
- Exporting analytics as a JSON download
- Health checks
"""
import re
from datetime import datetime
import logging

from fastapi import APIRouter, HTTPException, Query, Response

from app.models.analytics import (
    AnalyticsReport,
    AnalyticsResult,
    HealthResponse,
    ScoreRating,
    Suggestion,
)
from app.models.resume import ResumeDocument
from app.services.analytics import build_analytics_report, export_analytics_data
from app.services.cache import (
    analytics_cache_key,
    cache_get_json,
    cache_set_json,
    is_cache_enabled,
)
from app.services.suggestions import generate_suggestions, get_score_rating
from app.config import get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns the service status, version, and whether the Redis cache is configured.
    """
    settings = get_settings()

    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.utcnow(),
        cacheEnabled=is_cache_enabled()
    )


@router.post(
    "/analytics",
    response_model=AnalyticsReport,
    response_model_exclude_none=True,
    tags=["Analytics"]
)
async def analyze_resume(resume: ResumeDocument):
    """
    Analyze a resume.

    Request body: the resume document in the editor's camelCase format.
    Every field is optional; missing sections count as empty.

    Returns:
    - analytics: word count, action verbs, quantifiable bullets, impact words,
      completeness and the 0-100 score
    - suggestions: improvement advice in priority order
    - rating: display band for the score
    """
    settings = get_settings()
    cache_key = analytics_cache_key(resume)
    cached = await cache_get_json(cache_key)
    if cached:
        return cached

    try:
        report = build_analytics_report(resume).to_dict()
    except Exception as e:
        logger.error(f"Analytics failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    await cache_set_json(cache_key, report, ttl=settings.cache_ttl)
    return report


@router.post("/analytics/suggestions", response_model=list[Suggestion], tags=["Analytics"])
async def analytics_suggestions(analytics: AnalyticsResult):
    """
    Build improvement suggestions for a previously computed analytics result.
    """
    return generate_suggestions(analytics)


@router.get("/analytics/rating", response_model=ScoreRating, tags=["Analytics"])
async def analytics_rating(
    score: int = Query(..., ge=0, le=100, description="Analytics score (0-100)")
):
    """
    Map a score to its display rating (Excellent, Good, Fair, Needs Work, Poor).
    """
    return get_score_rating(score)


@router.post("/analytics/export", tags=["Analytics"])
async def export_analytics(resume: ResumeDocument):
    """
    Analyze a resume and return the report as a JSON file download.
    """
    try:
        content = export_analytics_data(build_analytics_report(resume))
    except Exception as e:
        logger.error(f"Analytics export failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    base_name = re.sub(r"[^A-Za-z0-9_-]+", "_", resume.title.strip()) or "resume"
    filename = f"{base_name}_analytics.json"
    return Response(
        content=content,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
