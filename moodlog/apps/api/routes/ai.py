from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from moodlog.apps.api.core.store import MoodEntryStore
from moodlog.apps.api.deps import get_insight_service, get_store
from moodlog.apps.api.services.mood_insights import MoodInsightService
from moodlog.libs.schemas.mood import AnalyzeMoodResponse, InsightsResponse, RecommendationsResponse

router = APIRouter(prefix="/api/ai", tags=["ai"])
logger = logging.getLogger(__name__)


def _required_text(payload: Any, key: str, message: str) -> str:
    value = payload.get(key) if isinstance(payload, dict) else None
    if not isinstance(value, str) or not value.strip():
        raise HTTPException(status_code=400, detail=message)
    return value


def _optional_text(payload: dict, key: str) -> Optional[str]:
    value = payload.get(key)
    if value is not None and not isinstance(value, str):
        raise HTTPException(status_code=400, detail=f"{key} must be a string")
    return value


@router.post("/analyze-mood", response_model=AnalyzeMoodResponse)
async def analyze_mood(
    payload: Any = Body(None),
    service: MoodInsightService = Depends(get_insight_service),
) -> AnalyzeMoodResponse:
    note = _required_text(payload, "note", "Note text is required")
    try:
        return await service.classify_mood(note)
    except Exception as exc:
        logger.exception("Mood analysis failed")
        raise HTTPException(status_code=500, detail="Failed to analyze mood") from exc


@router.get("/insights", response_model=InsightsResponse)
async def get_insights(
    store: MoodEntryStore = Depends(get_store),
    service: MoodInsightService = Depends(get_insight_service),
) -> InsightsResponse:
    try:
        insights = await service.summarize(store.list())
    except Exception as exc:
        logger.exception("Insight generation failed")
        raise HTTPException(status_code=500, detail="Failed to generate insights") from exc
    return InsightsResponse(insights=insights)


@router.post("/recommendations", response_model=RecommendationsResponse)
async def get_recommendations(
    payload: Any = Body(None),
    service: MoodInsightService = Depends(get_insight_service),
) -> RecommendationsResponse:
    mood = _required_text(payload, "mood", "Mood is required")
    note = _optional_text(payload, "note")
    try:
        recommendations = await service.recommend(mood, note)
    except Exception as exc:
        logger.exception("Recommendation generation failed")
        raise HTTPException(status_code=500, detail="Failed to generate recommendations") from exc
    return RecommendationsResponse(recommendations=recommendations)


__all__ = ["router"]
