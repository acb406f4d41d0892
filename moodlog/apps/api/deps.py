from __future__ import annotations

from fastapi import HTTPException, Request

from moodlog.apps.api.core.store import MoodEntryStore
from moodlog.apps.api.services.mood_insights import MoodInsightService


def get_store(request: Request) -> MoodEntryStore:
    store = getattr(request.app.state, "mood_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Mood store unavailable")
    return store


def get_insight_service(request: Request) -> MoodInsightService:
    service = getattr(request.app.state, "insight_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Mood insights unavailable")
    return service
