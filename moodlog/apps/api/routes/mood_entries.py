from __future__ import annotations

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends, HTTPException, status

from moodlog.apps.api.core.store import MoodEntryStore
from moodlog.apps.api.deps import get_store
from moodlog.libs.schemas.mood import MoodEntry, validate_insert_payload

router = APIRouter(prefix="/api/mood-entries", tags=["mood-entries"])
logger = logging.getLogger(__name__)


@router.get("", response_model=List[MoodEntry])
async def list_mood_entries(store: MoodEntryStore = Depends(get_store)) -> List[MoodEntry]:
    try:
        return store.list()
    except Exception as exc:
        logger.exception("Listing mood entries failed")
        raise HTTPException(status_code=500, detail="Failed to fetch mood entries") from exc


@router.post("", response_model=MoodEntry, status_code=status.HTTP_201_CREATED)
async def create_mood_entry(
    payload: Any = Body(None),
    store: MoodEntryStore = Depends(get_store),
) -> MoodEntry:
    entry_in = validate_insert_payload(payload)
    try:
        entry = store.create(entry_in)
    except Exception as exc:
        logger.exception("Creating mood entry failed")
        raise HTTPException(status_code=500, detail="Failed to create mood entry") from exc
    logger.info(
        "Mood entry created",
        extra={"event": "entry_created", "entry_id": entry.id, "mood": entry.mood},
    )
    return entry


__all__ = ["router"]
