"""Mood journal entry schemas and the inbound validation layer."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from moodlog.libs.errors import EntryValidationError

# Moods offered by the journal UI; the store accepts any label, prompts and reply checks use these.
CANONICAL_MOODS: Dict[str, str] = {
    "Happy": "😊",
    "Excited": "🤩",
    "Calm": "😌",
    "Love": "🥰",
    "Sad": "😢",
    "Tired": "😴",
    "Angry": "😤",
    "Anxious": "😰",
    "Grateful": "🙏",
    "Energetic": "⚡",
    "Confused": "😕",
    "Peaceful": "☮️",
}


class InsertMoodEntry(BaseModel):
    """Inbound shape of a new journal entry; the store adds ``id`` and ``createdAt``."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[StrictStr] = None
    mood: StrictStr
    emoji: StrictStr
    note: Optional[StrictStr] = None

    @field_validator("mood", "emoji")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class MoodEntry(InsertMoodEntry):
    """A stored journal entry."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    created_at: datetime = Field(alias="createdAt")


class AnalyzeMoodResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    suggested_mood: str = Field(alias="suggestedMood")
    confidence: float
    emoji: str


class InsightsResponse(BaseModel):
    insights: str


class RecommendationsResponse(BaseModel):
    recommendations: List[str]


def _field_name(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) if loc else "body"


def validate_insert_payload(payload: Any) -> InsertMoodEntry:
    """Validate a raw request body, raising ``EntryValidationError`` naming the bad fields."""

    try:
        return InsertMoodEntry.model_validate(payload)
    except ValidationError as exc:
        problems = [(_field_name(err["loc"]), err["msg"]) for err in exc.errors()]
        fields = list(dict.fromkeys(name for name, _ in problems))
        detail = "; ".join(f"{name}: {msg}" for name, msg in problems)
        raise EntryValidationError(f"Invalid mood entry: {detail}", fields=fields) from exc


__all__ = [
    "AnalyzeMoodResponse",
    "CANONICAL_MOODS",
    "InsertMoodEntry",
    "InsightsResponse",
    "MoodEntry",
    "RecommendationsResponse",
    "validate_insert_payload",
]
