"""Pydantic models and schema utilities."""

from .mood import (
    CANONICAL_MOODS,
    AnalyzeMoodResponse,
    InsertMoodEntry,
    InsightsResponse,
    MoodEntry,
    RecommendationsResponse,
    validate_insert_payload,
)
from .settings import AppSettings, get_settings

__all__ = [
    "AnalyzeMoodResponse",
    "AppSettings",
    "CANONICAL_MOODS",
    "InsertMoodEntry",
    "InsightsResponse",
    "MoodEntry",
    "RecommendationsResponse",
    "get_settings",
    "validate_insert_payload",
]
