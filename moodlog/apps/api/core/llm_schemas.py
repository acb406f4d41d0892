from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, confloat, field_validator, model_validator

from moodlog.libs.schemas.mood import CANONICAL_MOODS

_MOOD_LOOKUP = {name.lower(): name for name in CANONICAL_MOODS}


class MoodClassificationOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    suggested_mood: str = Field(alias="suggestedMood")
    confidence: confloat(ge=0.0, le=1.0)
    emoji: str

    @field_validator("confidence", mode="before")
    @classmethod
    def _numeric_confidence(cls, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("confidence must be a number")
        return value

    @field_validator("suggested_mood")
    @classmethod
    def _known_mood(cls, value: str) -> str:
        canonical = _MOOD_LOOKUP.get(value.strip().lower())
        if canonical is None:
            raise ValueError(f"unknown mood {value!r}")
        return canonical

    @field_validator("emoji")
    @classmethod
    def _emoji_present(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("emoji must not be empty")
        return value


class RecommendationOutput(BaseModel):
    recommendations: List[str] = Field(min_length=3, max_length=3)

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"recommendations": data}
        return data

    @field_validator("recommendations")
    @classmethod
    def _non_blank(cls, values: List[str]) -> List[str]:
        cleaned = [value.strip() for value in values]
        if any(not value for value in cleaned):
            raise ValueError("recommendations must not be empty")
        return cleaned
