"""LLM-backed mood classification, journal summaries and wellness suggestions.

Every operation makes one remote call and degrades to a fixed value when the
call fails or the reply does not have the expected shape, so a flaky model
never breaks journaling.
"""

from __future__ import annotations

import json
import logging
from typing import List, Optional, Sequence

from moodlog.apps.api.core.llm import call_llm
from moodlog.apps.api.core.llm_schemas import MoodClassificationOutput, RecommendationOutput
from moodlog.libs.errors import MalformedResponse, RemoteCallFailure
from moodlog.libs.llm_router import LLMRouter
from moodlog.libs.schemas.mood import CANONICAL_MOODS, AnalyzeMoodResponse, MoodEntry

logger = logging.getLogger(__name__)

FALLBACK_MOOD = "Calm"
FALLBACK_CONFIDENCE = 0.5
FALLBACK_EMOJI = "😌"
EMPTY_JOURNAL_INSIGHT = "Start tracking your moods to get personalized insights!"
FALLBACK_INSIGHT = "Keep tracking your moods! Every entry helps you understand your emotional patterns better."
FALLBACK_RECOMMENDATIONS = (
    "Take a moment to breathe",
    "Practice gratitude",
    "Connect with someone you care about",
)

SUMMARY_WINDOW = 10

CLASSIFY_MAX_TOKENS = 150
SUMMARY_MAX_TOKENS = 300
RECOMMEND_MAX_TOKENS = 200

_CLASSIFY_PROMPT = """Analyze this mood note and suggest the most appropriate mood: "{note}"

Respond with a JSON object containing:
- suggestedMood: one of [{moods}]
- confidence: number between 0-1
- emoji: appropriate emoji for the mood

Example: {{"suggestedMood": "Happy", "confidence": 0.85, "emoji": "😊"}}"""

_SUMMARY_PROMPT = """Analyze these recent mood entries and provide helpful insights: {entries}

Provide a warm, encouraging analysis that includes:
- Overall mood patterns you notice
- Positive trends to celebrate
- Gentle suggestions for emotional wellbeing
- Keep it under 200 words and supportive in tone"""

_RECOMMEND_PROMPT = """Given someone is feeling "{mood}"{note_clause}, suggest 3 brief, actionable wellness activities.

Respond with a JSON array of 3 short suggestions (max 50 chars each).
Example: ["Take 5 deep breaths", "Go for a short walk", "Listen to uplifting music"]"""


def fallback_classification() -> AnalyzeMoodResponse:
    return AnalyzeMoodResponse(
        suggested_mood=FALLBACK_MOOD,
        confidence=FALLBACK_CONFIDENCE,
        emoji=FALLBACK_EMOJI,
    )


class MoodInsightService:
    """Adapter between journal data and the remote text-generation router."""

    def __init__(self, router: LLMRouter, *, timeout: float = 20.0) -> None:
        self._router = router
        self._timeout = timeout

    async def classify_mood(self, note: str) -> AnalyzeMoodResponse:
        prompt = _CLASSIFY_PROMPT.format(note=note, moods=", ".join(CANONICAL_MOODS))
        try:
            result = await call_llm(
                self._router,
                prompt,
                schema=MoodClassificationOutput,
                max_tokens=CLASSIFY_MAX_TOKENS,
                timeout=self._timeout,
            )
        except (RemoteCallFailure, MalformedResponse) as exc:
            logger.warning("Mood classification fell back to default: %s", exc)
            return fallback_classification()
        return AnalyzeMoodResponse(
            suggested_mood=result.suggested_mood,
            confidence=result.confidence,
            emoji=result.emoji,
        )

    async def summarize(self, entries: Sequence[MoodEntry]) -> str:
        """Summarise the newest entries; ``entries`` must already be newest-first."""

        if not entries:
            return EMPTY_JOURNAL_INSIGHT

        mood_data = [
            {
                "mood": entry.mood,
                "note": entry.note or "",
                "date": entry.created_at.isoformat(),
            }
            for entry in list(entries)[:SUMMARY_WINDOW]
        ]
        prompt = _SUMMARY_PROMPT.format(entries=json.dumps(mood_data, ensure_ascii=False))
        try:
            text = await call_llm(
                self._router,
                prompt,
                max_tokens=SUMMARY_MAX_TOKENS,
                timeout=self._timeout,
            )
        except (RemoteCallFailure, MalformedResponse) as exc:
            logger.warning("Mood insights fell back to default: %s", exc)
            return FALLBACK_INSIGHT
        return text

    async def recommend(self, mood: str, note: Optional[str] = None) -> List[str]:
        note_clause = f' with the note: "{note}"' if note else ""
        prompt = _RECOMMEND_PROMPT.format(mood=mood, note_clause=note_clause)
        try:
            result = await call_llm(
                self._router,
                prompt,
                schema=RecommendationOutput,
                max_tokens=RECOMMEND_MAX_TOKENS,
                timeout=self._timeout,
            )
        except (RemoteCallFailure, MalformedResponse) as exc:
            logger.warning("Recommendations fell back to defaults: %s", exc)
            return list(FALLBACK_RECOMMENDATIONS)
        return list(result.recommendations)


__all__ = [
    "EMPTY_JOURNAL_INSIGHT",
    "FALLBACK_INSIGHT",
    "FALLBACK_RECOMMENDATIONS",
    "MoodInsightService",
    "fallback_classification",
]
