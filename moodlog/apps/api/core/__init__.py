from __future__ import annotations

from .llm import call_llm
from .store import MoodEntryStore

__all__ = ["MoodEntryStore", "call_llm"]
