"""In-memory journal entry store."""

from __future__ import annotations

import itertools
import threading
import uuid
from datetime import datetime, timezone
from typing import Callable, Dict, List, Tuple

from moodlog.libs.schemas.mood import InsertMoodEntry, MoodEntry


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MoodEntryStore:
    """Holds journal entries for the life of the process.

    Entries are immutable once written: there is no update or delete. Callers
    validate input before ``create``; the store performs no checks of its own.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory
        # id -> (insertion sequence, entry); the sequence breaks created_at ties.
        self._entries: Dict[str, Tuple[int, MoodEntry]] = {}
        self._sequence = itertools.count()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def list(self) -> List[MoodEntry]:
        """Return every entry, newest first."""

        with self._lock:
            rows = list(self._entries.values())
        rows.sort(key=lambda row: (row[1].created_at, row[0]), reverse=True)
        return [entry for _, entry in rows]

    def create(self, payload: InsertMoodEntry) -> MoodEntry:
        """Stamp ``payload`` with a fresh id and the current time and store it."""

        with self._lock:
            entry_id = self._id_factory()
            while entry_id in self._entries:
                entry_id = self._id_factory()
            entry = MoodEntry(
                id=entry_id,
                created_at=self._clock(),
                **payload.model_dump(),
            )
            self._entries[entry_id] = (next(self._sequence), entry)
        return entry


__all__ = ["MoodEntryStore"]
