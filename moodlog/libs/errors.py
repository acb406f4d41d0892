"""Error taxonomy shared by the store, the validation layer and the insight adapter."""

from __future__ import annotations

from typing import Sequence


class EntryValidationError(ValueError):
    """Raised when an inbound mood entry payload has the wrong shape."""

    def __init__(self, message: str, *, fields: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.fields = list(fields)


class RemoteCallFailure(RuntimeError):
    """Raised when the remote model cannot be reached, times out or answers non-2xx."""


class MalformedResponse(ValueError):
    """Raised when the remote model's reply does not parse into the expected shape."""


__all__ = ["EntryValidationError", "MalformedResponse", "RemoteCallFailure"]
