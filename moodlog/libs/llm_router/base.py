"""Abstract provider interfaces for the LLM router."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

import httpx

from moodlog.libs.errors import RemoteCallFailure

from .types import LLMResponse


class BaseProvider(ABC):
    """Common interface all LLM providers must implement."""

    def __init__(
        self,
        name: str,
        *,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.name = name
        self._timeout = timeout
        self._transport = transport

    @abstractmethod
    async def chat(
        self,
        *,
        messages: Sequence[Mapping[str, Any]],
        model: str | None = None,
        max_tokens: int = 300,
        **kwargs: Any,
    ) -> LLMResponse:
        """Perform a chat completion request."""

    async def _post_json(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        payload: Mapping[str, Any],
    ) -> dict[str, Any]:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                response = await client.post(url, headers=dict(headers), json=payload)
            except httpx.TimeoutException as exc:
                raise RemoteCallFailure(f"{self.name} timed out after {self._timeout}s on {url}") from exc
            except httpx.RequestError as exc:
                raise RemoteCallFailure(f"{self.name} network error: {exc}") from exc
            content_type = response.headers.get("content-type", "")
            if not response.is_success:
                raise RemoteCallFailure(
                    f"{self.name} {response.status_code} on {url}. Body: {response.text[:400]}"
                )
            if "application/json" not in content_type.lower():
                raise RemoteCallFailure(
                    f"{self.name} returned non-JSON (CT={content_type}) on {url}. Body: {response.text[:400]}"
                )
            try:
                return response.json()
            except ValueError as exc:
                raise RemoteCallFailure(f"{self.name} returned an unreadable JSON body on {url}") from exc


__all__ = ["BaseProvider"]
