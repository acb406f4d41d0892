"""OpenRouter provider implementation supporting DeepSeek and other models."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import httpx

from .base import BaseProvider
from .types import LLMResponse

OPENROUTER_DEFAULT_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterProvider(BaseProvider):
    """Provider that proxies chat requests through OpenRouter."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        base_url: str | None = None,
        timeout: float = 20.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("OpenRouter API key is required")

        super().__init__(name="openrouter", timeout=timeout, transport=transport)
        self._api_key = api_key
        self._model = model
        self._base_url = base_url or OPENROUTER_DEFAULT_BASE_URL

    async def chat(
        self,
        *,
        messages: Sequence[Mapping[str, Any]],
        model: str | None = None,
        max_tokens: int = 300,
        **kwargs: Any,
    ) -> LLMResponse:
        """Execute a chat completion request."""

        payload = {
            "model": model or self._model,
            "messages": [self._serialise_message(message) for message in messages],
            "max_tokens": max_tokens,
            **kwargs,
        }
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": "http://localhost:5000",
            "X-Title": "Mood Journal",
        }
        url = f"{self._base_url.rstrip('/')}/chat/completions"
        data = await self._post_json(url, headers=headers, payload=payload)

        choice = (data.get("choices") or [{}])[0]
        message = choice.get("message") or {}

        return LLMResponse(
            model=data.get("model") or payload["model"],
            text=message.get("content"),
            usage=data.get("usage") or {},
            provider=self.name,
            raw=data,
        )

    def _serialise_message(self, message: Mapping[str, Any]) -> dict[str, Any]:
        role = message.get("role")
        content = message.get("content")
        if role is None or content is None:
            raise ValueError("Chat messages must include 'role' and 'content'")
        return {"role": role, "content": content}


__all__ = ["OpenRouterProvider", "OPENROUTER_DEFAULT_BASE_URL"]
