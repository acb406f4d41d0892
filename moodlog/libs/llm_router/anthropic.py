"""Anthropic Messages API provider (also serves Anthropic-compatible gateways)."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import httpx

from .base import BaseProvider
from .types import LLMResponse

ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_API_VERSION = "2023-06-01"


class AnthropicProvider(BaseProvider):
    """Provider that talks to ``/v1/messages``."""

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
            raise ValueError("Anthropic API key is required")

        super().__init__(name="anthropic", timeout=timeout, transport=transport)
        self._api_key = api_key
        self._model = model
        self._base_url = (base_url or ANTHROPIC_DEFAULT_BASE_URL).rstrip("/")

    async def chat(
        self,
        *,
        messages: Sequence[Mapping[str, Any]],
        model: str | None = None,
        max_tokens: int = 300,
        **kwargs: Any,
    ) -> LLMResponse:
        system_parts: list[str] = []
        turns: list[dict[str, Any]] = []
        for message in messages:
            role = message.get("role")
            content = message.get("content")
            if role is None or content is None:
                raise ValueError("Chat messages must include 'role' and 'content'")
            if role == "system":
                system_parts.append(str(content))
            else:
                turns.append({"role": role, "content": content})

        payload: dict[str, Any] = {
            "model": model or self._model,
            "max_tokens": max_tokens,
            "messages": turns,
            **kwargs,
        }
        if system_parts:
            payload["system"] = "\n\n".join(system_parts)

        headers = {
            "x-api-key": self._api_key,
            "anthropic-version": ANTHROPIC_API_VERSION,
            "content-type": "application/json",
        }
        data = await self._post_json(f"{self._base_url}/v1/messages", headers=headers, payload=payload)

        blocks = data.get("content") or []
        text_blocks = [
            block.get("text", "")
            for block in blocks
            if isinstance(block, Mapping) and block.get("type") == "text"
        ]
        usage = data.get("usage") or {}

        return LLMResponse(
            model=data.get("model") or payload["model"],
            text="".join(text_blocks) if text_blocks else None,
            usage={
                "prompt_tokens": usage.get("input_tokens"),
                "completion_tokens": usage.get("output_tokens"),
            },
            provider=self.name,
            raw=data,
        )


__all__ = ["ANTHROPIC_DEFAULT_BASE_URL", "AnthropicProvider"]
