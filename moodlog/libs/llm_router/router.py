"""Ordered-failover LLM router."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from moodlog.libs.errors import RemoteCallFailure
from moodlog.libs.schemas.settings import AppSettings

from .anthropic import AnthropicProvider
from .base import BaseProvider
from .openrouter import OpenRouterProvider
from .types import LLMResponse


class LLMRouter:
    """Send chat requests to registered providers, falling through on failure."""

    def __init__(self, *, logger: logging.Logger | None = None) -> None:
        self._providers: dict[str, BaseProvider] = {}
        self._logger = logger or logging.getLogger(__name__)

    @property
    def providers(self) -> list[str]:
        return list(self._providers)

    def register_provider(self, key: str, provider: BaseProvider) -> None:
        """Register or replace a provider. Providers are tried in registration order."""

        self._providers[key] = provider

    async def chat(
        self,
        *,
        messages: Sequence[Mapping[str, Any]],
        model: str | None = None,
        max_tokens: int = 300,
        **kwargs: Any,
    ) -> LLMResponse:
        """Execute a chat request with automatic provider failover."""

        candidates = list(self._providers)
        if not candidates:
            raise RemoteCallFailure("No LLM providers are configured")

        message_payload = [dict(message) for message in messages]
        errors: list[str] = []
        for candidate in candidates:
            provider = self._providers[candidate]
            try:
                response = await provider.chat(
                    messages=message_payload,
                    model=model,
                    max_tokens=max_tokens,
                    **kwargs,
                )
            except Exception as exc:
                self._logger.warning("Provider %s failed: %s", candidate, exc)
                errors.append(f"{candidate}: {exc}")
                continue
            if response.provider is None:
                response.provider = candidate
            self._log_usage(candidate, response)
            return response
        raise RemoteCallFailure(f"All providers failed: {'; '.join(errors)}")

    def _log_usage(self, provider_key: str, response: LLMResponse) -> None:
        usage = response.usage or {}
        self._logger.info(
            "provider=%s model=%s prompt_tokens=%s completion_tokens=%s",
            provider_key,
            response.model,
            usage.get("prompt_tokens"),
            usage.get("completion_tokens"),
        )


def build_router_from_settings(settings: AppSettings, *, logger: logging.Logger | None = None) -> LLMRouter:
    """Register every provider whose API key is configured, in ``llm_providers`` order."""

    log = logger or logging.getLogger(__name__)
    router = LLMRouter(logger=logger)
    timeout = settings.llm_timeout_seconds

    available: dict[str, BaseProvider] = {}
    if settings.anthropic_api_key:
        available["anthropic"] = AnthropicProvider(
            settings.anthropic_api_key,
            model=settings.anthropic_model,
            base_url=settings.anthropic_base_url,
            timeout=timeout,
        )
    if settings.openrouter_api_key:
        available["openrouter"] = OpenRouterProvider(
            settings.openrouter_api_key,
            model=settings.openrouter_model,
            base_url=settings.openrouter_base_url,
            timeout=timeout,
        )

    for key in settings.llm_providers:
        provider = available.get(key.lower())
        if provider is None:
            log.debug("LLM provider %s skipped (not configured)", key)
            continue
        router.register_provider(key.lower(), provider)

    if not router.providers:
        log.warning("No LLM provider configured; AI endpoints will serve fallback values")
    return router


__all__ = ["LLMRouter", "build_router_from_settings"]
