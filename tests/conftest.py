from __future__ import annotations

import asyncio
from typing import Any, Callable, List

import pytest
from httpx import ASGITransport, AsyncClient

from moodlog.libs.llm_router import BaseProvider, LLMResponse, LLMRouter
from moodlog.libs.schemas.settings import AppSettings


class FakeProvider(BaseProvider):
    """Replays canned replies (or raises) and records every request."""

    def __init__(
        self,
        replies: List[str] | None = None,
        *,
        error: Exception | None = None,
        delay: float = 0.0,
        name: str = "fake",
    ) -> None:
        super().__init__(name=name)
        self.replies = list(replies or [])
        self.error = error
        self.delay = delay
        self.calls: List[dict[str, Any]] = []

    async def chat(self, *, messages, model=None, max_tokens: int = 300, **kwargs: Any) -> LLMResponse:
        self.calls.append({"messages": list(messages), "model": model, "max_tokens": max_tokens})
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        text = self.replies.pop(0) if self.replies else ""
        return LLMResponse(
            model=model or "fake-model",
            text=text,
            usage={"prompt_tokens": 10, "completion_tokens": 5},
        )

    @property
    def last_prompt(self) -> str:
        return self.calls[-1]["messages"][-1]["content"]


@pytest.fixture
def make_router() -> Callable[..., LLMRouter]:
    def _make(*providers: BaseProvider) -> LLMRouter:
        router = LLMRouter()
        for provider in providers:
            router.register_provider(provider.name, provider)
        return router

    return _make


_LLM_ENV_VARS = tuple(
    f"{prefix}{name}"
    for prefix in ("", "MOODLOG_")
    for name in (
        "ANTHROPIC_API_KEY",
        "ANTHROPIC_BASE_URL",
        "ANTHROPIC_MODEL",
        "OPENROUTER_API_KEY",
        "OPENROUTER_BASE_URL",
        "OPENROUTER_MODEL",
        "LLM_PROVIDERS",
        "LLM_TIMEOUT_SECONDS",
        "CORS_ORIGINS",
        "APP_NAME",
    )
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Hide host LLM and app settings so defaults are predictable."""
    for var in _LLM_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def settings(clean_env: pytest.MonkeyPatch) -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def api_client() -> Callable[[Any], AsyncClient]:
    def _client(app: Any) -> AsyncClient:
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    return _client


@pytest.fixture
def fake_provider() -> type[FakeProvider]:
    return FakeProvider
