"""Model-agnostic LLM routing utilities."""

from .anthropic import ANTHROPIC_DEFAULT_BASE_URL, AnthropicProvider
from .base import BaseProvider
from .openrouter import OPENROUTER_DEFAULT_BASE_URL, OpenRouterProvider
from .router import LLMRouter, build_router_from_settings
from .types import LLMResponse

__all__ = [
    "ANTHROPIC_DEFAULT_BASE_URL",
    "AnthropicProvider",
    "BaseProvider",
    "LLMResponse",
    "LLMRouter",
    "OPENROUTER_DEFAULT_BASE_URL",
    "OpenRouterProvider",
    "build_router_from_settings",
]
