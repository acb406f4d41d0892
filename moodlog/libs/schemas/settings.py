"""Application settings management leveraging pydantic v2."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

if os.getenv("ENV", "development") in {"development", "dev", "local"}:
    from dotenv import load_dotenv

    load_dotenv(override=False)


class AppSettings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    app_name: str = Field(
        default="Mood Journal",
        validation_alias=AliasChoices("APP_NAME", "MOODLOG_APP_NAME"),
    )
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "MOODLOG_ENVIRONMENT"),
    )
    # List-valued settings are read as JSON, e.g. CORS_ORIGINS='["http://localhost:5173"]'.
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        validation_alias=AliasChoices("CORS_ORIGINS", "MOODLOG_CORS_ORIGINS"),
    )
    anthropic_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("ANTHROPIC_API_KEY", "MOODLOG_ANTHROPIC_API_KEY"),
    )
    anthropic_base_url: str = Field(
        default="https://api.anthropic.com",
        validation_alias=AliasChoices("ANTHROPIC_BASE_URL", "MOODLOG_ANTHROPIC_BASE_URL"),
    )
    anthropic_model: str = Field(
        default="claude-3-5-sonnet-latest",
        validation_alias=AliasChoices("ANTHROPIC_MODEL", "MOODLOG_ANTHROPIC_MODEL"),
    )
    openrouter_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENROUTER_API_KEY", "MOODLOG_OPENROUTER_API_KEY"),
    )
    openrouter_base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENROUTER_BASE_URL", "MOODLOG_OPENROUTER_BASE_URL"),
    )
    openrouter_model: str = Field(
        default="deepseek/deepseek-chat",
        validation_alias=AliasChoices("OPENROUTER_MODEL", "MOODLOG_OPENROUTER_MODEL"),
    )
    llm_providers: List[str] = Field(
        default_factory=lambda: ["anthropic", "openrouter"],
        validation_alias=AliasChoices("LLM_PROVIDERS", "MOODLOG_LLM_PROVIDERS"),
    )
    llm_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        validation_alias=AliasChoices("LLM_TIMEOUT_SECONDS", "MOODLOG_LLM_TIMEOUT_SECONDS"),
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Load environment variables and return a cached settings instance."""

    return AppSettings()


__all__ = ["AppSettings", "get_settings"]
