"""FastAPI application entrypoint for the mood journal."""

from __future__ import annotations

import logging

from moodlog.libs.logging_utils import colorize, configure_logging
from moodlog.libs.schemas.settings import AppSettings, get_settings

configure_logging()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette_exporter import PrometheusMiddleware, handle_metrics

from moodlog import __version__
from moodlog.apps.api.core.store import MoodEntryStore
from moodlog.apps.api.errors import install_error_handlers
from moodlog.apps.api.routes.ai import router as ai_router
from moodlog.apps.api.routes.mood_entries import router as mood_entries_router
from moodlog.apps.api.services.mood_insights import MoodInsightService
from moodlog.libs.llm_router import LLMRouter, build_router_from_settings

LOGGER = logging.getLogger(__name__)


def create_app(
    settings: AppSettings | None = None,
    *,
    store: MoodEntryStore | None = None,
    llm_router: LLMRouter | None = None,
    insight_service: MoodInsightService | None = None,
) -> FastAPI:
    """Build an app that owns its store and insight service.

    Anything not passed in is constructed from ``settings``.
    """

    settings = settings or get_settings()
    app = FastAPI(title=f"{settings.app_name} API", version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(PrometheusMiddleware, app_name="moodlog", group_paths=True)
    app.add_route("/metrics", handle_metrics)
    install_error_handlers(app)

    if insight_service is None:
        llm_router = llm_router or build_router_from_settings(settings)
        insight_service = MoodInsightService(llm_router, timeout=settings.llm_timeout_seconds)

    app.state.settings = settings
    app.state.mood_store = store if store is not None else MoodEntryStore()
    app.state.insight_service = insight_service

    LOGGER.info(
        colorize("Mood journal configured", "cyan"),
        extra={
            "event": "app_config",
            "environment": settings.environment,
            "llm_providers": llm_router.providers if llm_router is not None else None,
        },
    )

    @app.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(mood_entries_router)
    app.include_router(ai_router)
    return app


app = create_app()


__all__ = ["app", "create_app"]


if __name__ == "__main__":  # pragma: no cover - manual run
    import os

    import uvicorn

    uvicorn.run(
        "moodlog.apps.api.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        log_config=None,
    )
