from __future__ import annotations

import logging
import os

from fastapi import FastAPI

from app.config import get_insight_settings, load_env_files


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _warn_missing_llm_key() -> None:
    """
    Log a warning when the OpenAI-compatible adapter has no API key.

    Insight requests still answer with a configuration fallback message.
    """

    settings = get_insight_settings()
    if settings.adapter != "mock" and not settings.api_key:
        logging.getLogger(__name__).warning(
            "LLM API key is not set. Provide LLM_API_KEY, OPENROUTER_API_KEY or OPENAI_API_KEY, "
            "or set LLM_ADAPTER=mock."
        )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    load_env_files()
    _configure_logging()
    _warn_missing_llm_key()

    application = FastAPI(
        title="Resource Allocation Data API",
        version="1.0.0",
    )

    from app.api.routers import (
        columns_router,
        insight_router,
        query_router,
        rules_router,
        validation_router,
    )

    application.include_router(validation_router)
    application.include_router(columns_router)
    application.include_router(query_router)
    application.include_router(rules_router)
    application.include_router(insight_router)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()
