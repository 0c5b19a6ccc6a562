"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py;
no business logic here, only wiring of infrastructure (shared HTTP client,
DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from time_tracker.core.config import get_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: shared HTTP client for the people-info API.
    Shutdown: HTTP client close, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    app.state.identity_http_client = httpx.AsyncClient(
        timeout=settings.external_api_timeout_seconds
    )
    if not settings.external_api_url:
        logger.warning("EXTERNAL_API_URL is not set; user creation will fail")
    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    if getattr(app.state, "identity_http_client", None) is not None:
        await app.state.identity_http_client.aclose()
        app.state.identity_http_client = None
        logger.info("People-info HTTP client closed")

    from time_tracker.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
