"""Application entry point for the follow collections service."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .database import init_db
from .routers import collections_router, system_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    try:
        init_db()
    except Exception:  # pragma: no cover - best effort logging
        logger.exception("Database initialisation failed")
        raise

    settings: Settings = app.state.settings
    logger.info("%s %s serving follow collections for %s", settings.app_name, settings.api_version, settings.base_url)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application with CORS and the collection routes mounted."""

    if settings is None:
        settings = get_settings()

    application = FastAPI(title=settings.app_name, version=settings.api_version, lifespan=_lifespan)
    application.state.settings = settings

    # Collections are public documents fetched by remote servers and browsers alike.
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    application.include_router(system_router)
    application.include_router(collections_router)
    return application


app = create_app()
