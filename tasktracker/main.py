"""FastAPI application entry point."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tasktracker.api import health, tasks
from tasktracker.core.config import Settings, settings as default_settings
from tasktracker.core.logging_setup import configure_logging
from tasktracker.services.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Build the application with its own empty task store."""
    app_settings = app_settings or default_settings
    configure_logging(app_settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager."""
        logger.info(
            "Starting %s (id policy: %s)...",
            app_settings.PROJECT_NAME,
            app_settings.ID_POLICY.value,
        )
        logger.info("Server running at %s", app_settings.base_url)
        yield
        logger.info(
            "Shutting down %s, discarding %d task(s)...",
            app_settings.PROJECT_NAME,
            len(app.state.task_store),
        )

    app = FastAPI(
        title=app_settings.PROJECT_NAME,
        description="In-memory task tracking API",
        version=app_settings.VERSION,
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.task_store = TaskStore(app_settings.ID_POLICY)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router, prefix=app_settings.API_V1_PREFIX, tags=["health"])
    app.include_router(tasks.router, prefix=f"{app_settings.API_V1_PREFIX}/tasks", tags=["tasks"])

    @app.get("/", include_in_schema=False)
    async def root() -> dict[str, str]:
        """Root endpoint with API info."""
        return {"message": f"{app_settings.PROJECT_NAME} API", "version": app_settings.VERSION}

    return app


app = create_app()
