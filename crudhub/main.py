"""FastAPI application factory."""

import asyncio
import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from crudhub.config import get_settings
from crudhub.infrastructure.database import MongoDocumentStore
from crudhub.infrastructure.logging.log_config import setup_logging
from crudhub.presentation.api.error_handlers import register_error_handlers
from crudhub.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


def _log_loop_exception(loop: asyncio.AbstractEventLoop, context: dict[str, Any]) -> None:
    """Unhandled errors in background tasks are logged, never fatal."""
    exception = context.get("exception")
    logger.error(
        "Unhandled error in background task: %s",
        context.get("message", "no message"),
        exc_info=exception,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — open the store before serving, close it on shutdown."""
    settings = get_settings()
    setup_logging()

    asyncio.get_running_loop().set_exception_handler(_log_loop_exception)

    # A failed connection propagates and aborts startup.
    store = MongoDocumentStore(
        uri=settings.mongodb_uri,
        database_name=settings.mongodb_database,
        timeout_ms=settings.mongodb_timeout_ms,
        server_selection_timeout_ms=settings.mongodb_server_selection_timeout_ms,
    )
    await store.connect()
    app.state.store = store
    logger.info("%s %s ready (%s)", settings.app_title, settings.app_version, settings.app_env)

    yield

    # Shutdown
    app.state.store = None
    await store.disconnect()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.store = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        max_age=settings.session_max_age_seconds,
        https_only=settings.session_https_only,
    )

    register_error_handlers(app)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "crudhub.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
