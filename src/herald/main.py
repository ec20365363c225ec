"""FastAPI application factory and lifespan management."""

import logging
import os
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from herald import __version__
from herald.config import settings
from herald.logging_config import configure_logging

# Configure logging at import time
_json_logs = os.environ.get("HERALD_LOCAL", "0") != "1"
configure_logging(log_level=settings.log_level, json_output=_json_logs)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown resources."""
    from herald.integrations.service import create_sink_factory

    if not settings.public_key:
        logger.warning("HERALD_PUBLIC_KEY is not set, every webhook will be rejected")

    http_client = httpx.AsyncClient(timeout=settings.sink_timeout_seconds)
    app.state.http_client = http_client
    app.state.sink_factory = create_sink_factory(settings, http_client)

    logger.info("Herald started (sink=%s)", settings.effective_log_sink)
    yield

    # Shutdown: pending sink flushes have completed with their requests
    await http_client.aclose()
    logger.info("Herald shutdown complete")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Herald",
        version=__version__,
        description="Authenticated receiver for application webhook events.",
        lifespan=lifespan,
    )

    from herald.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    # Register error handlers
    from herald.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    # Import and mount routers
    from herald.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
