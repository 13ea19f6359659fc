"""
visa_gateway.api.app

FastAPI app factory for the visa eligibility gateway.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Open and close the shared evaluator HTTP client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from visa_gateway import __version__
from visa_gateway.api.routers.eligibility import router as eligibility_router
from visa_gateway.api.routers.health import router as health_router
from visa_gateway.errors import register_error_handlers
from visa_gateway.evaluator_client import create_http_client
from visa_gateway.observability.logging import configure_logging, get_logger
from visa_gateway.observability.middleware import RequestContextMiddleware
from visa_gateway.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, backend_url=settings.backend_url)
        app.state.evaluator_http = create_http_client(settings)
        try:
            yield
        finally:
            await app.state.evaluator_http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Visa Eligibility Gateway",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(eligibility_router)

    return app
