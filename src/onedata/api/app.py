"""
onedata.api.app

FastAPI app factory for the OneData dashboard service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Open and close shared infrastructure (ObjectStore, generation HTTP client) in the lifespan.
- Map domain errors to `{"error": ...}` JSON responses.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_500_INTERNAL_SERVER_ERROR

from onedata import __version__
from onedata.api.routers.conversion import router as conversion_router
from onedata.api.routers.deployment import router as deployment_router
from onedata.api.routers.graph import router as graph_router
from onedata.api.routers.health import router as health_router
from onedata.api.routers.imports import router as imports_router
from onedata.db.store import ObjectStore
from onedata.errors import OnedataError
from onedata.generation.base import TextGenerator
from onedata.generation.factory import build_generator, create_http_client
from onedata.observability.logging import configure_logging, get_logger
from onedata.observability.middleware import RequestContextMiddleware
from onedata.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, generator: TextGenerator | None = None) -> FastAPI:
    """
    `generator` overrides the configured generation client (used by tests and
    by callers embedding a local model).
    """

    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env, provider=settings.generation_provider)
        store = ObjectStore.from_settings(settings)
        await store.open()
        http = create_http_client(settings)
        app.state.settings = settings
        app.state.store = store
        app.state.http = http
        app.state.generator = generator or build_generator(settings, http)
        try:
            yield
        finally:
            await http.aclose()
            await store.close()
            log.info("shutdown")

    app = FastAPI(
        title="OneData BW Lineage Dashboard",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health_router, tags=["health"])
    app.include_router(graph_router)
    app.include_router(conversion_router)
    app.include_router(deployment_router)
    app.include_router(imports_router)

    _register_error_handlers(app)
    return app


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(OnedataError)
    async def _domain_error(request: Request, exc: OnedataError) -> JSONResponse:
        log.warning(
            "request_failed",
            error_type=type(exc).__name__,
            error=exc.message,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
        )
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        log.info("request_invalid", errors=len(exc.errors()))
        return JSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body"},
        )

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        log.error("unhandled_error", exc_info=exc)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


# --- Module Notes -----------------------------------------------------------
# App composition stays here; business logic stays in services and the ObjectStore.
