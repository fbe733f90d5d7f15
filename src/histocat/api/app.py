"""
FastAPI Application Factory & Configuration.

This module initializes the histocat HTTP application. It is responsible for:
1.  **Middleware Setup**: CORS so timeline front-ends can call the API directly.
2.  **Exception Handling**: Global handlers so every error returns structured JSON.
3.  **Routing**: Mounting the events router and the health probe.
4.  **Lifecycle**: Building the event catalog and provider once at startup.

Design Pattern
--------------
An **Application Factory** (`create_app`) lets tests build isolated app
instances and inject their own provider.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from histocat import __version__
from histocat.api.routers import events
from histocat.api.schemas import HealthStatus
from histocat.catalog import CatalogDataError
from histocat.core.settings import get_logger, load_settings
from histocat.provider import HistoricEventsProvider

logger = get_logger(__name__)


def create_app(provider: HistoricEventsProvider | None = None) -> FastAPI:
    """
    Construct and configure the histocat FastAPI application.

    Parameters
    ----------
    provider : HistoricEventsProvider, optional
        Provider to serve; when omitted, one over the packaged catalog is
        built during startup.

    Returns
    -------
    FastAPI
        The configured ASGI application ready to be served by Uvicorn.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Build the provider (and so load the catalog) before serving requests."""
        logger.info("Starting up")
        app.state.provider = provider if provider is not None else HistoricEventsProvider()
        logger.info("Catalog ready: %s", ", ".join(app.state.provider.catalog.languages()))
        yield
        logger.info("Shutting down")

    app = FastAPI(
        title="histocat API",
        description="Historical events for genealogy timelines",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # -----------------------------------------------------------------------
    # Middleware
    # -----------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # -----------------------------------------------------------------------
    # Global Exception Handlers
    # -----------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all handler so unhandled exceptions return structured JSON."""
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc),
                "path": request.url.path,
            },
        )

    @app.exception_handler(CatalogDataError)
    async def catalog_error_handler(request: Request, exc: CatalogDataError) -> JSONResponse:
        """A broken dataset is a server-side defect, not a bad request."""
        logger.error("Catalog data error: %s", exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Catalog Data Error", "detail": str(exc)},
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """Map Python ValueErrors to HTTP 400 Bad Request."""
        return JSONResponse(
            status_code=400,
            content={
                "error": "Bad Request",
                "detail": str(exc),
            },
        )

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    app.include_router(events.router)

    @app.get("/health", tags=["System"], response_model=HealthStatus)
    async def health_check() -> HealthStatus:
        """Simple liveness probe."""
        return HealthStatus(
            status="ok",
            environment=load_settings().environment,
            version=__version__,
        )

    return app


__all__ = ["create_app"]
