"""Main FastAPI application for the Topiary Park rates service."""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse

from ..config import Settings, get_settings
from ..gateway import register_exception_handlers
from ..gateway import router as rates_router
from ..widget import DataRenderer, PageDocument
from .middleware import setup_logging, setup_middleware

logger = logging.getLogger(__name__)

SERVICE_NAME = "topiary-park-rates"
VERSION = "1.0.0"

# Base URL for in-process requests from the page renderer to the gateway
INTERNAL_BASE_URL = "http://rates.internal"


class UTF8HTMLResponse(HTMLResponse):
    """HTMLResponse with explicit UTF-8 charset."""

    media_type = "text/html; charset=utf-8"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Handles startup and shutdown events.

    Args:
        app: FastAPI application instance.
    """
    # Same settings the routes resolve, overrides included
    settings = app.dependency_overrides.get(get_settings, get_settings)()
    setup_logging(settings)
    logger.info("Starting Topiary Park rates service")

    if not settings.airtable_configured:
        logger.warning(
            "AIRTABLE_API_KEY is not set; /api/rates will answer with a configuration error"
        )

    yield

    logger.info("Shutting down Topiary Park rates service")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title="Topiary Park Rates",
        description="Pricing and FAQ widget backed by Airtable, with a credential-holding proxy.",
        version=VERSION,
        lifespan=lifespan,
    )

    setup_middleware(app)
    register_exception_handlers(app)
    register_routes(app)

    return app


def register_routes(app: FastAPI) -> None:
    """Register all API routes.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(rates_router)

    @app.get("/health")
    async def health(settings: Settings = Depends(get_settings)):
        """Detailed health check."""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": VERSION,
            "airtable_configured": settings.airtable_configured,
        }

    @app.get("/", response_class=UTF8HTMLResponse)
    async def index(request: Request, settings: Settings = Depends(get_settings)):
        """Render the site page with pricing, FAQ, map and JSON-LD filled in.

        The renderer reaches the gateway through the app itself, so the page
        is built from exactly what a browser would receive from /api/rates.
        """
        transport = httpx.ASGITransport(app=request.app)
        async with httpx.AsyncClient(transport=transport, base_url=INTERNAL_BASE_URL) as http:
            renderer = DataRenderer(
                http,
                document=PageDocument(title=settings.SITE_TITLE),
                endpoint=settings.RATES_ENDPOINT,
            )
            document = await renderer.initialize()

        return UTF8HTMLResponse(document.render())


# Create default app instance
app = create_app()
