"""Rates gateway route.

Fetches the pricing and FAQ tables from Airtable concurrently with the
server-held API key and returns them as one JSON payload, so the key never
reaches the browser.
"""

import asyncio
import logging

from fastapi import APIRouter, Depends, FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..airtable import AirtableClient, AirtableError
from ..config import Settings, get_settings
from ..models.schemas import ErrorResponse, RatesPayload

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

RATES_PATH = "/api/rates"

router = APIRouter()


class ConfigurationError(Exception):
    """Exception raised when required server configuration is missing."""

    pass


async def fetch_rates(settings: Settings) -> RatesPayload:
    """Fetch pricing and FAQ records concurrently.

    Both requests are awaited until they settle; a failure in either one
    fails the whole fetch.

    Args:
        settings: Application settings holding the Airtable configuration.

    Returns:
        Combined pricing and FAQ payload.

    Raises:
        ConfigurationError: If no Airtable API key is configured.
        AirtableError: If either upstream request fails.
    """
    if not settings.airtable_configured:
        raise ConfigurationError("Airtable API key not configured")

    async with AirtableClient.from_settings(settings) as airtable:
        results = await asyncio.gather(
            airtable.list_records(settings.AIRTABLE_PRICING_TABLE_ID),
            airtable.list_records(settings.AIRTABLE_FAQ_TABLE_ID),
            return_exceptions=True,
        )

    for result in results:
        if isinstance(result, BaseException):
            raise result

    pricing, faq = results
    return RatesPayload(pricing=pricing, faq=faq)


def _json(status_code: int, content: dict) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


@router.api_route(RATES_PATH, methods=["GET", "OPTIONS"])
async def rates(request: Request, settings: Settings = Depends(get_settings)) -> Response:
    """Return ``{"pricing": [...], "faq": [...]}`` from Airtable.

    Args:
        request: Incoming request.
        settings: Application settings.

    Returns:
        JSON response with permissive CORS headers.
    """
    # Preflight
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS, media_type="application/json")

    try:
        payload = await fetch_rates(settings)
    except ConfigurationError as e:
        logger.error(f"Rates gateway misconfigured: {e}")
        return _json(
            500,
            ErrorResponse(error="Server configuration error", message=str(e)).model_dump(),
        )
    except AirtableError as e:
        logger.error(f"Airtable API error: {e}")
        return _json(
            500,
            ErrorResponse(error="Failed to fetch data", message=str(e)).model_dump(),
        )

    logger.info(f"Served {len(payload.pricing)} pricing and {len(payload.faq)} FAQ records")
    return _json(200, payload.model_dump(mode="json", exclude_unset=True))


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Answer unsupported methods on the rates path in the gateway's format.

    Every other HTTP error falls through to FastAPI's default handler.
    """
    if exc.status_code == 405 and request.url.path == RATES_PATH:
        logger.info(f"Rejected {request.method} {RATES_PATH}")
        return _json(405, ErrorResponse(error="Method not allowed").model_dump(exclude_none=True))

    return await http_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the gateway's 405 handler on the application.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)
