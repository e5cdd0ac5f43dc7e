"""Rates gateway: server-side proxy for the Airtable pricing and FAQ tables."""

from .rates import (
    CORS_HEADERS,
    RATES_PATH,
    ConfigurationError,
    fetch_rates,
    register_exception_handlers,
    router,
)

__all__ = [
    "CORS_HEADERS",
    "RATES_PATH",
    "ConfigurationError",
    "fetch_rates",
    "register_exception_handlers",
    "router",
]
