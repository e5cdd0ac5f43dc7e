#!/usr/bin/env python3
"""Entry point for the Topiary Park rates service.

This script starts the FastAPI server that renders the site page and
proxies the Airtable pricing and FAQ tables.

Usage:
    python main.py

Environment Variables:
    AIRTABLE_API_KEY: Airtable personal access token (required for /api/rates)
    AIRTABLE_BASE_ID: Airtable base holding the pricing and FAQ tables
    HOST: Server host (default: 0.0.0.0)
    PORT: Server port (default: 8000)
    DEBUG: Reload on code changes (default: false)
    LOG_LEVEL: Logging level (default: INFO)

Example:
    AIRTABLE_API_KEY=your_key python main.py
"""

import sys
from pathlib import Path

import uvicorn

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from src.config import get_settings

# Import string rather than the app object, so reload can re-import it
APP_IMPORT = "src.server.main:app"


def main() -> None:
    """Run the rates server."""
    settings = get_settings()

    print(f"""
    ╔══════════════════════════════════════════════════════════════╗
    ║         Topiary Park Rates                                   ║
    ║                                                              ║
    ║  Pricing & FAQ widget with Airtable proxy                    ║
    ╠══════════════════════════════════════════════════════════════╣
    ║  Host: {settings.HOST:<53} ║
    ║  Port: {settings.PORT:<53} ║
    ║  Debug: {str(settings.DEBUG):<52} ║
    ║  Airtable key: {'configured' if settings.airtable_configured else 'MISSING':<45} ║
    ╠══════════════════════════════════════════════════════════════╣
    ║  Endpoints:                                                  ║
    ║    GET  /              - Rendered site page                  ║
    ║    GET  /health        - Detailed health status              ║
    ║    GET  /api/rates     - Pricing and FAQ records (proxy)     ║
    ║    GET  /docs          - OpenAPI documentation               ║
    ╚══════════════════════════════════════════════════════════════╝
    """)

    uvicorn.run(
        APP_IMPORT,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
