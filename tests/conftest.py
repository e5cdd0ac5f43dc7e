"""Pytest configuration and fixtures."""

import sys
from pathlib import Path
from typing import Any, Dict, Generator, List

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.config import Settings, get_settings
from src.server.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    """Settings with a test Airtable key and a fake API host."""
    return Settings(
        _env_file=None,
        AIRTABLE_API_KEY="test_key",
        AIRTABLE_API_URL="https://airtable.test/v0",
        AIRTABLE_BASE_ID="appTestBase",
        AIRTABLE_PRICING_TABLE_ID="tblPricing",
        AIRTABLE_FAQ_TABLE_ID="tblFaq",
        REQUEST_TIMEOUT=5,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def unconfigured_settings(test_settings: Settings) -> Settings:
    """Settings without an Airtable key."""
    return test_settings.model_copy(update={"AIRTABLE_API_KEY": None})


@pytest.fixture
def pricing_url(test_settings: Settings) -> str:
    return f"{test_settings.AIRTABLE_API_URL}/{test_settings.AIRTABLE_BASE_ID}/{test_settings.AIRTABLE_PRICING_TABLE_ID}"


@pytest.fixture
def faq_url(test_settings: Settings) -> str:
    return f"{test_settings.AIRTABLE_API_URL}/{test_settings.AIRTABLE_BASE_ID}/{test_settings.AIRTABLE_FAQ_TABLE_ID}"


def make_app(settings: Settings) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: settings
    return app


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Application wired to the test settings."""
    return make_app(test_settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Create test client for sync tests."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def unconfigured_client(unconfigured_settings: Settings) -> Generator[TestClient, None, None]:
    """Test client for an app with no Airtable key."""
    with TestClient(make_app(unconfigured_settings)) as client:
        yield client


@pytest.fixture
def pricing_records() -> List[Dict[str, Any]]:
    """Sample pricing table records."""
    return [
        {
            "id": "rec1",
            "createdTime": "2024-01-01T00:00:00.000Z",
            "fields": {"Unit Name": "Studio", "Current Price": 1000},
        },
        {
            "id": "rec2",
            "createdTime": "2024-01-01T00:00:00.000Z",
            "fields": {"Unit Name": "Two Bedroom", "Current Price": "$1,500", "Promotions": "1 Month Free"},
        },
        {
            "id": "rec3",
            "createdTime": "2024-01-01T00:00:00.000Z",
            "fields": {"Name": "One Bedroom", "Current Price": 1200},
        },
        {
            "id": "rec4",
            "createdTime": "2024-01-01T00:00:00.000Z",
            "fields": {"Unit Name": "Penthouse"},
        },
    ]


@pytest.fixture
def faq_records() -> List[Dict[str, Any]]:
    """Sample FAQ table records."""
    return [
        {
            "id": "recA",
            "createdTime": "2024-01-01T00:00:00.000Z",
            "fields": {"Question": "Are pets allowed?", "Answer": "Yes, <strong>cats and dogs</strong> are welcome."},
        },
        {
            "id": "recB",
            "createdTime": "2024-01-01T00:00:00.000Z",
            "fields": {"Question": "Is parking included?", "Answer": "One space per unit."},
        },
    ]
