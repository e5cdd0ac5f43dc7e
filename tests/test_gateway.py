"""Tests for the /api/rates gateway."""

import httpx
import pytest
from fastapi.testclient import TestClient

from src.airtable import AirtableError
from src.gateway import ConfigurationError, fetch_rates


class TestRatesSuccess:
    """Tests for successful gateway responses."""

    def test_returns_combined_records(self, client: TestClient, respx_mock, pricing_url, faq_url, pricing_records, faq_records):
        """Test pricing and FAQ records are proxied unchanged."""
        respx_mock.get(pricing_url).mock(return_value=httpx.Response(200, json={"records": pricing_records}))
        respx_mock.get(faq_url).mock(return_value=httpx.Response(200, json={"records": faq_records}))

        response = client.get("/api/rates")

        assert response.status_code == 200
        data = response.json()
        assert data == {"pricing": pricing_records, "faq": faq_records}

    def test_sends_bearer_credential(self, client: TestClient, respx_mock, pricing_url, faq_url):
        """Test both upstream calls carry the server-held key."""
        pricing_route = respx_mock.get(pricing_url).mock(return_value=httpx.Response(200, json={"records": []}))
        faq_route = respx_mock.get(faq_url).mock(return_value=httpx.Response(200, json={"records": []}))

        client.get("/api/rates")

        assert pricing_route.calls.last.request.headers["Authorization"] == "Bearer test_key"
        assert faq_route.calls.last.request.headers["Authorization"] == "Bearer test_key"

    def test_missing_records_default_to_empty(self, client: TestClient, respx_mock, pricing_url, faq_url):
        """Test upstream payloads without a records key become empty lists."""
        respx_mock.get(pricing_url).mock(return_value=httpx.Response(200, json={}))
        respx_mock.get(faq_url).mock(return_value=httpx.Response(200, json={"offset": "itr123"}))

        response = client.get("/api/rates")

        assert response.status_code == 200
        assert response.json() == {"pricing": [], "faq": []}

    def test_cors_and_content_type_headers(self, client: TestClient, respx_mock, pricing_url, faq_url):
        """Test CORS headers are present on success."""
        respx_mock.get(pricing_url).mock(return_value=httpx.Response(200, json={"records": []}))
        respx_mock.get(faq_url).mock(return_value=httpx.Response(200, json={"records": []}))

        response = client.get("/api/rates")

        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "GET, OPTIONS"
        assert response.headers["access-control-allow-headers"] == "Content-Type"
        assert response.headers["content-type"].startswith("application/json")


class TestRatesMethods:
    """Tests for method handling."""

    def test_preflight(self, client: TestClient, respx_mock):
        """Test OPTIONS answers with an empty success response."""
        response = client.options(
            "/api/rates",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 200
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == "*"
        assert respx_mock.calls.call_count == 0

    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE", "TRACE", "PROPFIND"])
    def test_non_get_rejected(self, client: TestClient, respx_mock, method):
        """Test non-GET methods receive 405."""
        response = client.request(method, "/api/rates")

        assert response.status_code == 405
        assert response.json() == {"error": "Method not allowed"}
        assert response.headers["access-control-allow-origin"] == "*"
        assert respx_mock.calls.call_count == 0

    def test_head_rejected(self, client: TestClient, respx_mock):
        """Test HEAD is rejected with CORS headers and no upstream call."""
        response = client.head("/api/rates")

        assert response.status_code == 405
        assert response.headers["access-control-allow-origin"] == "*"
        assert response.headers["access-control-allow-methods"] == "GET, OPTIONS"
        assert respx_mock.calls.call_count == 0

    def test_other_paths_keep_default_errors(self, client: TestClient):
        """Test errors outside the gateway keep FastAPI's format."""
        response = client.post("/health")

        assert response.status_code == 405
        assert response.json() == {"detail": "Method Not Allowed"}
        assert "access-control-allow-origin" not in response.headers


class TestRatesErrors:
    """Tests for gateway failures."""

    def test_missing_credential(self, unconfigured_client: TestClient, respx_mock):
        """Test a missing key fails with a configuration error and no upstream call."""
        response = unconfigured_client.get("/api/rates")

        assert response.status_code == 500
        assert response.json() == {
            "error": "Server configuration error",
            "message": "Airtable API key not configured",
        }
        assert response.headers["access-control-allow-origin"] == "*"
        assert respx_mock.calls.call_count == 0

    def test_one_upstream_status_failure(self, client: TestClient, respx_mock, pricing_url, faq_url, pricing_records):
        """Test one failing table fails the whole request."""
        respx_mock.get(pricing_url).mock(return_value=httpx.Response(200, json={"records": pricing_records}))
        respx_mock.get(faq_url).mock(return_value=httpx.Response(503, json={"error": "unavailable"}))

        response = client.get("/api/rates")

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Failed to fetch data"
        assert "503" in data["message"]
        assert "pricing" not in data

    def test_network_failure(self, client: TestClient, respx_mock, pricing_url, faq_url):
        """Test transport errors surface their message."""
        respx_mock.get(pricing_url).mock(side_effect=httpx.ConnectError("Connection refused"))
        respx_mock.get(faq_url).mock(return_value=httpx.Response(200, json={"records": []}))

        response = client.get("/api/rates")

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Failed to fetch data"
        assert "Connection refused" in data["message"]

    def test_credential_not_leaked(self, client: TestClient, respx_mock, pricing_url, faq_url):
        """Test error bodies never contain the API key."""
        respx_mock.get(pricing_url).mock(return_value=httpx.Response(401, json={"error": "AUTHENTICATION_REQUIRED"}))
        respx_mock.get(faq_url).mock(return_value=httpx.Response(401, json={"error": "AUTHENTICATION_REQUIRED"}))

        response = client.get("/api/rates")

        assert response.status_code == 500
        assert "test_key" not in response.text

    def test_invalid_json(self, client: TestClient, respx_mock, pricing_url, faq_url):
        """Test an undecodable upstream body is a fetch failure."""
        respx_mock.get(pricing_url).mock(return_value=httpx.Response(200, text="<html>oops</html>"))
        respx_mock.get(faq_url).mock(return_value=httpx.Response(200, json={"records": []}))

        response = client.get("/api/rates")

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to fetch data"


class TestFetchRates:
    """Tests for the fetch_rates coroutine."""

    @pytest.mark.asyncio
    async def test_requires_key(self, unconfigured_settings):
        """Test fetch_rates refuses to run without a key."""
        with pytest.raises(ConfigurationError):
            await fetch_rates(unconfigured_settings)

    @pytest.mark.asyncio
    async def test_waits_for_both_requests(self, test_settings, respx_mock, pricing_url, faq_url):
        """Test both upstream calls are issued even when one fails."""
        pricing_route = respx_mock.get(pricing_url).mock(return_value=httpx.Response(500))
        faq_route = respx_mock.get(faq_url).mock(return_value=httpx.Response(200, json={"records": []}))

        with pytest.raises(AirtableError):
            await fetch_rates(test_settings)

        assert pricing_route.called
        assert faq_route.called

    @pytest.mark.asyncio
    async def test_returns_payload(self, test_settings, respx_mock, pricing_url, faq_url, pricing_records, faq_records):
        """Test the combined payload keeps upstream order."""
        respx_mock.get(pricing_url).mock(return_value=httpx.Response(200, json={"records": pricing_records}))
        respx_mock.get(faq_url).mock(return_value=httpx.Response(200, json={"records": faq_records}))

        payload = await fetch_rates(test_settings)

        assert [record.id for record in payload.pricing] == ["rec1", "rec2", "rec3", "rec4"]
        assert [record.id for record in payload.faq] == ["recA", "recB"]
