"""Async Airtable client for listing table records."""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from ..config import Settings
from ..models.schemas import AirtableRecord, RecordList

logger = logging.getLogger(__name__)


class AirtableError(Exception):
    """Exception raised when an Airtable request fails.

    The message is safe to return to API callers: it never contains the
    API key.
    """

    pass


class AirtableClient:
    """Minimal Airtable REST client bound to one base.

    Use as an async context manager so that concurrent table fetches share
    one connection pool:

        >>> async with AirtableClient.from_settings(settings) as airtable:
        ...     records = await airtable.list_records("tblXXXX")
    """

    def __init__(
        self,
        api_key: str,
        base_id: str,
        api_url: str = "https://api.airtable.com/v0",
        timeout: float = 30,
    ):
        """Initialize the client.

        Args:
            api_key: Airtable personal access token.
            base_id: Airtable base identifier.
            api_url: Root of the Airtable REST API.
            timeout: Request timeout in seconds.
        """
        self.base_id = base_id
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._api_key = api_key
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "AirtableClient":
        """Build a client from application settings.

        Args:
            settings: Application settings with a configured API key.

        Returns:
            AirtableClient instance.
        """
        return cls(
            api_key=settings.AIRTABLE_API_KEY or "",
            base_id=settings.AIRTABLE_BASE_ID,
            api_url=settings.AIRTABLE_API_URL,
            timeout=settings.REQUEST_TIMEOUT,
        )

    async def __aenter__(self) -> "AirtableClient":
        self._client = httpx.AsyncClient(
            headers={"Authorization": f"Bearer {self._api_key}"},
            timeout=self.timeout,
        )
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def table_url(self, table_id: str) -> str:
        """Build the list-records URL for a table."""
        return f"{self.api_url}/{self.base_id}/{table_id}"

    async def list_records(self, table_id: str) -> List[AirtableRecord]:
        """Fetch the records of one table.

        Only the first page is read; the tables behind the site are small.

        Args:
            table_id: Airtable table identifier.

        Returns:
            Records in upstream order, empty if the payload has none.

        Raises:
            AirtableError: On transport failure, non-success status, or an
                undecodable payload.
        """
        if self._client is None:
            raise RuntimeError("AirtableClient must be used as an async context manager")

        url = self.table_url(table_id)

        try:
            response = await self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise AirtableError(
                f"Failed to fetch data from Airtable (status {e.response.status_code})"
            ) from e
        except httpx.RequestError as e:
            raise AirtableError(f"Airtable request failed: {str(e) or type(e).__name__}") from e

        try:
            payload = RecordList.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise AirtableError("Airtable returned an unexpected payload") from e

        logger.debug(f"Fetched {len(payload.records)} records from table {table_id}")
        return payload.records
