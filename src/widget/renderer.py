"""Data renderer: fetches rates from the gateway and renders the widget.

Each load operation follows the same contract: show a loading indicator,
issue one request to the rates gateway, then render an error message, an
empty-state message, or the data fragment. Successful renders feed the
structured-data publisher. There are no retries.
"""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from ..models.schemas import AirtableRecord, RatesPayload
from .accordion import Accordion
from .fragments import NO_FAQ_TEXT, NO_PRICING_TEXT, FragmentBuilder, panel_id
from .page import (
    FAQ_CONTAINER_ID,
    MAP_CONTAINER_ID,
    PRICING_CONTAINER_ID,
    PageDocument,
)
from .records import FAQEntry, PricingEntry
from .structured_data import StructuredDataPublisher

logger = logging.getLogger(__name__)

PRICING_PLACEHOLDER_CLASSES = ("h-64", "h-80", "flex", "items-center", "justify-center")
FAQ_PLACEHOLDER_CLASSES = ("min-h-[200px]", "flex", "items-center", "justify-center")
MAP_PLACEHOLDER_CLASSES = ("bg-gray-200", "flex", "items-center", "justify-center")


class RendererError(Exception):
    """Exception raised when the rates gateway cannot be read."""

    pass


class DataRenderer:
    """Renders pricing, FAQ and map fragments into a page document.

    The renderer only ever talks to the rates gateway; it never holds the
    Airtable credential.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        document: Optional[PageDocument] = None,
        publisher: Optional[StructuredDataPublisher] = None,
        endpoint: str = "/api/rates",
    ):
        """Initialize the renderer.

        Args:
            http: Client used to reach the rates gateway.
            document: Page to render into. Defaults to the site template.
            publisher: Structured-data publisher bound to the same document.
            endpoint: Gateway URL or path relative to the client's base URL.
        """
        self.http = http
        self.document = document or PageDocument()
        self.publisher = publisher or StructuredDataPublisher(self.document)
        self.endpoint = endpoint
        self.fragments = FragmentBuilder(self.document)
        self.accordion = Accordion(self.document)

    async def fetch_rates(self) -> RatesPayload:
        """Request the combined payload from the gateway.

        Raises:
            RendererError: On transport failure, non-success status, or a
                payload that is not a rates object.
        """
        try:
            response = await self.http.get(self.endpoint)
        except httpx.HTTPError as e:
            raise RendererError(f"Request to rates gateway failed: {e}") from e

        if not response.is_success:
            raise RendererError(f"HTTP error! status: {response.status_code}")

        try:
            return RatesPayload.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise RendererError("Rates gateway returned an unexpected payload") from e

    def show_loading(self, container_id: str) -> None:
        self.document.replace_content(container_id, self.fragments.loading())

    def show_error(self, container_id: str) -> None:
        self.document.replace_content(container_id, self.fragments.error())

    async def load_pricing(self) -> None:
        """Fetch rates and render the pricing table."""
        if self.document.get_element(PRICING_CONTAINER_ID) is None:
            return

        self.show_loading(PRICING_CONTAINER_ID)
        try:
            payload = await self.fetch_rates()
        except RendererError as e:
            logger.error(f"Pricing fetch error: {e}")
            self.show_error(PRICING_CONTAINER_ID)
            return

        self.render_pricing(payload.pricing)

    async def load_faq(self) -> None:
        """Fetch rates and render the FAQ accordion."""
        if self.document.get_element(FAQ_CONTAINER_ID) is None:
            return

        self.show_loading(FAQ_CONTAINER_ID)
        try:
            payload = await self.fetch_rates()
        except RendererError as e:
            logger.error(f"FAQ fetch error: {e}")
            self.show_error(FAQ_CONTAINER_ID)
            return

        self.render_faq(payload.faq)

    async def load_all(self) -> None:
        """Render pricing and FAQ from a single gateway request."""
        if (
            self.document.get_element(PRICING_CONTAINER_ID) is None
            or self.document.get_element(FAQ_CONTAINER_ID) is None
        ):
            return

        self.show_loading(PRICING_CONTAINER_ID)
        self.show_loading(FAQ_CONTAINER_ID)

        try:
            payload = await self.fetch_rates()
        except RendererError as e:
            logger.error(f"Data fetch error: {e}")
            self.show_error(PRICING_CONTAINER_ID)
            self.show_error(FAQ_CONTAINER_ID)
            return

        self.render_pricing(payload.pricing)
        self.render_faq(payload.faq)

    def render_pricing(self, records: List[AirtableRecord]) -> None:
        """Render the pricing table and publish the offer summary."""
        if not records:
            self.document.replace_content(
                PRICING_CONTAINER_ID, self.fragments.empty(NO_PRICING_TEXT)
            )
            return

        entries = [PricingEntry.from_record(record) for record in records]
        if not self.document.replace_content(
            PRICING_CONTAINER_ID, self.fragments.pricing_table(entries)
        ):
            return
        self.document.remove_classes(PRICING_CONTAINER_ID, *PRICING_PLACEHOLDER_CLASSES)

        prices = [entry.price for entry in entries if entry.price is not None]
        self.publisher.update_schema(new_prices=prices)

    def render_faq(self, records: List[AirtableRecord]) -> None:
        """Render the FAQ accordion and publish the FAQ document."""
        if not records:
            self.document.replace_content(FAQ_CONTAINER_ID, self.fragments.empty(NO_FAQ_TEXT))
            self.accordion.reset([])
            return

        entries = [FAQEntry.from_record(record) for record in records]
        if not self.document.replace_content(
            FAQ_CONTAINER_ID, self.fragments.faq_accordion(entries)
        ):
            return
        self.document.remove_classes(FAQ_CONTAINER_ID, *FAQ_PLACEHOLDER_CLASSES)
        self.accordion.reset(panel_id(index) for index in range(len(entries)))

        self.publisher.update_schema(new_faq=entries)

    def toggle_accordion(self, panel: str) -> bool:
        """Open or close one FAQ panel; returns its new state."""
        return self.accordion.toggle(panel)

    def init_map(self) -> None:
        """Replace the map placeholder with the embedded map."""
        if not self.document.replace_content(MAP_CONTAINER_ID, self.fragments.map_embed()):
            return
        self.document.remove_classes(MAP_CONTAINER_ID, *MAP_PLACEHOLDER_CLASSES)

    async def initialize(self) -> PageDocument:
        """Page-load sequence: embed the map and render both data fragments.

        Returns:
            The rendered document.
        """
        self.init_map()
        await self.load_all()
        return self.document
