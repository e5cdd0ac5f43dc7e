"""JSON-LD structured data for search engines.

Two documents are kept in the page head: an aggregate ``Offer`` built from
the priced units, and an ``FAQPage`` built from the FAQ entries. Pricing
and FAQ data arrive independently, so both lists are cached and each
document is regenerated from the cache whenever either list changes.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

from ..models.schemas import FAQAnswer, FAQPageSchema, FAQQuestion, OfferSchema
from .page import PageDocument
from .records import FAQEntry

logger = logging.getLogger(__name__)

OFFER_SCRIPT_ID = "dynamic-offer-schema"
FAQ_SCRIPT_ID = "dynamic-faq-schema"
JSON_LD_TYPE = "application/ld+json"


class _Unchanged:
    """Marker for an ``update_schema`` argument that should keep the cached list."""

    def __repr__(self) -> str:
        return "UNCHANGED"


UNCHANGED: Any = _Unchanged()


@dataclass
class SchemaCache:
    """Last-seen pricing and FAQ lists used to build the JSON-LD documents."""

    prices: List[float] = field(default_factory=list)
    faq: List[FAQEntry] = field(default_factory=list)

    def merge(
        self,
        prices: Union[Sequence[float], _Unchanged] = UNCHANGED,
        faq: Union[Sequence[FAQEntry], _Unchanged] = UNCHANGED,
    ) -> None:
        """Overwrite the provided lists and keep the others."""
        if prices is not UNCHANGED:
            self.prices = list(prices)
        if faq is not UNCHANGED:
            self.faq = list(faq)


def _number(value: float) -> Union[int, float]:
    return int(value) if float(value).is_integer() else value


def build_offer_schema(prices: Sequence[float]) -> Optional[OfferSchema]:
    """Summarize prices as a schema.org aggregate offer.

    Args:
        prices: Normalized unit prices.

    Returns:
        OfferSchema, or None when there are no prices.
    """
    if not prices:
        return None

    return OfferSchema(
        lowPrice=_number(min(prices)),
        highPrice=_number(max(prices)),
        offerCount=len(prices),
    )


def build_faq_schema(entries: Sequence[FAQEntry]) -> Optional[FAQPageSchema]:
    """Build a schema.org FAQPage, preserving entry order."""
    if not entries:
        return None

    return FAQPageSchema(
        mainEntity=[
            FAQQuestion(name=entry.question, acceptedAnswer=FAQAnswer(text=entry.answer))
            for entry in entries
        ]
    )


def serialize_json_ld(data: Dict[str, Any]) -> str:
    """Serialize JSON for embedding in a ``<script>`` element."""
    # "</" inside a script body would end the element early
    return json.dumps(data, ensure_ascii=False).replace("</", "<\\/")


class StructuredDataPublisher:
    """Publishes the offer and FAQ documents into a page head."""

    def __init__(self, document: PageDocument, cache: Optional[SchemaCache] = None):
        self.document = document
        self.cache = cache if cache is not None else SchemaCache()

    def update_schema(
        self,
        new_prices: Union[Sequence[float], _Unchanged] = UNCHANGED,
        new_faq: Union[Sequence[FAQEntry], _Unchanged] = UNCHANGED,
    ) -> None:
        """Merge new data into the cache and republish the affected documents.

        Each document is only written when its cached list is non-empty, so a
        document published earlier survives a later empty update.

        Args:
            new_prices: Normalized prices, or UNCHANGED to keep the cache.
            new_faq: FAQ entries, or UNCHANGED to keep the cache.
        """
        self.cache.merge(prices=new_prices, faq=new_faq)

        offer = build_offer_schema(self.cache.prices)
        if offer is not None:
            self.inject_json_ld(offer.model_dump(by_alias=True), OFFER_SCRIPT_ID)

        faq = build_faq_schema(self.cache.faq)
        if faq is not None:
            self.inject_json_ld(faq.model_dump(by_alias=True), FAQ_SCRIPT_ID)

    def inject_json_ld(self, data: Dict[str, Any], script_id: str) -> None:
        """Create or overwrite the JSON-LD script with the given id."""
        script = self.document.get_element(script_id)
        if script is None:
            script = self.document.new_tag("script", {"id": script_id, "type": JSON_LD_TYPE})
            self.document.head.append(script)
            logger.debug(f"Created JSON-LD script #{script_id}")

        script.string = serialize_json_ld(data)

    def read_json_ld(self, script_id: str) -> Optional[Dict[str, Any]]:
        """Return the parsed content of a published document, if any."""
        script = self.document.get_element(script_id)
        if script is None or script.string is None:
            return None
        return json.loads(script.string)
