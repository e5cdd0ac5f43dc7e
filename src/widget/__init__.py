"""Server-side rendering of the rates widget: pricing, FAQ, map and JSON-LD."""

from .accordion import Accordion
from .page import PAGE_TEMPLATE, PageDocument
from .renderer import DataRenderer, RendererError
from .structured_data import (
    FAQ_SCRIPT_ID,
    OFFER_SCRIPT_ID,
    UNCHANGED,
    SchemaCache,
    StructuredDataPublisher,
)

__all__ = [
    "Accordion",
    "DataRenderer",
    "FAQ_SCRIPT_ID",
    "OFFER_SCRIPT_ID",
    "PAGE_TEMPLATE",
    "PageDocument",
    "RendererError",
    "SchemaCache",
    "StructuredDataPublisher",
    "UNCHANGED",
]
