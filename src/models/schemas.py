"""Pydantic schemas for upstream records, API payloads and JSON-LD documents."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Airtable Models
# =============================================================================


class AirtableRecord(BaseModel):
    """A single Airtable record.

    Unknown keys are kept so the gateway proxies records unchanged.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    fields: Dict[str, Any] = Field(default_factory=dict)
    createdTime: Optional[str] = None


class RecordList(BaseModel):
    """Response body of an Airtable list-records call."""

    model_config = ConfigDict(extra="allow")

    records: List[AirtableRecord] = Field(default_factory=list)


# =============================================================================
# Gateway Models
# =============================================================================


class RatesPayload(BaseModel):
    """Combined pricing and FAQ payload served by the rates gateway."""

    pricing: List[AirtableRecord] = Field(default_factory=list)
    faq: List[AirtableRecord] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Error body returned by the rates gateway."""

    error: str
    message: Optional[str] = None


# =============================================================================
# JSON-LD Models (schema.org)
# =============================================================================


class OfferSchema(BaseModel):
    """Aggregate offer summary published as schema.org ``Offer``."""

    model_config = ConfigDict(populate_by_name=True)

    context: str = Field("https://schema.org", alias="@context")
    type: str = Field("Offer", alias="@type")
    priceCurrency: str = "USD"
    lowPrice: Union[int, float]
    highPrice: Union[int, float]
    offerCount: int
    availability: str = "https://schema.org/InStock"


class FAQAnswer(BaseModel):
    """Accepted answer of a schema.org ``Question``."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field("Answer", alias="@type")
    text: str


class FAQQuestion(BaseModel):
    """A schema.org ``Question`` inside an ``FAQPage``."""

    model_config = ConfigDict(populate_by_name=True)

    type: str = Field("Question", alias="@type")
    name: str
    acceptedAnswer: FAQAnswer


class FAQPageSchema(BaseModel):
    """FAQ document published as schema.org ``FAQPage``."""

    model_config = ConfigDict(populate_by_name=True)

    context: str = Field("https://schema.org", alias="@context")
    type: str = Field("FAQPage", alias="@type")
    mainEntity: List[FAQQuestion] = Field(default_factory=list)
