"""Data models and schemas for the Topiary Park rates service."""

from .schemas import (
    AirtableRecord,
    ErrorResponse,
    FAQAnswer,
    FAQPageSchema,
    FAQQuestion,
    OfferSchema,
    RatesPayload,
    RecordList,
)

__all__ = [
    "AirtableRecord",
    "ErrorResponse",
    "FAQAnswer",
    "FAQPageSchema",
    "FAQQuestion",
    "OfferSchema",
    "RatesPayload",
    "RecordList",
]
