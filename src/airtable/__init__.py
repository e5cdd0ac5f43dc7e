"""Airtable API client."""

from .client import AirtableClient, AirtableError

__all__ = ["AirtableClient", "AirtableError"]
