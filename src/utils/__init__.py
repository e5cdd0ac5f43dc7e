"""Utility modules for the Topiary Park rates service."""

from .parser import ParsedPrice, PriceParser

__all__ = [
    "ParsedPrice",
    "PriceParser",
]
