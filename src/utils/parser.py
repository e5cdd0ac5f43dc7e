"""Price parsing utilities for normalizing Airtable price fields."""

import logging
import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class ParsedPrice:
    """Represents a parsed price."""

    value: float
    currency: str


class PriceParser:
    """Parser for turning raw price field values into numbers and display strings."""

    # Currency symbol to code mapping
    CURRENCY_SYMBOLS: Dict[str, str] = {
        "US$": "USD",
        "$": "USD",
        "USD": "USD",
        "€": "EUR",
        "£": "GBP",
        "¥": "JPY",
    }

    # Leading numeric prefix, the part of "1250/mo" that is a number
    NUMBER_PATTERN = re.compile(r"^[-+]?(?:\d+(?:\.\d*)?|\.\d+)")

    def __init__(self, default_currency: str = "USD"):
        """Initialize parser with default currency.

        Args:
            default_currency: Currency code used when none is detected.
        """
        self.default_currency = default_currency

    def parse(self, price_string: str) -> Optional[ParsedPrice]:
        """Parse a price string into structured format.

        Args:
            price_string: The price string to parse (e.g., "$1,250").

        Returns:
            ParsedPrice object or None if parsing fails.
        """
        if not price_string or not price_string.strip():
            return None

        text = price_string.strip()
        currency = self._detect_currency(text)
        value = self._extract_numeric_value(text)

        if value is None:
            return None

        return ParsedPrice(value=value, currency=currency or self.default_currency)

    def normalize(self, value: Any) -> Optional[float]:
        """Normalize a raw price field value to a finite float.

        Numbers are used as-is, strings are parsed after stripping currency
        symbols and thousands separators. Strings priced in another currency
        are rejected so they never enter a USD summary. Anything else (absent
        values, booleans, lists from lookup fields) normalizes to None.

        Args:
            value: Raw value of the price field.

        Returns:
            Float price or None.
        """
        if value is None or isinstance(value, bool):
            return None

        if isinstance(value, (int, float)):
            number = float(value)
            return number if math.isfinite(number) else None

        if isinstance(value, str):
            parsed = self.parse(value)
            if parsed is None:
                return None
            if parsed.currency != self.default_currency:
                logger.debug(f"Ignoring {parsed.currency} price: {value!r}")
                return None
            return parsed.value

        return None

    def format(self, amount: float) -> str:
        """Format an amount as whole US dollars, e.g. ``$1,250``.

        Args:
            amount: Numeric amount.

        Returns:
            Display string.
        """
        sign = "-" if amount < 0 else ""
        # Half away from zero: 1250.5 shows as $1,251
        whole = Decimal(str(abs(amount))).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return f"{sign}${whole:,}"

    def _detect_currency(self, text: str) -> Optional[str]:
        """Detect currency from text.

        Args:
            text: Text containing currency symbol or code.

        Returns:
            Currency code or None.
        """
        for symbol, code in self.CURRENCY_SYMBOLS.items():
            if symbol in text:
                return code

        return None

    def _extract_numeric_value(self, text: str) -> Optional[float]:
        """Extract numeric value from text.

        Args:
            text: Text containing the number.

        Returns:
            Float value or None if extraction fails.
        """
        cleaned = text
        for symbol in self.CURRENCY_SYMBOLS:
            cleaned = cleaned.replace(symbol, "")

        # Remove thousand separators and whitespace
        cleaned = re.sub(r"[,\s]", "", cleaned)

        match = self.NUMBER_PATTERN.match(cleaned)
        if not match:
            logger.debug(f"Failed to parse price value: {text!r}")
            return None

        try:
            number = float(match.group(0))
        except ValueError:
            logger.debug(f"Failed to parse price value: {text!r}")
            return None

        return number if math.isfinite(number) else None
