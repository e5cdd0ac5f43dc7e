"""Display views of pricing and FAQ records, with field fallbacks applied."""

from dataclasses import dataclass
from typing import Any, Optional

from ..models.schemas import AirtableRecord
from ..utils.parser import PriceParser

UNIT_NAME_FIELDS = ("Unit Name", "Name")
PRICE_FIELD = "Current Price"
PROMOTION_FIELD = "Promotions"
QUESTION_FIELD = "Question"
ANSWER_FIELD = "Answer"

DEFAULT_UNIT_NAME = "Apartment"
CALL_FOR_PRICING = "Call for pricing"
DEFAULT_QUESTION = "Question"
DEFAULT_ANSWER = "Answer"

_parser = PriceParser()


def _text(value: Any) -> Optional[str]:
    """Coerce a field value to display text; empty values become None."""
    if value is None or value == "" or isinstance(value, bool):
        return None
    if isinstance(value, list):
        joined = ", ".join(str(item) for item in value if item not in (None, ""))
        return joined or None
    return str(value)


@dataclass
class PricingEntry:
    """One row of the pricing table."""

    unit_name: str
    price: Optional[float] = None
    promotion: Optional[str] = None

    @classmethod
    def from_record(cls, record: AirtableRecord) -> "PricingEntry":
        fields = record.fields
        unit_name = None
        for name in UNIT_NAME_FIELDS:
            unit_name = _text(fields.get(name))
            if unit_name:
                break

        return cls(
            unit_name=unit_name or DEFAULT_UNIT_NAME,
            price=_parser.normalize(fields.get(PRICE_FIELD)),
            promotion=_text(fields.get(PROMOTION_FIELD)),
        )

    @property
    def display_price(self) -> str:
        """Formatted price, or the call-for-pricing literal for absent or zero prices."""
        if not self.price:
            return CALL_FOR_PRICING
        return _parser.format(self.price)


@dataclass
class FAQEntry:
    """One question/answer pair; the answer may carry rich text."""

    question: str
    answer: str

    @classmethod
    def from_record(cls, record: AirtableRecord) -> "FAQEntry":
        fields = record.fields
        return cls(
            question=_text(fields.get(QUESTION_FIELD)) or DEFAULT_QUESTION,
            answer=_text(fields.get(ANSWER_FIELD)) or DEFAULT_ANSWER,
        )
