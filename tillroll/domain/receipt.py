"""Data models for parsed receipt text."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class ParsedItem:
    """A single purchased line recovered from receipt text."""

    name: str
    line_total: Decimal
    raw_text: str
    # int for count units ("2 x", "3 AD"), Decimal for weight/volume ("0,512 kg")
    quantity: int | Decimal | None = None
    unit_price: Decimal | None = None


@dataclass(frozen=True)
class ParsedReceipt:
    """Structured result of one parse call.

    Optional fields are None when the parser could not determine them.
    """

    merchant_name: str | None = None
    receipt_date: str | None = None  # YYYY-MM-DD
    currency: str | None = None  # e.g. "TRY", "EUR"
    total: Decimal | None = None
    tax_total: Decimal | None = None
    items: tuple[ParsedItem, ...] = field(default_factory=tuple)
    confidence: float = 0.0
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def items_sum(self) -> Decimal:
        return sum((item.line_total for item in self.items), Decimal("0"))
