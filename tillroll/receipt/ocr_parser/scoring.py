"""Total-vs-items consistency check and confidence scoring."""

from decimal import Decimal

from tillroll.domain.receipt import ParsedItem

# Allowed gap between the receipt total and the summed line totals
TOTAL_MISMATCH_TOLERANCE = Decimal("0.5")

# Confidence is counted in tenths: base 0.5, +0.1 per populated signal, max 1.0
BASE_CONFIDENCE_TENTHS = 5
MAX_CONFIDENCE_TENTHS = 10


def _check_total_consistency(total: Decimal | None, items: list[ParsedItem]) -> list[str]:
    """Return warnings when the item line totals do not add up to the receipt total."""
    if total is None or not items:
        return []
    items_sum = sum((item.line_total for item in items), Decimal("0"))
    if abs(items_sum - total) > TOTAL_MISMATCH_TOLERANCE:
        return [f"Sum of items ({items_sum:.2f}) does not match receipt total ({total:.2f})"]
    return []


def _score_confidence(
    *,
    merchant_name: str | None,
    receipt_date: str | None,
    total: Decimal | None,
    items: list[ParsedItem],
    warnings: list[str],
) -> float:
    """
    Score how much of the receipt was recognized.

    Rewards each populated field and a consistent item list; not a
    statistical model.
    """
    signals = (
        merchant_name is not None,
        receipt_date is not None,
        total is not None,
        bool(items),
        bool(items) and not warnings,
    )
    tenths = BASE_CONFIDENCE_TENTHS + sum(signals)
    return min(tenths, MAX_CONFIDENCE_TENTHS) / 10
