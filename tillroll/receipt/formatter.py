"""Format ParsedReceipt data for transport (JSON) and for terminals."""

import math
from decimal import Decimal
from typing import Any

from tillroll.domain.receipt import ParsedItem, ParsedReceipt


def _number(value: Decimal | int | None) -> float | int | None:
    """Convert engine numbers to JSON numbers; counts stay integers."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    number = float(value)
    # JSON has no infinity; amounts too large for a float become null
    return number if math.isfinite(number) else None


def item_to_dict(item: ParsedItem) -> dict[str, Any]:
    return {
        "name": item.name,
        "quantity": _number(item.quantity),
        "unitPrice": _number(item.unit_price),
        "lineTotal": _number(item.line_total),
        "rawText": item.raw_text,
    }


def receipt_to_dict(receipt: ParsedReceipt) -> dict[str, Any]:
    """
    Serialize a ParsedReceipt with the camelCase field names clients expect.

    Returns:
        Dict that json.dumps() accepts as-is.
    """
    return {
        "merchantName": receipt.merchant_name,
        "receiptDate": receipt.receipt_date,
        "currency": receipt.currency,
        "total": _number(receipt.total),
        "taxTotal": _number(receipt.tax_total),
        "items": [item_to_dict(item) for item in receipt.items],
        "confidence": receipt.confidence,
        "warnings": list(receipt.warnings),
    }


def _format_amount(amount: Decimal | None, currency: str | None) -> str:
    if amount is None:
        return "UNKNOWN"
    return f"{amount:.2f} {currency}" if currency else f"{amount:.2f}"


def format_receipt_summary(receipt: ParsedReceipt, item_categories: list[str] | None = None) -> list[str]:
    """
    Format a human-readable summary of a parsed receipt.

    Args:
        receipt: Parsed receipt
        item_categories: Optional category per item, printed in brackets

    Returns:
        Lines of text (without trailing newlines)
    """
    currency = receipt.currency
    lines = [
        "=" * 60,
        "PARSED RECEIPT",
        "=" * 60,
        f"Merchant: {receipt.merchant_name or 'UNKNOWN'}",
        f"Date: {receipt.receipt_date or 'UNKNOWN'}",
        f"Currency: {currency or 'UNKNOWN'}",
        f"Total: {_format_amount(receipt.total, currency)}",
    ]
    if receipt.tax_total is not None:
        lines.append(f"Tax: {_format_amount(receipt.tax_total, currency)}")

    lines.append("")
    lines.append(f"Items ({len(receipt.items)}):")
    for i, item in enumerate(receipt.items, 1):
        qty_str = f" x{item.quantity}" if item.quantity is not None else ""
        cat_str = ""
        if item_categories is not None and i <= len(item_categories):
            cat_str = f" [{item_categories[i - 1]}]"
        lines.append(f"  {i}. {item.name}{qty_str} - {_format_amount(item.line_total, currency)}{cat_str}")

    lines.append("")
    lines.append(f"Confidence: {receipt.confidence:.1f}")
    for warning in receipt.warnings:
        lines.append(f"WARNING: {warning}")
    lines.append("=" * 60)
    return lines
