"""Parse raw OCR text into structured ParsedReceipt data."""

from tillroll.domain.receipt import ParsedReceipt
from tillroll.runtime.logging import get_logger

from .ocr_parser import (
    _check_total_consistency,
    _detect_currency,
    _extract_date,
    _extract_items,
    _extract_merchant,
    _extract_tax,
    _extract_total,
    _score_confidence,
    normalize_lines,
)

logger = get_logger(__name__)

NO_TEXT_WARNING = "No text found on receipt"


def parse_receipt_text(full_text: str) -> ParsedReceipt:
    """
    Parse OCR-recognized receipt text into a ParsedReceipt.

    This is a best-effort parser: it never raises, and fields it cannot
    determine are left as None with warnings explaining inconsistencies.
    All supported locales are tried at once; no locale hint is needed.

    Args:
        full_text: Newline-delimited text from the OCR provider (may be empty)

    Returns:
        A new ParsedReceipt. Blank input gives confidence 0 and a single
        "no text" warning.
    """
    lines = normalize_lines(full_text)
    if not lines:
        logger.debug("Receipt text is empty")
        return ParsedReceipt(confidence=0.0, warnings=(NO_TEXT_WARNING,))

    merchant_name = _extract_merchant(lines)
    receipt_date = _extract_date(full_text)
    currency = _detect_currency(full_text)
    total = _extract_total(lines)
    tax_total = _extract_tax(lines)
    items = _extract_items(lines)
    logger.debug(
        "Parsed fields: merchant=%r date=%s currency=%s total=%s tax=%s items=%d",
        merchant_name,
        receipt_date,
        currency,
        total,
        tax_total,
        len(items),
    )

    warnings = _check_total_consistency(total, items)
    for warning in warnings:
        logger.debug("Receipt warning: %s", warning)

    confidence = _score_confidence(
        merchant_name=merchant_name,
        receipt_date=receipt_date,
        total=total,
        items=items,
        warnings=warnings,
    )

    return ParsedReceipt(
        merchant_name=merchant_name,
        receipt_date=receipt_date,
        currency=currency,
        total=total,
        tax_total=tax_total,
        items=tuple(items),
        confidence=confidence,
        warnings=tuple(warnings),
    )
