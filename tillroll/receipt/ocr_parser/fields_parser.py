"""Merchant/date/currency/summary amount extraction helpers."""

import re
from datetime import date
from decimal import Decimal

from .common import extract_line_amount
from .keywords import (
    ADDRESS_PATTERN,
    CURRENCY_MARKERS,
    DATE_PATTERNS,
    MERCHANT_ID_PREFIX,
    TAX_KEYWORDS,
    TOTAL_KEYWORDS,
    TWO_DIGIT_YEAR_PIVOT,
    matches_any,
)

# Merchant name is expected within the first few lines
MERCHANT_SEARCH_LINES = 5


def _looks_like_address(line: str) -> bool:
    return ADDRESS_PATTERN.search(line) is not None and re.search(r"\d", line) is not None


def _extract_merchant(lines: list[str]) -> str | None:
    """
    Extract the merchant name from the receipt header.

    Takes the first of the leading lines that is not a number, a date,
    a street address, or a phone/tax-id line. Skip keywords are not applied
    here, so a store called e.g. "Kasa Market" survives.
    """
    for line in lines[:MERCHANT_SEARCH_LINES]:
        if len(line) < 2:
            continue
        if re.fullmatch(r"\d+", re.sub(r"[\s\-/.]", "", line)):
            continue
        if matches_any(DATE_PATTERNS, line):
            continue
        if _looks_like_address(line):
            continue
        if MERCHANT_ID_PREFIX.match(line):
            continue
        return line
    return None


def _expand_year(raw_year: str) -> int:
    year = int(raw_year)
    if len(raw_year) == 2:
        # Fixed pivot, not calendar-aware
        return 1900 + year if year > TWO_DIGIT_YEAR_PIVOT else 2000 + year
    return year


def _extract_date(full_text: str) -> str | None:
    """Extract the receipt date from the whole text as YYYY-MM-DD (None if unknown)."""
    for pattern in DATE_PATTERNS:
        for match in pattern.finditer(full_text):
            first, second, third = match.groups()
            if len(first) == 4:
                year, month, day = int(first), int(second), int(third)
            else:
                year, month, day = _expand_year(third), int(second), int(first)
            try:
                return date(year, month, day).isoformat()
            except ValueError:
                # e.g. "45.13.2024": not a calendar date, keep looking
                continue
    return None


def _detect_currency(full_text: str) -> str | None:
    """Detect the currency from symbols or codes anywhere in the text."""
    for pattern, code in CURRENCY_MARKERS:
        if pattern.search(full_text):
            return code
    return None


def _extract_total(lines: list[str]) -> Decimal | None:
    """
    Extract the total amount.

    Receipts often repeat "total" on a subtotal and a grand-total line;
    the largest amount on any total-keyword line is the inclusive figure.
    """
    total: Decimal | None = None
    for line in lines:
        if not matches_any(TOTAL_KEYWORDS, line):
            continue
        amount = extract_line_amount(line)
        if amount is not None and (total is None or amount > total):
            total = amount
    return total


def _extract_tax(lines: list[str]) -> Decimal | None:
    """Extract the tax amount from the first tax-keyword line carrying a number."""
    for line in lines:
        if not matches_any(TAX_KEYWORDS, line):
            continue
        amount = extract_line_amount(line)
        # Use 'is not None' since Decimal("0.00") is falsy but valid
        if amount is not None:
            return amount
    return None
