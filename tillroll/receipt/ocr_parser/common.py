"""Shared helpers for OCR receipt text parsing: lines, numbers and prices."""

import re
from dataclasses import dataclass
from decimal import Decimal

from .keywords import CURRENCY_TOKEN

# "1.234,50" - dot thousands, comma decimals
_COMMA_DECIMAL_THOUSANDS = re.compile(r"\d{1,3}(?:\.\d{3})+,\d+")
# "1,234.50" - comma thousands, dot decimals
_DOT_DECIMAL_THOUSANDS = re.compile(r"\d{1,3}(?:,\d{3})+\.\d+")
# "1,234", "1.234.567" - thousands groups with one separator and no decimals
_GROUPED_INTEGER = re.compile(r"\d{1,3}([.,])\d{3}(?:\1\d{3})*")
# "1234,5", "12.50", "45"
_PLAIN_NUMBER = re.compile(r"\d+(?:[.,]\d+)?")

# Any numeric token on a line, used when no trailing price is present
_NUMBER_TOKEN = re.compile(r"\d+(?:[.,]\d+)*")

# Digits directly left of a price mean the match started mid-number
_NOT_MID_NUMBER = r"(?<![\d.,\-])"

# A "*" or "%" marker may precede the price. Matches start at the marker or the
# first digit, never inside a whitespace run, so long blank gaps scan once.
_PRICE_MARKER = r"(?:[*%]\s*)?"
_TRAILING_CURRENCY = rf"(?:\s*{CURRENCY_TOKEN})?\s*$"

# Price patterns, tried in order; the first match wins.
# Currency-qualified and suffix-annotated forms come before the bare fallback
# so it cannot swallow a price carrying a currency or VAT-class suffix.
PRICE_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    # "1.234,50 TL", "*12,50", "12,50€"
    (
        "comma_decimal",
        re.compile(
            rf"{_PRICE_MARKER}{_NOT_MID_NUMBER}(\d{{1,3}}(?:\.\d{{3}})+,\d{{2}}|\d+,\d{{2}}){_TRAILING_CURRENCY}",
            re.IGNORECASE,
        ),
    ),
    # "12.50 €", "1,234.50"
    (
        "dot_decimal",
        re.compile(
            rf"{_PRICE_MARKER}{_NOT_MID_NUMBER}(\d{{1,3}}(?:,\d{{3}})+\.\d{{2}}|\d+\.\d{{2}}){_TRAILING_CURRENCY}",
            re.IGNORECASE,
        ),
    ),
    # "EUR 12,50", "₺1.234,50", "$1,234"
    (
        "currency_prefixed",
        re.compile(
            rf"(?<![^\W\d_]){CURRENCY_TOKEN}\s*(\d+(?:[.,]\d{{3}})*(?:[.,]\d{{1,2}})?)\s*$",
            re.IGNORECASE,
        ),
    ),
    # "1,29 A" - Nordic VAT-class letter after the price
    (
        "vat_class_suffix",
        re.compile(rf"{_PRICE_MARKER}{_NOT_MID_NUMBER}(\d{{1,3}}(?:\.\d{{3}})+,\d{{2}}|\d+,\d{{2}})\s*[A-E]\s*$"),
    ),
    # "MUZ 5,5"
    ("bare_comma_decimal", re.compile(r"\s(\d+,\d{1,2})\s*$")),
)


@dataclass(frozen=True)
class PriceMatch:
    """A price found at the end of a line."""

    amount: Decimal
    # Index where the price text (with marker/currency) begins in the line
    start: int
    pattern: str


def normalize_lines(text: str) -> list[str]:
    """Split text on any line break into trimmed, non-empty lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


def parse_amount(text: str, *, grouped_integers: bool = False) -> Decimal | None:
    """
    Normalize a numeral written in any supported locale.

    "1.234,50" -> 1234.50, "1,234.50" -> 1234.50, "12,50" / "12.50" -> 12.50.
    With grouped_integers, "1,234" and "1.234" are read as 1234 instead of
    a three-digit fraction.
    Returns None for anything that is not a number.
    """
    cleaned = re.sub(r"\s+", "", text)
    if grouped_integers and _GROUPED_INTEGER.fullmatch(cleaned):
        return Decimal(re.sub(r"[.,]", "", cleaned))
    if _COMMA_DECIMAL_THOUSANDS.fullmatch(cleaned):
        return Decimal(cleaned.replace(".", "").replace(",", "."))
    if _DOT_DECIMAL_THOUSANDS.fullmatch(cleaned):
        return Decimal(cleaned.replace(",", ""))
    if _PLAIN_NUMBER.fullmatch(cleaned):
        return Decimal(cleaned.replace(",", "."))
    return None


def extract_price(line: str) -> PriceMatch | None:
    """Find the trailing price of a line using the ordered PRICE_PATTERNS."""
    for name, pattern in PRICE_PATTERNS:
        match = pattern.search(line)
        if match:
            # A currency sign in front marks "1,234" as a whole amount with thousands
            amount = parse_amount(match.group(1), grouped_integers=name == "currency_prefixed")
            if amount is None:
                return None
            return PriceMatch(amount=amount, start=match.start(), pattern=name)
    return None


def extract_line_amount(line: str) -> Decimal | None:
    """
    Extract the amount stated on a summary (total/tax) line.

    Prefers the trailing price; otherwise uses the last numeric token that
    parses, so "TOPLAM 45" still yields 45.
    """
    price = extract_price(line)
    if price is not None:
        return price.amount
    for token in reversed(_NUMBER_TOKEN.findall(line)):
        amount = parse_amount(token)
        if amount is not None:
            return amount
    return None
