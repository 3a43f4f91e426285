"""Text-line based receipt item extraction."""

import re
from decimal import Decimal

from tillroll.domain.receipt import ParsedItem

from .common import extract_price
from .keywords import (
    COUNT_UNITS,
    CURRENCY_TOKEN,
    LETTER_MULTIPLIER_MARKERS,
    MEASURE_UNITS,
    MULTIPLIER_MARKERS,
    SKIP_KEYWORDS,
    SYMBOL_MULTIPLIER_MARKERS,
    TAX_KEYWORDS,
    TOTAL_KEYWORDS,
    matches_any,
)

# Skip keywords only reject lines shorter than this, so a long product name
# containing a common word (e.g. "card") is still an item.
SKIP_KEYWORD_MAX_LENGTH = 30


def _unit_alternation(units: tuple[str, ...]) -> str:
    # Longest first so "adet" wins over "ad"
    return "|".join(re.escape(unit) for unit in sorted(set(units), key=len, reverse=True))


_MARKERS = re.escape(MULTIPLIER_MARKERS)
_LETTER_MARKERS = re.escape(LETTER_MULTIPLIER_MARKERS)
_SYMBOL_MARKERS = re.escape(SYMBOL_MULTIPLIER_MARKERS)

# Quantities are at most this many digits; longer runs are part of the name
_COUNT = r"\d{1,6}"
_MEASURE = r"\d{1,6}(?:[.,]\d{1,3})?"

# Quantity patterns, tried in order against the item name.
# Each entry: (pattern, is_measure); measure quantities are Decimal, counts int.
QUANTITY_PATTERNS: tuple[tuple[re.Pattern[str], bool], ...] = (
    # "2 x Ekmek", "3* Cola", "3*Cola" (but not "2XL Tişört")
    (re.compile(rf"^({_COUNT})\s*(?:[{_SYMBOL_MARKERS}]|[{_LETTER_MARKERS}](?![^\W\d_]))\s*"), False),
    # "Ekmek x2", "Cola * 3" (but not "Max 2")
    (re.compile(rf"(?:\s[{_MARKERS}]|(?<!\s)\s*\*)\s*({_COUNT})$"), False),
    # "2 AD EKMEK", "3 kpl Banaani"
    (re.compile(rf"^({_COUNT})\s*(?:{_unit_alternation(COUNT_UNITS)})\.?(?:\s+|$)", re.IGNORECASE), False),
    # "0,512 kg Banaani", "1.5 lt Süt"
    (re.compile(rf"^({_MEASURE})\s*(?:{_unit_alternation(MEASURE_UNITS)})\.?(?:\s+|$)", re.IGNORECASE), True),
)

# One annotation left over after the price is cut off: a "%8" tax-rate tag,
# a bare "*", a currency code printed before the price, a dangling separator.
_TRAILING_ANNOTATION = re.compile(rf"(?:%\s?\d{{0,2}}|\*|(?<![^\W\d_]){CURRENCY_TOKEN}|[-:–])$", re.IGNORECASE)
# No single annotation is longer than this ("% 18", "EUR")
_ANNOTATION_MAX_LENGTH = 4


def _is_noise_line(line: str) -> bool:
    """Return True for separators, bare numbers and short boilerplate lines."""
    if len(line) < 2:
        return True
    # Only digits, punctuation and whitespace, e.g. "--------" or "01.03.2024 14:32"
    if re.fullmatch(r"[\d\W_]+", line):
        return True
    if len(line) < SKIP_KEYWORD_MAX_LENGTH and matches_any(SKIP_KEYWORDS, line):
        return True
    return False


def _strip_price(line: str, price_start: int) -> str:
    """Cut the price and its annotations off the line, leaving the item name."""
    name = line[:price_start].rstrip()
    # Peel annotations off right to left, only looking at the tail each time
    end = len(name)
    while True:
        match = _TRAILING_ANNOTATION.search(name, max(end - _ANNOTATION_MAX_LENGTH, 0), end)
        if match is None:
            break
        end = match.start()
        while end > 0 and name[end - 1].isspace():
            end -= 1
    return name[:end].strip()


def _extract_quantity(name: str) -> tuple[str, int | Decimal | None]:
    """
    Parse a quantity token from an item name.

    Returns:
        (name without the quantity token, quantity or None)
    """
    for pattern, is_measure in QUANTITY_PATTERNS:
        match = pattern.search(name)
        if not match:
            continue
        raw = match.group(1)
        quantity: int | Decimal = Decimal(raw.replace(",", ".")) if is_measure else int(raw)
        if quantity <= 0:
            # "0 x" cannot give a unit price; treat as no quantity
            continue
        stripped = (name[: match.start()] + " " + name[match.end() :]).strip()
        return re.sub(r"\s+", " ", stripped), quantity
    return name, None


def _parse_item_line(line: str) -> ParsedItem | None:
    """Turn one receipt line into an item, or None if it is not an item line."""
    if matches_any(TOTAL_KEYWORDS, line) or matches_any(TAX_KEYWORDS, line):
        return None
    if _is_noise_line(line):
        return None

    price = extract_price(line)
    if price is None or price.amount <= 0:
        return None

    name, quantity = _extract_quantity(_strip_price(line, price.start))
    if not name:
        return None

    unit_price = price.amount / quantity if quantity is not None else None
    return ParsedItem(
        name=name,
        line_total=price.amount,
        raw_text=line,
        quantity=quantity,
        unit_price=unit_price,
    )


def _extract_items(lines: list[str]) -> list[ParsedItem]:
    """
    Extract line items from receipt text lines.

    This is heuristic-based: every line that is not a summary, tax or
    boilerplate line and ends with a positive price becomes an item.
    Items keep source order and are never merged.
    """
    items: list[ParsedItem] = []
    for line in lines:
        item = _parse_item_line(line)
        if item is not None:
            items.append(item)
    return items
