"""Locale keyword tables shared by every receipt parsing stage.

All supported locales (Turkish, English, Finnish) are tested together, so a
mixed-language receipt still classifies correctly without a locale hint.
Tables are compiled once at import time and must never be mutated.
"""

import re

_CI = re.IGNORECASE

# Lines stating the payable amount (subtotal lines match too; callers take the max)
TOTAL_KEYWORDS: tuple[re.Pattern[str], ...] = (
    # Turkish
    re.compile(r"toplam", _CI),
    re.compile(r"genel\s*toplam", _CI),
    re.compile(r"g\.?\s*toplam", _CI),
    re.compile(r"nakit", _CI),
    re.compile(r"ödeme", _CI),
    re.compile(r"tutar", _CI),
    re.compile(r"yekun", _CI),
    # English
    re.compile(r"total", _CI),
    re.compile(r"grand\s*total", _CI),
    re.compile(r"amount\s+due", _CI),
    re.compile(r"\bcash\b", _CI),
    re.compile(r"\bpayment\b", _CI),
    # Finnish
    re.compile(r"yhteensä", _CI),
    re.compile(r"\bsumma\b", _CI),
    re.compile(r"maksettava", _CI),
    re.compile(r"käteinen", _CI),
    re.compile(r"\bmaksu\b", _CI),
)

TAX_KEYWORDS: tuple[re.Pattern[str], ...] = (
    re.compile(r"kdv", _CI),  # also TOPKDV
    re.compile(r"vergi", _CI),
    re.compile(r"\btax(?![a-z])", _CI),
    re.compile(r"\bvat\b", _CI),
    re.compile(r"\balv\b", _CI),
    re.compile(r"arvonlisävero", _CI),
)

# Receipt boilerplate that must never become an item (only applied to short lines)
SKIP_KEYWORDS: tuple[re.Pattern[str], ...] = (
    # Summary words
    re.compile(r"toplam", _CI),
    re.compile(r"total", _CI),
    re.compile(r"kdv", _CI),
    re.compile(r"\btax(?![a-z])", _CI),
    re.compile(r"vergi", _CI),
    re.compile(r"nakit", _CI),
    re.compile(r"ödeme", _CI),
    re.compile(r"tutar", _CI),
    re.compile(r"yekun", _CI),
    # Receipt metadata
    re.compile(r"fiş\s*no", _CI),
    re.compile(r"receipt\s*(?:no|#)", _CI),
    re.compile(r"kuitti", _CI),
    re.compile(r"\btarih", _CI),
    re.compile(r"\bsaat\b", _CI),
    re.compile(r"\bdate\b", _CI),
    re.compile(r"\btime\b", _CI),
    re.compile(r"\bklo\b", _CI),
    # Till and staff
    re.compile(r"\bkasa\b", _CI),
    re.compile(r"kassa", _CI),
    re.compile(r"kasiyer", _CI),
    re.compile(r"cashier", _CI),
    re.compile(r"myyjä", _CI),
    # Payment terminals and cards
    re.compile(r"eft\s*-?\s*pos", _CI),
    re.compile(r"\bpos\b", _CI),
    re.compile(r"terminal", _CI),
    re.compile(r"\bvisa\b", _CI),
    re.compile(r"mastercard", _CI),
    re.compile(r"\bamex\b", _CI),
    re.compile(r"maestro", _CI),
    re.compile(r"banka", _CI),
    re.compile(r"\bkart(?:ı|i)?\b", _CI),
    re.compile(r"\bcard\b", _CI),
    re.compile(r"kortti", _CI),
    re.compile(r"pankki", _CI),
    re.compile(r"\biade\b", _CI),
    re.compile(r"refund", _CI),
    re.compile(r"palautus", _CI),
    re.compile(r"\bchange\b", _CI),
    re.compile(r"para\s*üstü", _CI),
    re.compile(r"vaihtoraha", _CI),
    # Greetings
    re.compile(r"teşekkür", _CI),
    re.compile(r"iyi\s*günler", _CI),
    re.compile(r"hoş\s*geldiniz", _CI),
    re.compile(r"thank\s*you", _CI),
    re.compile(r"welcome", _CI),
    re.compile(r"kiitos", _CI),
    re.compile(r"tervetuloa", _CI),
)

# Tried in this order: DD.MM.YYYY, YYYY-MM-DD, DD.MM.YY
DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d{2})[/.\-](\d{2})[/.\-](\d{4})"),
    re.compile(r"(\d{4})-(\d{2})-(\d{2})"),
    re.compile(r"(\d{2})[/.\-](\d{2})[/.\-](\d{2})\b"),
)

# Two-digit years above this map to 19xx, the rest to 20xx
TWO_DIGIT_YEAR_PIVOT = 50

# Quantity tokens. Count units give an int quantity, measure units a Decimal one.
# Letter markers must not run into a word ("2XL"); symbol markers may ("3*Cola")
LETTER_MULTIPLIER_MARKERS = "xX"
SYMBOL_MULTIPLIER_MARKERS = "*×"
MULTIPLIER_MARKERS = LETTER_MULTIPLIER_MARKERS + SYMBOL_MULTIPLIER_MARKERS
COUNT_UNITS: tuple[str, ...] = ("adet", "ad", "kpl", "st", "pcs", "pc")
MEASURE_UNITS: tuple[str, ...] = ("kg", "lt", "l", "kpl", "pkt", "paket")

# Street-address words; Finnish street names end in -katu/-tie/-kuja
ADDRESS_PATTERN = re.compile(
    r"\b(?:sokak|sok\.|sk\.|cadde(?:si)?|cad\.|cd\.|mahallesi|mah\.|bulvar[ıi]?\b|blv\.|apt\b|no\s*:)"
    r"|\b\w*(?:katu|tie|kuja)\b"
    r"|\b(?:street|st\.|road|rd\.|avenue|ave\b)",
    _CI,
)

# Phone and tax-registration lines printed under the store name
MERCHANT_ID_PREFIX = re.compile(
    r"^(?:tel\b|telefon|phone|puh\b|fax\b|faks\b|v\.\s*d\.|vd\b|vergi\s*d|vkn\b|tckn\b|mersis|y-?tunnus|vat\s*(?:no|reg))",
    _CI,
)

# Currency tokens that may follow or precede a price
CURRENCY_TOKEN = r"(?:TL|₺|EUR|€|USD|\$|GBP|£)"

# Presence-based currency detection, first match wins.
# The lookbehind keeps "TL"/"EUR" from matching inside words while allowing "12,50TL".
CURRENCY_MARKERS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"₺|(?<![^\W\d_])TL\b", _CI), "TRY"),
    (re.compile(r"€|(?<![^\W\d_])EUR\b", _CI), "EUR"),
    (re.compile(r"£|(?<![^\W\d_])GBP\b", _CI), "GBP"),
    (re.compile(r"\$|(?<![^\W\d_])USD\b", _CI), "USD"),
)


def matches_any(patterns: tuple[re.Pattern[str], ...], text: str) -> bool:
    """Return True if any pattern is found in text."""
    return any(pattern.search(text) for pattern in patterns)
