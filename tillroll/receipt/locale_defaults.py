"""Caller-side defaults derived from the client's locale hint.

The parser itself never takes a locale; callers that know one may fill in
fields the text did not reveal.
"""

from dataclasses import replace

from tillroll.domain.receipt import ParsedReceipt

# Currency assumed when the text names none, keyed by locale language
LOCALE_DEFAULT_CURRENCIES = {
    "tr": "TRY",
    "fi": "EUR",
}


def default_currency_for_locale(locale: str) -> str | None:
    """Return the fallback currency for a locale like "fi-FI" (None if unknown)."""
    language = locale.replace("_", "-").split("-", 1)[0].strip().lower()
    return LOCALE_DEFAULT_CURRENCIES.get(language)


def apply_locale_defaults(receipt: ParsedReceipt, locale: str) -> ParsedReceipt:
    """
    Return a receipt with a missing currency filled from the locale.

    Detected currencies are kept, and a blank-text receipt (confidence 0)
    is returned unchanged.
    """
    if receipt.currency is not None or receipt.confidence == 0:
        return receipt
    currency = default_currency_for_locale(locale)
    if currency is None:
        return receipt
    return replace(receipt, currency=currency)
