"""Composable OCR receipt text parser components."""

from .common import PriceMatch, extract_line_amount, extract_price, normalize_lines, parse_amount
from .fields_parser import (
    _detect_currency,
    _extract_date,
    _extract_merchant,
    _extract_tax,
    _extract_total,
)
from .items_text_parser import _extract_items
from .scoring import _check_total_consistency, _score_confidence

__all__ = [
    "PriceMatch",
    "_check_total_consistency",
    "_detect_currency",
    "_extract_date",
    "_extract_items",
    "_extract_merchant",
    "_extract_tax",
    "_extract_total",
    "_score_confidence",
    "extract_line_amount",
    "extract_price",
    "normalize_lines",
    "parse_amount",
]
