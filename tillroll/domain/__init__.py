"""Core domain models for tillroll.

- ParsedReceipt: structured result of parsing one receipt's OCR text
- ParsedItem: a single purchased line on that receipt

Usage:
    from tillroll.domain import ParsedItem, ParsedReceipt
"""

from tillroll.domain.receipt import ParsedItem, ParsedReceipt

__all__ = [
    "ParsedItem",
    "ParsedReceipt",
]
