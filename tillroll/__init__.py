"""tillroll: structured data from OCR'd retail receipt text.

Usage:
    from tillroll import parse_receipt_text

    receipt = parse_receipt_text(ocr_text)
    print(receipt.merchant_name, receipt.total, len(receipt.items))
"""

from tillroll.domain.receipt import ParsedItem, ParsedReceipt
from tillroll.receipt.ocr_result_parser import parse_receipt_text

__all__ = [
    "ParsedItem",
    "ParsedReceipt",
    "parse_receipt_text",
]
