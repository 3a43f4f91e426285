"""FastAPI server that turns OCR receipt text into structured receipts.

Image upload and the OCR call itself happen upstream; this server receives
the recognized text.
"""

import os

from fastapi import FastAPI
from pydantic import BaseModel

from tillroll.receipt.formatter import receipt_to_dict
from tillroll.receipt.locale_defaults import apply_locale_defaults
from tillroll.receipt.merchant_categories import guess_item_categories
from tillroll.receipt.ocr_result_parser import parse_receipt_text
from tillroll.runtime.category_rules import load_category_rule_layers
from tillroll.runtime.logging import get_logger

logger = get_logger(__name__)

DEFAULT_LOCALE = os.environ.get("TILLROLL_DEFAULT_LOCALE", "tr-TR")


class ParseTextRequest(BaseModel):
    text: str
    locale: str | None = None


app = FastAPI(title="Receipt Text Parser")


@app.post("/api/receipt/parse-text")
def parse_text(request: ParseTextRequest) -> dict:
    """Parse OCR text and return the receipt plus a category guess per item."""
    locale = request.locale or DEFAULT_LOCALE
    receipt = apply_locale_defaults(parse_receipt_text(request.text), locale)
    item_categories = guess_item_categories(receipt, load_category_rule_layers())

    logger.info(
        "Parsed receipt: locale=%s items=%d confidence=%.1f warnings=%d",
        locale,
        len(receipt.items),
        receipt.confidence,
        len(receipt.warnings),
    )
    return {
        "parsedReceipt": receipt_to_dict(receipt),
        "itemCategories": item_categories,
    }


@app.get("/health")
def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
