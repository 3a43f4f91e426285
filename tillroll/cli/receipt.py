"""Receipt command handlers used by the unified CLI."""

import argparse
import json
import sys
from pathlib import Path

from tillroll.runtime import get_logger

logger = get_logger(__name__)


def _read_input_text(source: str | None) -> str:
    """Read OCR text from a file path, or from stdin for None / "-"."""
    if source is None or source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def cmd_parse(args: argparse.Namespace) -> None:
    """Parse OCR receipt text and print the structured result."""
    from tillroll.receipt.formatter import format_receipt_summary, receipt_to_dict
    from tillroll.receipt.locale_defaults import apply_locale_defaults
    from tillroll.receipt.merchant_categories import guess_item_categories
    from tillroll.receipt.ocr_result_parser import parse_receipt_text
    from tillroll.runtime import load_category_rule_layers

    if args.file not in (None, "-") and not Path(args.file).is_file():
        logger.error("Input file not found: %s", args.file)
        print(f"Error: File not found: {args.file}")
        sys.exit(1)

    receipt = parse_receipt_text(_read_input_text(args.file))
    if args.locale:
        receipt = apply_locale_defaults(receipt, args.locale)
    item_categories = guess_item_categories(receipt, load_category_rule_layers())

    if args.json:
        payload = {
            "parsedReceipt": receipt_to_dict(receipt),
            "itemCategories": item_categories,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    for line in format_receipt_summary(receipt, item_categories):
        print(line)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the FastAPI server for parsing receipt text."""
    import uvicorn

    from tillroll.runtime import receipt_server as server

    print(f"Starting receipt text server on {args.host}:{args.port}")
    print(f"Parse endpoint: http://{args.host}:{args.port}/api/receipt/parse-text")
    print("Press Ctrl+C to stop")

    uvicorn.run(server.app, host=args.host, port=args.port)
