"""Receipt OCR text parsing, formatting and categorization."""
