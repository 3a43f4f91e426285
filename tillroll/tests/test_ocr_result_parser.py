"""End-to-end tests for parse_receipt_text."""

import time
from decimal import Decimal

import pytest
from tillroll import ParsedReceipt, parse_receipt_text
from tillroll.domain.receipt import ParsedItem
from tillroll.receipt.ocr_parser.scoring import _check_total_consistency, _score_confidence
from tillroll.receipt.ocr_result_parser import NO_TEXT_WARNING


def test_turkish_receipt(turkish_receipt_text: str) -> None:
    receipt = parse_receipt_text(turkish_receipt_text)

    assert receipt.merchant_name == "MİGROS TİCARET A.Ş."
    assert receipt.receipt_date == "2024-03-01"
    assert receipt.currency is None
    assert receipt.total == Decimal("50.86")
    assert receipt.tax_total == Decimal("3.76")
    assert [item.name for item in receipt.items] == ["Ekmek", "Süt 1 L", "Domates"]
    assert [item.line_total for item in receipt.items] == [
        Decimal("10.00"),
        Decimal("25.50"),
        Decimal("15.36"),
    ]

    bread, milk, tomatoes = receipt.items
    assert bread.quantity == 2 and bread.unit_price == Decimal("5.00")
    assert milk.quantity is None and milk.unit_price is None
    assert tomatoes.quantity == Decimal("0.512") and tomatoes.unit_price == Decimal("30")
    assert receipt.items_sum == receipt.total

    assert receipt.warnings == ()
    assert receipt.confidence == 1.0


def test_finnish_receipt(finnish_receipt_text: str) -> None:
    receipt = parse_receipt_text(finnish_receipt_text)

    assert receipt.merchant_name == "K-Market Kamppi"
    assert receipt.receipt_date == "2024-03-15"
    assert receipt.currency == "EUR"
    assert receipt.total == Decimal("4.83")
    assert receipt.tax_total == Decimal("0.59")
    assert [(item.name, item.line_total) for item in receipt.items] == [
        ("MAITO", Decimal("1.29")),
        ("RUISLEIPÄ", Decimal("2.49")),
        ("BANAANI", Decimal("1.05")),
    ]
    assert receipt.items[2].quantity == 3
    assert receipt.items[2].unit_price == Decimal("0.35")
    assert receipt.warnings == ()
    assert receipt.confidence == 1.0


def test_english_receipt_reports_total_mismatch(english_receipt_text: str) -> None:
    receipt = parse_receipt_text(english_receipt_text)

    assert receipt.merchant_name == "CORNER GROCERY"
    assert receipt.receipt_date == "2024-03-01"
    assert receipt.currency == "USD"
    assert receipt.total == Decimal("17.82")
    assert receipt.tax_total == Decimal("1.32")
    assert [(item.name, item.quantity) for item in receipt.items] == [
        ("Coffee Beans", None),
        ("Milk", 2),
    ]
    assert receipt.warnings == ("Sum of items (16.50) does not match receipt total (17.82)",)
    assert receipt.confidence == 0.9


@pytest.mark.parametrize("text", ["", "   ", "\n\n\t\n", "\r\n"])
def test_blank_text_gives_degenerate_receipt(text: str) -> None:
    receipt = parse_receipt_text(text)

    assert receipt == ParsedReceipt(confidence=0.0, warnings=(NO_TEXT_WARNING,))
    assert receipt.items == ()
    assert receipt.total is None


def test_parse_is_idempotent(turkish_receipt_text: str) -> None:
    assert parse_receipt_text(turkish_receipt_text) == parse_receipt_text(turkish_receipt_text)


@pytest.mark.parametrize(
    "text",
    [
        "x",
        "€€€ ₺₺ $$",
        "99.99.9999\n00-00-00",
        "TOPLAM\nKDV\nNAKIT",
        "*,*,* 1.2.3.4,5",
        "İ" * 500,
        "1" * 2000,
        "\x00\x01 12,50",
    ],
)
def test_garbage_input_never_raises(text: str) -> None:
    receipt = parse_receipt_text(text)

    assert isinstance(receipt, ParsedReceipt)
    assert 0.5 <= receipt.confidence <= 1.0


def test_long_digit_run_before_multiplier_is_not_a_quantity() -> None:
    receipt = parse_receipt_text("SHOP\n" + "1" * 5000 + " x Ekmek 10,00")

    assert len(receipt.items) == 1
    assert receipt.items[0].quantity is None
    assert receipt.items[0].line_total == Decimal("10.00")


@pytest.mark.parametrize(
    ("text", "line_total"),
    [
        ("SHOP\nA" + " " * 8000 + "B 10,00", Decimal("10.00")),
        ("SHOP\n" + "A" * 8000 + " 10,00", Decimal("10.00")),
        ("SHOP\nEkmek " + "* " * 4000 + "10,00", Decimal("10.00")),
        ("SHOP\nCola" + " " * 8000 + "x 2 9,00", Decimal("9.00")),
    ],
)
def test_long_lines_parse_in_linear_time(text: str, line_total: Decimal) -> None:
    started = time.perf_counter()
    receipt = parse_receipt_text(text)
    elapsed = time.perf_counter() - started

    assert elapsed < 1.0
    assert [item.line_total for item in receipt.items] == [line_total]


def test_total_without_items_scores_but_does_not_warn() -> None:
    receipt = parse_receipt_text("12.01.2024\nTOPLAM 45,50")

    # Skip keywords do not apply to the header, so the total line doubles as merchant
    assert receipt.merchant_name == "TOPLAM 45,50"
    assert receipt.total == Decimal("45.50")
    assert receipt.items == ()
    assert receipt.warnings == ()
    assert receipt.confidence == 0.8


def test_mismatch_beyond_tolerance_warns() -> None:
    receipt = parse_receipt_text("Ekmek 40,00\nTOPLAM 45,50")

    assert receipt.warnings == ("Sum of items (40.00) does not match receipt total (45.50)",)


def test_mismatch_within_tolerance_does_not_warn() -> None:
    receipt = parse_receipt_text("Ekmek 45,60\nTOPLAM 45,50")

    assert receipt.warnings == ()


def _item(line_total: str) -> ParsedItem:
    return ParsedItem(name="item", line_total=Decimal(line_total), raw_text=f"item {line_total}")


def test_check_total_consistency_boundary() -> None:
    assert _check_total_consistency(Decimal("10.50"), [_item("10.00")]) == []
    assert _check_total_consistency(Decimal("10.51"), [_item("10.00")]) != []
    assert _check_total_consistency(None, [_item("10.00")]) == []
    assert _check_total_consistency(Decimal("10.00"), []) == []


@pytest.mark.parametrize(
    ("kwargs", "expected"),
    [
        ({"merchant_name": None, "receipt_date": None, "total": None, "items": [], "warnings": []}, 0.5),
        ({"merchant_name": "A", "receipt_date": None, "total": None, "items": [], "warnings": []}, 0.6),
        (
            {
                "merchant_name": "A",
                "receipt_date": "2024-01-01",
                "total": Decimal("1"),
                "items": [_item("1.00")],
                "warnings": [],
            },
            1.0,
        ),
        (
            {
                "merchant_name": "A",
                "receipt_date": "2024-01-01",
                "total": Decimal("5"),
                "items": [_item("1.00")],
                "warnings": ["mismatch"],
            },
            0.9,
        ),
    ],
)
def test_score_confidence(kwargs: dict, expected: float) -> None:
    assert _score_confidence(**kwargs) == expected
