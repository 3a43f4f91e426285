"""Tests for the receipt text parsing HTTP endpoint."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from tillroll.runtime import receipt_server


@pytest.fixture
def client(project_root: Path) -> TestClient:
    return TestClient(receipt_server.app)


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_parse_text_returns_receipt_and_categories(client: TestClient, turkish_receipt_text: str) -> None:
    response = client.post("/api/receipt/parse-text", json={"text": turkish_receipt_text, "locale": "tr-TR"})

    assert response.status_code == 200
    body = response.json()
    receipt = body["parsedReceipt"]
    assert receipt["merchantName"] == "MİGROS TİCARET A.Ş."
    assert receipt["receiptDate"] == "2024-03-01"
    assert receipt["currency"] == "TRY"
    assert receipt["total"] == 50.86
    assert receipt["taxTotal"] == 3.76
    assert receipt["confidence"] == 1.0
    assert receipt["warnings"] == []
    assert receipt["items"][0] == {
        "name": "Ekmek",
        "quantity": 2,
        "unitPrice": 5.0,
        "lineTotal": 10.0,
        "rawText": "2 x Ekmek 10,00",
    }
    assert receipt["items"][2]["quantity"] == 0.512
    assert body["itemCategories"] == ["market", "market", "market"]


def test_locale_fills_missing_currency_only(
    client: TestClient, turkish_receipt_text: str, english_receipt_text: str
) -> None:
    finnish = client.post("/api/receipt/parse-text", json={"text": turkish_receipt_text, "locale": "fi-FI"})
    english = client.post("/api/receipt/parse-text", json={"text": english_receipt_text, "locale": "tr-TR"})

    assert finnish.json()["parsedReceipt"]["currency"] == "EUR"
    assert english.json()["parsedReceipt"]["currency"] == "USD"


def test_unknown_locale_leaves_currency_empty(client: TestClient, turkish_receipt_text: str) -> None:
    response = client.post("/api/receipt/parse-text", json={"text": turkish_receipt_text, "locale": "de-DE"})

    assert response.json()["parsedReceipt"]["currency"] is None


def test_blank_text_gives_degenerate_receipt(client: TestClient) -> None:
    response = client.post("/api/receipt/parse-text", json={"text": "  \n "})

    assert response.status_code == 200
    body = response.json()
    assert body["parsedReceipt"]["confidence"] == 0.0
    assert body["parsedReceipt"]["currency"] is None
    assert body["parsedReceipt"]["warnings"] == ["No text found on receipt"]
    assert body["itemCategories"] == []


def test_missing_text_is_rejected(client: TestClient) -> None:
    response = client.post("/api/receipt/parse-text", json={"locale": "tr-TR"})

    assert response.status_code == 422


def test_amount_beyond_float_range_is_null(client: TestClient) -> None:
    response = client.post("/api/receipt/parse-text", json={"text": "SHOP\nEkmek " + "9" * 400 + ",00"})

    assert response.status_code == 200
    items = response.json()["parsedReceipt"]["items"]
    assert len(items) == 1
    assert items[0]["lineTotal"] is None
