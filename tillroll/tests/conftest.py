"""Shared pytest fixtures for tillroll tests.

Receipt texts are synthetic and free of real-world data.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from tillroll.runtime import load_category_rule_layers, reset_paths

TURKISH_RECEIPT = """\
MİGROS TİCARET A.Ş.
Atatürk Cad. No:12 Kadıköy
Tel: 0216 555 12 34
TARIH: 01.03.2024 SAAT: 14:32
FİŞ NO: 0042
2 x Ekmek 10,00
Süt 1 L *25,50
0,512 kg Domates 15,36
KDV %8 3,76
TOPLAM *50,86
NAKIT *50,86
Teşekkür ederiz
"""

FINNISH_RECEIPT = """\
K-Market Kamppi
Urho Kekkosen katu 1
Y-tunnus 1234567-8
MAITO 1,29 A
RUISLEIPÄ 2,49 A
3 kpl BANAANI 1,05 A
YHTEENSÄ 4,83 EUR
ALV 14% 0,59
PANKKIKORTTI 4,83
KIITOS KÄYNNISTÄ
15.03.2024 16:05
"""

ENGLISH_RECEIPT = """\
CORNER GROCERY
123 Main Street
Phone: (555) 123-4567
2024-03-01 10:15
Coffee Beans 12.50 $
Milk x2 4.00
Subtotal 16.50
Tax 1.32
TOTAL 17.82
VISA 17.82
Thank you!
"""


@pytest.fixture
def turkish_receipt_text() -> str:
    return TURKISH_RECEIPT


@pytest.fixture
def finnish_receipt_text() -> str:
    return FINNISH_RECEIPT


@pytest.fixture
def english_receipt_text() -> str:
    return ENGLISH_RECEIPT


@pytest.fixture
def project_root(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[Path]:
    """Point the project root at tmp_path and drop cached rules around the test."""
    monkeypatch.setenv("TILLROLL_ROOT", str(tmp_path))
    reset_paths()
    load_category_rule_layers.cache_clear()
    yield tmp_path
    reset_paths()
    load_category_rule_layers.cache_clear()
