from pathlib import Path

import pytest

from mewgallery.models.card import CardRecord

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def japanese_sheet_csv() -> str:
    """Sample "Japanese" sheet export with a blank row and a nameless row."""
    return (FIXTURES / "japanese_sheet.csv").read_text(encoding="utf-8")


@pytest.fixture
def bilingual_sheet_csv() -> str:
    """Minimal sheet with every bilingual column."""
    return (
        "name en,name jp,notes en,notes jp,origin en,origin jp,image front,image back\n"
        "Card1,カード1,Note1,ノート1,USA,米国,https://a.png,https://b.png\n"
    )


@pytest.fixture
def gallery_cards() -> list[CardRecord]:
    """Small merged gallery across all three categories."""
    return [
        CardRecord(
            id="a",
            name_en="Mew EN",
            name_jp="ミュウ",
            number="001",
            set_name="Test",
            year=2000,
            image="a.png",
            is_mew=True,
        ),
        CardRecord(
            id="b",
            name_en="Lugia Cameo",
            name_jp="ルギア",
            number="002",
            set_name="Test",
            year=2001,
            image="b.png",
            is_cameo=True,
        ),
        CardRecord(
            id="c",
            name_en="Mew Intl",
            number="003",
            set_name="Test",
            year=2002,
            image="c.png",
            is_mew=True,
            is_intl=True,
        ),
    ]
