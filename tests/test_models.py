import pytest

from mewgallery.config import Settings, configured_sources
from mewgallery.models.card import CardRecord, CategoryFlag, Population
from mewgallery.models.gallery import GalleryFilter, GalleryLoad, GalleryStatus


class TestCardRecord:
    def test_immutable(self) -> None:
        card = CardRecord(id="a", name_en="Mew")
        with pytest.raises(AttributeError):
            card.name_en = "Mewtwo"  # type: ignore[misc]

    def test_has_category(self) -> None:
        card = CardRecord(id="a", name_en="Mew", is_mew=True, is_cameo=False)

        assert card.has_category(CategoryFlag.MEW) is True
        assert card.has_category(CategoryFlag.CAMEO) is False
        assert card.has_category(CategoryFlag.INTL) is False

    def test_display_name(self) -> None:
        card = CardRecord(id="a", name_en="Mew", name_jp="ミュウ")

        assert card.display_name("JP") == "ミュウ"
        assert card.display_name("EN") == "Mew"

    def test_display_notes_fallback(self) -> None:
        card = CardRecord(id="a", name_en="Mew", notes_jp="ノート")

        assert card.display_notes("EN") == "ノート"
        assert card.display_origin("EN") is None


class TestCategoryFlag:
    def test_attributes_exist_on_record(self) -> None:
        card = CardRecord(id="a", name_en="Mew")
        for flag in CategoryFlag:
            assert getattr(card, flag.attribute) is None

    def test_prefixes(self) -> None:
        assert [flag.id_prefix for flag in CategoryFlag] == ["mew", "cameo", "intl"]


class TestPopulation:
    def test_empty_has_no_data(self) -> None:
        assert Population().has_data() is False

    def test_bgs_zero_is_data(self) -> None:
        assert Population(bgs_black_label=0).has_data() is True


class TestGalleryFilter:
    def test_defaults_enable_everything(self) -> None:
        assert GalleryFilter().enabled_categories() == list(CategoryFlag)

    def test_disabled(self) -> None:
        assert GalleryFilter(mew=False, cameo=False, intl=False).enabled_categories() == []


class TestGalleryLoad:
    def test_find(self) -> None:
        load = GalleryLoad(cards=[CardRecord(id="a", name_en="Mew")])

        assert load.find("a") is not None
        assert load.find("b") is None

    def test_immutable(self) -> None:
        load = GalleryLoad()
        with pytest.raises(AttributeError):
            load.status = GalleryStatus.LOADED  # type: ignore[misc]


class TestSettings:
    def test_configured_sources(self) -> None:
        config = Settings(mew_sheet="JP", cameo_sheet="Cameos", intl_sheet="World")

        sources = configured_sources(config)

        assert [(s.name, s.category) for s in sources] == [
            ("JP", CategoryFlag.MEW),
            ("Cameos", CategoryFlag.CAMEO),
            ("World", CategoryFlag.INTL),
        ]
