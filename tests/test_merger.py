from mewgallery.models.card import CardRecord, CategoryFlag
from mewgallery.services.merger import merge_sources, merged_id


def _card(**overrides) -> CardRecord:
    fields = {
        "id": "raw-id",
        "name_en": "Mew",
        "number": "151",
        "set_name": "Pokemon Card 151",
        "year": 2023,
    }
    fields.update(overrides)
    return CardRecord(**fields)


class TestMergedId:
    def test_slug_parts(self) -> None:
        card = _card()

        assert merged_id(CategoryFlag.CAMEO, card, 2) == "cameo-mew-pokemon-card-151-151-2023-2"


class TestMergeSources:
    def test_ids_rewritten(self) -> None:
        merged = merge_sources([(CategoryFlag.MEW, [_card()])])

        assert merged[0].id == "mew-mew-pokemon-card-151-151-2023-0"

    def test_identical_cards_in_two_sheets_both_kept(self) -> None:
        """No de-duplication: one copy per sheet, each with its own id."""
        card = _card()

        merged = merge_sources([(CategoryFlag.MEW, [card]), (CategoryFlag.CAMEO, [card])])

        assert len(merged) == 2
        assert merged[0].id != merged[1].id
        assert merged[0].is_mew is True
        assert merged[1].is_cameo is True

    def test_identical_rows_in_one_sheet_get_distinct_ids(self) -> None:
        card = _card()

        merged = merge_sources([(CategoryFlag.INTL, [card, card, card])])

        assert len({c.id for c in merged}) == 3

    def test_sheet_membership_overrides_flag_column(self) -> None:
        """The sheet's flag wins over an explicit False from the row."""
        card = _card(is_mew=False, is_cameo=True)

        merged = merge_sources([(CategoryFlag.MEW, [card])])

        assert merged[0].is_mew is True
        assert merged[0].is_cameo is True

    def test_other_flags_untouched(self) -> None:
        merged = merge_sources([(CategoryFlag.INTL, [_card()])])

        assert merged[0].is_intl is True
        assert merged[0].is_mew is None
        assert merged[0].is_cameo is None

    def test_order_preserved(self) -> None:
        groups = [
            (CategoryFlag.CAMEO, [_card(name_en="Lugia"), _card(name_en="Celebi")]),
            (CategoryFlag.MEW, [_card(name_en="Mew")]),
        ]

        merged = merge_sources(groups)

        assert [c.name_en for c in merged] == ["Lugia", "Celebi", "Mew"]

    def test_inputs_not_mutated(self) -> None:
        card = _card()

        merge_sources([(CategoryFlag.MEW, [card])])

        assert card.id == "raw-id"
        assert card.is_mew is None

    def test_empty(self) -> None:
        assert merge_sources([]) == []
        assert merge_sources([(CategoryFlag.MEW, [])]) == []

    def test_ids_unique_across_sheets(self) -> None:
        cards = [_card(name_en=f"Mew {i % 3}") for i in range(9)]

        merged = merge_sources(
            [
                (CategoryFlag.MEW, cards),
                (CategoryFlag.CAMEO, cards),
                (CategoryFlag.INTL, cards),
            ]
        )

        assert len({c.id for c in merged}) == 27
