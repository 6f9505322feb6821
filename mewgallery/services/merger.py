"""
Merge records from several sheets into one gallery collection.

Every sheet feeds exactly one category. Sheet membership is authoritative:
the category flag of the sheet is forced to True even when the row's own
flag column says otherwise.

There is no de-duplication. The same card listed on two sheets appears
twice, once per category, with two different ids.
"""

from collections.abc import Iterable
from dataclasses import replace

from mewgallery.models.card import CardRecord, CategoryFlag
from mewgallery.parsers.records import slugify


def merged_id(category: CategoryFlag, card: CardRecord, index: int) -> str:
    """Deterministic id for a card at `index` within its sheet."""
    return slugify(
        category.id_prefix,
        card.name_en,
        card.set_name,
        card.number,
        str(card.year),
        str(index),
    )


def merge_sources(
    groups: Iterable[tuple[CategoryFlag, list[CardRecord]]],
) -> list[CardRecord]:
    """
    Concatenate sheet groups into one collection.

    Args:
        groups: (category, records) pairs in display order

    Returns:
        New list of records with unique ids and the sheet's flag set.
        Input records are left untouched.
    """
    merged: list[CardRecord] = []
    for category, cards in groups:
        for index, card in enumerate(cards):
            merged.append(
                replace(
                    card,
                    id=merged_id(category, card, index),
                    **{category.attribute: True},
                )
            )
    return merged
