"""
Gallery search service.

Filters and sorts the merged collection for display. Every function here is
a pure function of its arguments, so it is safe to re-run on each keystroke.

Supports:
- Free-text search across names, number, set, rarity, notes and origins
- Category toggles (Mew, Cameo, International), ORed together
- Release, year, name and rarity orderings
"""

import math
import unicodedata
from collections.abc import Iterable

from mewgallery.models.card import IMAGE_PLACEHOLDER, CardRecord
from mewgallery.models.gallery import GalleryFilter, SortKey
from mewgallery.parsers.records import release_timestamp


def _searchable_fields(card: CardRecord) -> list[str | None]:
    return [
        card.name_en,
        card.name_jp,
        card.number,
        card.set_name,
        card.rarity,
        card.notes_en,
        card.notes_jp,
        card.origin_en,
        card.origin_jp,
    ]


def matches_query(card: CardRecord, query: str) -> bool:
    """
    Case-insensitive substring match on any searchable field.

    A blank query matches every card.
    """
    term = query.strip().lower()
    if not term:
        return True
    return any(term in value.lower() for value in _searchable_fields(card) if value)


def matches_categories(card: CardRecord, gallery_filter: GalleryFilter) -> bool:
    """True if the card carries at least one enabled category flag."""
    return any(card.has_category(flag) for flag in gallery_filter.enabled_categories())


def collation_key(value: str | None) -> str:
    """Case- and accent-insensitive key for text ordering."""
    return unicodedata.normalize("NFKD", value or "").casefold()


def _release_key(card: CardRecord, descending: bool) -> tuple[bool, float]:
    # Unknown release dates stay last in both directions
    ts = release_timestamp(card)
    if math.isinf(ts):
        return (True, 0.0)
    return (False, -ts if descending else ts)


def sort_cards(cards: list[CardRecord], sort_by: SortKey | str) -> list[CardRecord]:
    """
    Return a sorted copy of `cards`.

    Sorting is stable. Unrecognized keys fall back to year descending.
    """
    try:
        key = SortKey(sort_by)
    except ValueError:
        key = SortKey.YEAR_DESC

    if key is SortKey.RELEASE_ASC:
        return sorted(cards, key=lambda c: _release_key(c, descending=False))
    if key is SortKey.RELEASE_DESC:
        return sorted(cards, key=lambda c: _release_key(c, descending=True))
    if key is SortKey.YEAR_ASC:
        return sorted(cards, key=lambda c: c.year)
    if key is SortKey.NAME:
        return sorted(cards, key=lambda c: collation_key(c.name_en))
    if key is SortKey.RARITY:
        return sorted(cards, key=lambda c: collation_key(c.rarity))
    return sorted(cards, key=lambda c: -c.year)


def apply_filters(cards: list[CardRecord], gallery_filter: GalleryFilter) -> list[CardRecord]:
    """
    Filter and sort the gallery.

    Args:
        cards: Merged collection
        gallery_filter: Current search text, toggles and sort key

    Returns:
        New list of matching cards in display order. Empty when every
        category toggle is off, whatever the query.
    """
    if not gallery_filter.enabled_categories():
        return []

    items = [
        card
        for card in cards
        if matches_query(card, gallery_filter.query) and matches_categories(card, gallery_filter)
    ]
    return sort_cards(items, gallery_filter.sort_by)


def collect_image_urls(cards: Iterable[CardRecord]) -> list[str]:
    """
    Front and back image URLs to preload, in card order.

    The placeholder is skipped and each URL appears once.
    """
    urls: list[str] = []
    seen: set[str] = set()
    for card in cards:
        for url in (card.image, card.image_back):
            if not url or url == IMAGE_PLACEHOLDER or url in seen:
                continue
            seen.add(url)
            urls.append(url)
    return urls
