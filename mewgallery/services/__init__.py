"""
MewGallery services.

Merging, searching and loading of the card gallery.
"""

from mewgallery.services.gallery_cache import GalleryCache, get_gallery_cache
from mewgallery.services.gallery_search import (
    apply_filters,
    collect_image_urls,
    matches_query,
    sort_cards,
)
from mewgallery.services.merger import merge_sources
from mewgallery.services.sheet_loader import (
    SheetFetchError,
    build_gallery,
    fetch_sheet,
    load_gallery,
    sheet_csv_url,
)

__all__ = [
    "GalleryCache",
    "SheetFetchError",
    "apply_filters",
    "build_gallery",
    "collect_image_urls",
    "fetch_sheet",
    "get_gallery_cache",
    "load_gallery",
    "matches_query",
    "merge_sources",
    "sheet_csv_url",
    "sort_cards",
]
