from mewgallery.models.card import (
    IMAGE_PLACEHOLDER,
    CardRecord,
    CategoryFlag,
    Edition,
    Language,
    Population,
)
from mewgallery.models.gallery import (
    GalleryFilter,
    GalleryLoad,
    GalleryStatus,
    SheetSource,
    SortKey,
)

__all__ = [
    "IMAGE_PLACEHOLDER",
    "CardRecord",
    "CategoryFlag",
    "Edition",
    "GalleryFilter",
    "GalleryLoad",
    "GalleryStatus",
    "Language",
    "Population",
    "SheetSource",
    "SortKey",
]
