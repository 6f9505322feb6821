from dataclasses import dataclass, field
from enum import Enum

from mewgallery.models.card import CardRecord, CategoryFlag


class SortKey(str, Enum):
    """Orderings offered by the gallery."""

    RELEASE_ASC = "releaseAsc"
    RELEASE_DESC = "releaseDesc"
    YEAR_DESC = "yearDesc"
    YEAR_ASC = "yearAsc"
    NAME = "name"
    RARITY = "rarity"


class GalleryStatus(str, Enum):
    """
    Collection-level state shown by the presentation layer.

    FALLBACK means every sheet failed (or none is configured), which must
    render differently from LOADING.
    """

    LOADING = "loading"
    LOADED = "loaded"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class GalleryFilter:
    """
    User-controlled filter state.

    Attributes:
        query: Free-text search term
        mew: Include cards flagged isMew
        cameo: Include cards flagged isCameo
        intl: Include cards flagged isIntl
        sort_by: SortKey or raw key string; unknown keys sort by year descending
    """

    query: str = ""
    mew: bool = True
    cameo: bool = True
    intl: bool = True
    sort_by: SortKey | str = SortKey.YEAR_DESC

    def enabled_categories(self) -> list[CategoryFlag]:
        toggles = {
            CategoryFlag.MEW: self.mew,
            CategoryFlag.CAMEO: self.cameo,
            CategoryFlag.INTL: self.intl,
        }
        return [flag for flag, enabled in toggles.items() if enabled]


@dataclass(frozen=True, slots=True)
class SheetSource:
    """A named sheet and the category its rows belong to."""

    name: str
    category: CategoryFlag


@dataclass(frozen=True, slots=True)
class GalleryLoad:
    """Result of one fetch cycle across all sheets."""

    cards: list[CardRecord] = field(default_factory=list)
    status: GalleryStatus = GalleryStatus.LOADING
    failed_sources: list[str] = field(default_factory=list)

    def find(self, card_id: str) -> CardRecord | None:
        """Look up a card by its merged id."""
        for card in self.cards:
            if card.id == card_id:
                return card
        return None
