from dataclasses import dataclass, field
from enum import Enum
from typing import Literal

Language = Literal["EN", "JP"]

# Inline SVG shown wherever artwork is missing or fails to load
IMAGE_PLACEHOLDER = (
    "data:image/svg+xml;utf8,"
    "<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 300 420'>"
    "<rect width='100%' height='100%' fill='%23121212'/>"
    "<text x='50%' y='50%' dominant-baseline='middle' text-anchor='middle' "
    "fill='%23666' font-family='sans-serif' font-size='14'>Image unavailable</text>"
    "</svg>"
)


class Edition(str, Enum):
    """Print run of a card. Only two runs are tracked."""

    FIRST = "1st"
    UNLIMITED = "Unlim"


class CategoryFlag(str, Enum):
    """
    Gallery category a sheet feeds.

    The value is the flag name used in sheet columns and API payloads.
    """

    MEW = "isMew"
    CAMEO = "isCameo"
    INTL = "isIntl"

    @property
    def attribute(self) -> str:
        """Name of the matching CardRecord attribute."""
        return _FLAG_ATTRIBUTES[self]

    @property
    def id_prefix(self) -> str:
        """Prefix used when the merger rebuilds card ids."""
        return _FLAG_PREFIXES[self]


_FLAG_ATTRIBUTES = {
    CategoryFlag.MEW: "is_mew",
    CategoryFlag.CAMEO: "is_cameo",
    CategoryFlag.INTL: "is_intl",
}

_FLAG_PREFIXES = {
    CategoryFlag.MEW: "mew",
    CategoryFlag.CAMEO: "cameo",
    CategoryFlag.INTL: "intl",
}


@dataclass(frozen=True, slots=True)
class Population:
    """
    Graded population counts for a card.

    Attributes:
        psa8: Number of PSA 8 copies
        psa9: Number of PSA 9 copies
        psa10: Number of PSA 10 copies
        bgs_black_label: BGS Black Label count, None when the sheet has no value
    """

    psa8: int = 0
    psa9: int = 0
    psa10: int = 0
    bgs_black_label: int | None = None

    def has_data(self) -> bool:
        """An all-zero population means "no data", not "confirmed zero"."""
        return bool(self.psa8 or self.psa9 or self.psa10) or self.bgs_black_label is not None


@dataclass(frozen=True, slots=True)
class CardRecord:
    """
    One normalized trading-card entry.

    Optional text fields are None when the sheet did not provide them.
    Category flags are None when unspecified, which is distinct from False.
    """

    id: str
    name_en: str
    image: str = IMAGE_PLACEHOLDER
    name_jp: str | None = None
    number: str = ""
    set_name: str = ""
    year: int = 0
    rarity: str | None = None
    types: tuple[str, ...] = field(default_factory=tuple)
    language: str | None = None
    edition: Edition | None = None
    image_back: str | None = None
    notes_en: str | None = None
    notes_jp: str | None = None
    origin_en: str | None = None
    origin_jp: str | None = None
    illustrator: str | None = None
    era: str | None = None
    release: str | None = None
    population: Population | None = None
    is_mew: bool | None = None
    is_cameo: bool | None = None
    is_intl: bool | None = None
    grade: str | None = None

    def has_category(self, flag: CategoryFlag) -> bool:
        return getattr(self, flag.attribute) is True

    def display_name(self, language: Language = "EN") -> str:
        if language == "JP" and self.name_jp:
            return self.name_jp
        return self.name_en

    def display_notes(self, language: Language = "EN") -> str | None:
        return _pick_language(self.notes_en, self.notes_jp, language)

    def display_origin(self, language: Language = "EN") -> str | None:
        return _pick_language(self.origin_en, self.origin_jp, language)


def _pick_language(en: str | None, jp: str | None, language: Language) -> str | None:
    """Prefer the requested language, fall back to the other one."""
    if language == "JP":
        return jp or en
    return en or jp
