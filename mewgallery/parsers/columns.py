"""
Header resolution for gallery sheets.

Sheet headers are maintained by hand and drift over time, so every field
accepts a primary header plus fallback aliases. Matching is case-insensitive
on the whole header text; the first name in the list that matches wins.
"""

from dataclasses import dataclass
from types import MappingProxyType

from mewgallery.parsers.delimited import strip_bom

# Canonical field -> accepted headers, primary first
COLUMN_ALIASES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "id": ("id", "card_id"),
        "name_en": ("name en", "name"),
        "name_jp": ("name jp", "name_jp"),
        "notes_en": ("notes en", "notes"),
        "notes_jp": ("notes jp", "notes_jp"),
        "origin_en": ("origin en", "origin"),
        "origin_jp": ("origin jp", "origin_jp"),
        "number": ("number", "no", "card no", "card #"),
        "set_name": ("set", "set name", "series"),
        "year": ("year",),
        "release": ("release", "release date", "released"),
        "rarity": ("rarity",),
        "types": ("types",),
        "language": ("language", "lang"),
        "image": (
            "image front",
            "image",
            "image_front",
            "image url",
            "image_url",
            "img",
            "image link",
        ),
        "image_back": ("image back", "image_back"),
        "illustrator": ("illustrator", "artist"),
        "era": ("era",),
        "is_mew": ("ismew",),
        "is_cameo": ("iscameo",),
        "is_intl": ("isintl", "isintrl", "international"),
        "edition": ("edition",),
        "psa8": ("psa8",),
        "psa9": ("psa9",),
        "psa10": ("psa10",),
        "bgs_black_label": ("bgsbl", "bgs bl", "bgs_black_label"),
        "grade": ("grade", "grade code", "psa grade"),
    }
)


@dataclass(frozen=True)
class ColumnIndex:
    """Resolved column position for each canonical field."""

    positions: MappingProxyType[str, int | None]

    def position(self, field_name: str) -> int | None:
        """Column index for a field, or None if the sheet lacks it."""
        return self.positions.get(field_name)

    def cell(self, row: list[str], field_name: str) -> str:
        """
        Read a field from a data row.

        Returns empty string for unresolved fields and for rows too short
        to reach the column.
        """
        pos = self.positions.get(field_name)
        if pos is None or pos >= len(row):
            return ""
        return row[pos]

    def resolved(self) -> list[str]:
        """Canonical fields found in the header, in alias-table order."""
        return [name for name, pos in self.positions.items() if pos is not None]


def find_column(headers: list[str], names: tuple[str, ...]) -> int | None:
    """
    Locate the first header matching any of `names`, tried in order.

    Args:
        headers: Lower-cased, trimmed header cells
        names: Primary header followed by aliases

    Returns:
        Column index, or None when nothing matches.
    """
    for name in names:
        target = name.lower()
        if target in headers:
            return headers.index(target)
    return None


def resolve_columns(header_row: list[str]) -> ColumnIndex:
    """
    Resolve the header row of one sheet.

    Called once per sheet; every data row of that sheet shares the result.
    """
    headers = [strip_bom(h).strip().lower() for h in header_row]
    positions = {
        field_name: find_column(headers, names) for field_name, names in COLUMN_ALIASES.items()
    }
    return ColumnIndex(positions=MappingProxyType(positions))
