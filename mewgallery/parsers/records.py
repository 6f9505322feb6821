"""
Record builder for gallery sheets.

Turns parsed rows into CardRecord objects. Nothing here raises on bad
data: unparsable values fall back to defaults and rows without any
name are skipped.
"""

import logging
import math
import re
from datetime import MAXYEAR, datetime, timezone

from mewgallery.models.card import IMAGE_PLACEHOLDER, CardRecord, Edition, Population
from mewgallery.parsers.columns import ColumnIndex, resolve_columns
from mewgallery.parsers.delimited import parse_rows

logger = logging.getLogger(__name__)

# "PSA 9", "PSA10" (input is upper-cased first)
GRADE_PATTERN = re.compile(r"^PSA ?(\d{1,2})$")

# Leading integer, as in "1999" or "1999 (reprint)"
LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d{1,9})")

# Population counts: plain digits only, no sign or "1_000"
COUNT_PATTERN = re.compile(r"^\s*(\d{1,9})\s*$")

SLUG_SEPARATOR_PATTERN = re.compile(r"[^a-z0-9]+")

EDITION_ALIASES = {
    "1st": Edition.FIRST,
    "1st edition": Edition.FIRST,
    "first": Edition.FIRST,
    "first edition": Edition.FIRST,
    "unlim": Edition.UNLIMITED,
    "unlimited": Edition.UNLIMITED,
}

# Written date forms seen in release columns, tried after ISO 8601
RELEASE_DATE_FORMATS = (
    "%Y/%m/%d",
    "%Y.%m.%d",
    "%m/%d/%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%b %d %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%B %Y",
    "%b %Y",
    "%Y-%m",
    "%Y",
)


def slugify(*parts: str | None) -> str:
    """
    Build a lowercase, dash-separated slug from the non-empty parts.

    >>> slugify("mew", "Mew ex", "151", "", "2023", "0")
    'mew-mew-ex-151-2023-0'
    """
    joined = " ".join(p for p in parts if p).strip().lower()
    slug = SLUG_SEPARATOR_PATTERN.sub("-", joined).strip("-")
    return slug or "row"


def parse_bool(value: str | None) -> bool | None:
    """
    Parse a flag cell.

    "true"/"1" -> True, "false"/"0" -> False (case-insensitive).
    Anything else is None, meaning "unspecified", not False.
    """
    if not value:
        return None
    normalized = value.strip().lower()
    if normalized in ("true", "1"):
        return True
    if normalized in ("false", "0"):
        return False
    return None


def parse_year(value: str | None) -> int:
    """Parse the leading integer of a year cell. 0 when there is none."""
    match = LEADING_INT_PATTERN.match(value or "")
    return int(match.group(1)) if match else 0


def parse_types(value: str | None) -> tuple[str, ...]:
    """Split a pipe-delimited types cell, dropping empty entries."""
    if not value:
        return ()
    return tuple(part.strip() for part in value.split("|") if part.strip())


def parse_edition(value: str | None) -> Edition | None:
    if not value:
        return None
    return EDITION_ALIASES.get(value.strip().lower())


def normalize_grade(value: str | None) -> str | None:
    """
    Normalize a grade code.

    Returns "RAW" or "PSA<N>" with N in 1-10. Anything else is None.

    >>> normalize_grade("psa 9")
    'PSA9'
    """
    if not value:
        return None
    code = value.strip().upper()
    if code == "RAW":
        return "RAW"
    match = GRADE_PATTERN.match(code)
    if match:
        grade = int(match.group(1))
        if 1 <= grade <= 10:
            return f"PSA{grade}"
    return None


def _parse_count(value: str) -> int:
    match = COUNT_PATTERN.match(value)
    return int(match.group(1)) if match else 0


def _parse_optional_count(value: str) -> int | None:
    match = COUNT_PATTERN.match(value)
    return int(match.group(1)) if match else None


def parse_population(columns: ColumnIndex, row: list[str]) -> Population | None:
    """
    Read graded population columns.

    Returns None when every PSA count is zero and no BGS value is given,
    so "no data" stays distinguishable from "confirmed zero".
    """
    population = Population(
        psa8=_parse_count(columns.cell(row, "psa8")),
        psa9=_parse_count(columns.cell(row, "psa9")),
        psa10=_parse_count(columns.cell(row, "psa10")),
        bgs_black_label=_parse_optional_count(columns.cell(row, "bgs_black_label")),
    )
    return population if population.has_data() else None


def parse_release_date(value: str | None) -> datetime | None:
    """
    Parse a free-text release date.

    Accepts ISO 8601 plus the written forms in RELEASE_DATE_FORMATS.
    Naive results are taken as UTC.
    """
    if not value or not value.strip():
        return None
    text = value.strip()

    parsed: datetime | None = None
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        for fmt in RELEASE_DATE_FORMATS:
            try:
                parsed = datetime.strptime(text, fmt)
                break
            except ValueError:
                continue

    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def release_timestamp(card: CardRecord) -> float:
    """
    Sort timestamp for a card.

    Uses the release date when it parses, else January 1 of `year`.
    Cards with neither get +inf.
    """
    released = parse_release_date(card.release)
    if released is not None:
        return released.timestamp()
    if 0 < card.year <= MAXYEAR:
        return datetime(card.year, 1, 1, tzinfo=timezone.utc).timestamp()
    return math.inf


def _optional(value: str) -> str | None:
    return value or None


def build_record(row: list[str], columns: ColumnIndex, row_number: int) -> CardRecord | None:
    """
    Build one CardRecord from a data row.

    Args:
        row: Parsed cells of the data row
        columns: Resolved header of the sheet
        row_number: 1-based position of the row below the header

    Returns:
        CardRecord, or None when neither name column has a value.
    """
    name_en = columns.cell(row, "name_en")
    name_jp = columns.cell(row, "name_jp")
    if not name_en and not name_jp:
        return None
    # Japanese-only rows still need a primary display name
    name_en = name_en or name_jp

    set_name = columns.cell(row, "set_name")
    number = columns.cell(row, "number")
    card_id = columns.cell(row, "id") or slugify(name_en, set_name, number, str(row_number))

    return CardRecord(
        id=card_id,
        name_en=name_en,
        name_jp=_optional(name_jp),
        image=columns.cell(row, "image") or IMAGE_PLACEHOLDER,
        image_back=_optional(columns.cell(row, "image_back")),
        number=number,
        set_name=set_name,
        year=parse_year(columns.cell(row, "year")),
        rarity=_optional(columns.cell(row, "rarity")),
        types=parse_types(columns.cell(row, "types")),
        language=_optional(columns.cell(row, "language")),
        edition=parse_edition(columns.cell(row, "edition")),
        notes_en=_optional(columns.cell(row, "notes_en")),
        notes_jp=_optional(columns.cell(row, "notes_jp")),
        origin_en=_optional(columns.cell(row, "origin_en")),
        origin_jp=_optional(columns.cell(row, "origin_jp")),
        illustrator=_optional(columns.cell(row, "illustrator")),
        era=_optional(columns.cell(row, "era")),
        release=_optional(columns.cell(row, "release")),
        population=parse_population(columns, row),
        is_mew=parse_bool(columns.cell(row, "is_mew")),
        is_cameo=parse_bool(columns.cell(row, "is_cameo")),
        is_intl=parse_bool(columns.cell(row, "is_intl")),
        grade=normalize_grade(columns.cell(row, "grade")),
    )


def parse_sheet(text: str) -> list[CardRecord]:
    """
    Parse one sheet export into records.

    The header row is resolved once; rows without a name are dropped.
    Returns an empty list when there is no data row.
    """
    rows = parse_rows(text)
    if len(rows) < 2:
        return []

    columns = resolve_columns(rows[0])
    logger.debug("Resolved columns: %s", ", ".join(columns.resolved()))
    records: list[CardRecord] = []
    for row_number, row in enumerate(rows[1:], start=1):
        record = build_record(row, columns, row_number)
        if record is not None:
            records.append(record)
    return records
