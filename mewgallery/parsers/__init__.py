from mewgallery.parsers.columns import COLUMN_ALIASES, ColumnIndex, resolve_columns
from mewgallery.parsers.delimited import parse_rows, strip_bom
from mewgallery.parsers.records import (
    build_record,
    normalize_grade,
    parse_bool,
    parse_sheet,
    parse_year,
    release_timestamp,
    slugify,
)

__all__ = [
    "COLUMN_ALIASES",
    "ColumnIndex",
    "build_record",
    "normalize_grade",
    "parse_bool",
    "parse_rows",
    "parse_sheet",
    "parse_year",
    "release_timestamp",
    "resolve_columns",
    "slugify",
    "strip_bom",
]
