"""
Sheet loader service.

Fetches every gallery sheet as CSV from the published spreadsheet, then runs
the parse -> merge pipeline over whichever sheets came back.

A failing sheet never aborts the others. When no sheet yields any card the
load reports FALLBACK so the UI can tell it apart from "still loading".
"""

import asyncio
import logging
from collections.abc import Iterable
from urllib.parse import quote

import httpx

from mewgallery.config import configured_sources, settings
from mewgallery.models.card import CardRecord, CategoryFlag
from mewgallery.models.gallery import GalleryLoad, GalleryStatus, SheetSource
from mewgallery.parsers.records import parse_sheet
from mewgallery.services.merger import merge_sources

logger = logging.getLogger(__name__)

SHEETS_BASE = "https://docs.google.com/spreadsheets/d"


class SheetFetchError(Exception):
    """Raised when a sheet cannot be downloaded."""

    def __init__(self, source_name: str, message: str) -> None:
        super().__init__(message)
        self.source_name = source_name


def sheet_csv_url(sheet_id: str, sheet_name: str) -> str:
    """CSV export URL for one named sheet of a spreadsheet."""
    encoded = quote(sheet_name, safe="-_.!~*'()")
    return f"{SHEETS_BASE}/{sheet_id}/gviz/tq?tqx=out:csv&sheet={encoded}"


async def fetch_sheet(client: httpx.AsyncClient, sheet_id: str, source: SheetSource) -> str:
    """
    Download one sheet as CSV text.

    Raises:
        SheetFetchError: If the request fails or returns an error status
    """
    url = sheet_csv_url(sheet_id, source.name)
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise SheetFetchError(
            source.name,
            f"Failed to fetch sheet {source.name!r}: HTTP {e.response.status_code}",
        ) from e
    except httpx.RequestError as e:
        raise SheetFetchError(source.name, f"Failed to fetch sheet {source.name!r}: {e}") from e

    return response.text


def build_gallery(sheets: Iterable[tuple[CategoryFlag, str]]) -> list[CardRecord]:
    """
    Run the full pipeline over raw sheet texts.

    Args:
        sheets: (category, csv text) pairs in display order

    Returns:
        Fresh merged collection. Sheets without any card are left out.
    """
    groups: list[tuple[CategoryFlag, list[CardRecord]]] = []
    for category, text in sheets:
        cards = parse_sheet(text)
        if cards:
            groups.append((category, cards))
    return merge_sources(groups)


async def _fetch_all(
    client: httpx.AsyncClient,
    sheet_id: str,
    sources: list[SheetSource],
) -> GalleryLoad:
    results = await asyncio.gather(
        *(fetch_sheet(client, sheet_id, source) for source in sources),
        return_exceptions=True,
    )

    texts: list[tuple[CategoryFlag, str]] = []
    failed: list[str] = []
    for source, result in zip(sources, results, strict=True):
        if isinstance(result, BaseException):
            logger.error("Error fetching sheet %r: %s", source.name, result)
            failed.append(source.name)
            continue
        texts.append((source.category, result))

    cards = build_gallery(texts)
    if not cards:
        logger.warning("No sheet returned any cards; gallery falls back to empty state")
        return GalleryLoad(status=GalleryStatus.FALLBACK, failed_sources=failed)

    logger.info("Loaded %d cards from %d sheets", len(cards), len(texts))
    return GalleryLoad(cards=cards, status=GalleryStatus.LOADED, failed_sources=failed)


async def load_gallery(
    sheet_id: str | None = None,
    sources: list[SheetSource] | None = None,
    client: httpx.AsyncClient | None = None,
) -> GalleryLoad:
    """
    Fetch all sheets concurrently and build the gallery.

    Args:
        sheet_id: Spreadsheet id. Defaults to settings.sheet_id
        sources: Sheets to fetch. Defaults to the configured sheets
        client: Optional httpx client for connection reuse

    Returns:
        GalleryLoad with status LOADED, or FALLBACK when nothing loaded.
    """
    if sheet_id is None:
        sheet_id = settings.sheet_id
    if sources is None:
        sources = configured_sources()

    if not sheet_id:
        logger.warning("No sheet id configured; gallery falls back to empty state")
        return GalleryLoad(status=GalleryStatus.FALLBACK)

    if client:
        return await _fetch_all(client, sheet_id, sources)

    async with httpx.AsyncClient(
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as owned_client:
        return await _fetch_all(owned_client, sheet_id, sources)
