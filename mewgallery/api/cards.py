"""
Gallery API endpoints.

Serves the merged card collection to the presentation layer: filtered
listing, detail view, image preload list and manual refresh.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, Field

from mewgallery.models.card import CardRecord, Edition, Language
from mewgallery.models.gallery import GalleryFilter, GalleryStatus, SortKey
from mewgallery.services.gallery_cache import GalleryCache, get_gallery_cache
from mewgallery.services.gallery_search import apply_filters, collect_image_urls

router = APIRouter(prefix="/cards", tags=["cards"])


class PopulationResponse(BaseModel):
    """Graded population counts."""

    psa8: int
    psa9: int
    psa10: int
    bgs_black_label: int | None = None


class CardResponse(BaseModel):
    """One card as shown in the grid and detail view."""

    id: str
    name_en: str
    name_jp: str | None = None
    display_name: str
    number: str
    set_name: str
    year: int
    rarity: str | None = None
    types: list[str] = Field(default_factory=list)
    language: str | None = None
    edition: Edition | None = None
    image: str
    image_back: str | None = None
    notes_en: str | None = None
    notes_jp: str | None = None
    display_notes: str | None = None
    origin_en: str | None = None
    origin_jp: str | None = None
    display_origin: str | None = None
    illustrator: str | None = None
    era: str | None = None
    release: str | None = None
    population: PopulationResponse | None = None
    is_mew: bool | None = None
    is_cameo: bool | None = None
    is_intl: bool | None = None
    grade: str | None = None

    @classmethod
    def from_record(cls, card: CardRecord, language: Language) -> "CardResponse":
        population = None
        if card.population is not None:
            population = PopulationResponse(
                psa8=card.population.psa8,
                psa9=card.population.psa9,
                psa10=card.population.psa10,
                bgs_black_label=card.population.bgs_black_label,
            )
        return cls(
            id=card.id,
            name_en=card.name_en,
            name_jp=card.name_jp,
            display_name=card.display_name(language),
            number=card.number,
            set_name=card.set_name,
            year=card.year,
            rarity=card.rarity,
            types=list(card.types),
            language=card.language,
            edition=card.edition,
            image=card.image,
            image_back=card.image_back,
            notes_en=card.notes_en,
            notes_jp=card.notes_jp,
            display_notes=card.display_notes(language),
            origin_en=card.origin_en,
            origin_jp=card.origin_jp,
            display_origin=card.display_origin(language),
            illustrator=card.illustrator,
            era=card.era,
            release=card.release,
            population=population,
            is_mew=card.is_mew,
            is_cameo=card.is_cameo,
            is_intl=card.is_intl,
            grade=card.grade,
        )


class GalleryResponse(BaseModel):
    """Filtered gallery listing."""

    status: GalleryStatus
    total: int = 0
    cards: list[CardResponse] = Field(default_factory=list)


class ImageListResponse(BaseModel):
    """Image URLs for the client-side preloader."""

    status: GalleryStatus
    urls: list[str] = Field(default_factory=list)


class RefreshResponse(BaseModel):
    """Outcome of a manual refresh."""

    status: GalleryStatus
    total: int = 0
    failed_sources: list[str] = Field(default_factory=list)


@router.get("", response_model=GalleryResponse)
async def list_cards(
    cache: Annotated[GalleryCache, Depends(get_gallery_cache)],
    q: Annotated[str, Query(description="Free-text search")] = "",
    mew: bool = True,
    cameo: bool = True,
    intl: bool = True,
    sort_by: Annotated[
        str, Query(description="Sort key; unknown keys sort by year descending")
    ] = SortKey.YEAR_DESC.value,
    language: Language = "JP",
) -> GalleryResponse:
    """
    List cards matching the current search, toggles and sort order.

    Returns an empty list when every category toggle is off.
    """
    gallery = cache.current
    gallery_filter = GalleryFilter(query=q, mew=mew, cameo=cameo, intl=intl, sort_by=sort_by)
    cards = apply_filters(gallery.cards, gallery_filter)

    return GalleryResponse(
        status=gallery.status,
        total=len(cards),
        cards=[CardResponse.from_record(card, language) for card in cards],
    )


@router.get("/images", response_model=ImageListResponse)
async def list_images(
    cache: Annotated[GalleryCache, Depends(get_gallery_cache)],
) -> ImageListResponse:
    """Every front and back image of the gallery, for preloading."""
    gallery = cache.current
    return ImageListResponse(status=gallery.status, urls=collect_image_urls(gallery.cards))


@router.post("/refresh", response_model=RefreshResponse)
async def refresh_cards(
    cache: Annotated[GalleryCache, Depends(get_gallery_cache)],
) -> RefreshResponse:
    """Re-fetch every sheet and rebuild the gallery."""
    gallery = await cache.refresh()
    return RefreshResponse(
        status=gallery.status,
        total=len(gallery.cards),
        failed_sources=gallery.failed_sources,
    )


@router.get("/{card_id}", response_model=CardResponse)
async def get_card(
    card_id: str,
    cache: Annotated[GalleryCache, Depends(get_gallery_cache)],
    language: Language = "JP",
) -> CardResponse:
    """Detail view for one card."""
    card = cache.current.find(card_id)
    if card is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Card {card_id!r} not found",
        )
    return CardResponse.from_record(card, language)
