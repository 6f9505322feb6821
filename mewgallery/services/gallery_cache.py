"""
In-memory holder for the most recent gallery load.

The pipeline itself keeps no state; this cache is owned by the HTTP layer
and decides when to re-run it. Status stays LOADING until the first refresh.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from functools import lru_cache

from mewgallery.models.gallery import GalleryLoad
from mewgallery.services.sheet_loader import load_gallery

logger = logging.getLogger(__name__)

GalleryLoader = Callable[[], Awaitable[GalleryLoad]]


class GalleryCache:
    """Latest GalleryLoad plus a serialized refresh."""

    def __init__(self, loader: GalleryLoader = load_gallery) -> None:
        self._loader = loader
        self._current = GalleryLoad()
        self._lock = asyncio.Lock()

    @property
    def current(self) -> GalleryLoad:
        return self._current

    async def refresh(self) -> GalleryLoad:
        """Re-fetch every sheet and replace the stored collection."""
        async with self._lock:
            result = await self._loader()
            self._current = result

        logger.info(
            "Gallery refreshed: status=%s cards=%d failed=%s",
            result.status.value,
            len(result.cards),
            result.failed_sources,
        )
        return result


@lru_cache(maxsize=1)
def get_gallery_cache() -> GalleryCache:
    """
    Process-wide gallery cache.

    Used as a FastAPI dependency; tests override it.
    """
    return GalleryCache()
