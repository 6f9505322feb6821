from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mewgallery.api import cards_router, health_router
from mewgallery.config import settings
from mewgallery.services.gallery_cache import get_gallery_cache


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the gallery once at startup."""
    await get_gallery_cache().refresh()
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("mewgallery"),
    lifespan=lifespan,
)

app.include_router(cards_router)
app.include_router(health_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
