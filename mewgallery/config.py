from pydantic_settings import BaseSettings, SettingsConfigDict

from mewgallery.models.card import CategoryFlag
from mewgallery.models.gallery import SheetSource


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "MewGallery"
    debug: bool = False

    # Public spreadsheet backing the gallery. Empty disables fetching.
    sheet_id: str = "1aT1iMYQzo0Fj7nnpwq26weIsFf7KupAWEAzN2Z-L0Xc"

    # Sheet (tab) names, one per category
    mew_sheet: str = "Japanese"
    cameo_sheet: str = "Cameo"
    intl_sheet: str = "Unique"

    request_timeout: float = 30.0


settings = Settings()


def configured_sources(config: Settings | None = None) -> list[SheetSource]:
    """Sheets to fetch, in display order."""
    config = config or settings
    return [
        SheetSource(name=config.mew_sheet, category=CategoryFlag.MEW),
        SheetSource(name=config.cameo_sheet, category=CategoryFlag.CAMEO),
        SheetSource(name=config.intl_sheet, category=CategoryFlag.INTL),
    ]
