from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Notion
    NOTION_API_KEY: str = ""
    NOTION_DATABASE_ID: Optional[str] = None
    # Off: a page with more children than one page size is truncated.
    NOTION_PAGINATE_BLOCKS: bool = False
    NOTION_BLOCK_PAGE_SIZE: int = Field(100, ge=1, le=100)

    # Blog
    BLOG_LOCALE: str = "en"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def database_configured(self) -> bool:
        return bool(self.NOTION_DATABASE_ID and self.NOTION_DATABASE_ID.strip())


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
