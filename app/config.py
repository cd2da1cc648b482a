"""
Runtime settings for the follow collections service.

Values come from the process environment first and then from the ``.env``
file in the project root. Only DATABASE_URL is mandatory.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_PATH = Path(__file__).resolve().parents[1] / ".env"

# Platform-provided variables win over .env defaults
load_dotenv(dotenv_path=ENV_PATH, override=False)


class Settings(BaseSettings):
    database_url: str = Field(..., alias="DATABASE_URL")

    app_name: str = Field(default="Follow Collections", alias="APP_NAME")
    api_version: str = Field(default="0.1.0", alias="API_VERSION")
    # Origin used for collection ids and local actor URIs
    public_base_url: str = Field(default="https://socialsphere.fly.dev", alias="PUBLIC_BASE_URL")
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    follows_page_size: int = Field(default=12, ge=1, alias="FOLLOWS_PAGE_SIZE")
    collection_cache_seconds: int = Field(default=180, ge=0, alias="COLLECTION_CACHE_SECONDS")

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def base_url(self) -> str:
        return self.public_base_url.rstrip("/")

    @property
    def cors_origin_list(self) -> list[str]:
        origins = [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
        return origins or ["*"]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
