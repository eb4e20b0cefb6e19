"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Contentful Delivery API
    CONTENTFUL_SPACE_ID: Optional[str] = None
    CONTENTFUL_ACCESS_TOKEN: Optional[str] = None
    CONTENTFUL_ENVIRONMENT: str = "master"
    CONTENTFUL_HOST: str = "https://cdn.contentful.com"
    CONTENTFUL_TIMEOUT: float = 10.0

    # Site
    SITE_BASE_URL: str = "https://jasonanton.com"
    SITE_STATIC_LASTMOD: str = "2025-06-20"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
