"""Application settings, read from ``SHOP_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SHOP_", env_file=".env", extra="ignore")

    database_url: str = Field("sqlite:///shop.db", description="SQLAlchemy database URL")
    db_echo: bool = Field(False, description="Log every SQL statement")

    # Orders per IN-list when order items are batch-loaded. Some databases
    # cap IN-list parameters at 1000.
    batch_fetch_size: int = Field(100, ge=1, le=1000)
    max_results: int = Field(1000, ge=1, description="Cap for unpaginated entity listings")

    log_level: str = Field("INFO", description="Root log level")
    api_title: str = Field("Shop API")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance; call ``get_settings.cache_clear()`` to reload."""
    return Settings()
