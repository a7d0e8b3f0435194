"""Application settings.

Values come from ``IMS_*`` environment variables or a ``.env`` file in the
working directory, e.g. ``IMS_LOG_LEVEL=DEBUG``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ims.infrastructure.seed import DEFAULT_SEED_FILE


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="IMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="loguru level for the stderr sink")
    seed_file: Path = Field(
        default=DEFAULT_SEED_FILE, description="JSON file the inventory starts from"
    )
    currency: str = Field(default="USD", description="Currency of every price")


@lru_cache
def get_settings() -> Settings:
    return Settings()
