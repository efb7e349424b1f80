"""Application configuration.

Loads settings from ``CATALOG_*`` environment variables with sensible
defaults.
"""

from decimal import Decimal
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog.domain.service.pricing import DISCOUNT_FEATURE, DISCOUNT_RATIO


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    data_dir: Path = Path("data")

    # Pricing
    discount_feature: str = DISCOUNT_FEATURE
    discount_ratio: Decimal = DISCOUNT_RATIO

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


def get_settings() -> Settings:
    return Settings()
