from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application-level settings for the catalog query entry point.

    Reads from environment variables (or .env via pydantic-settings).
    """

    APP_NAME: str = Field(default="Catalog Query")

    # Record source
    CATALOG_DATA_FILE: str = Field(
        default="brickset.json",
        description=(
            "Path to the JSON record source. Relative names not found from the "
            "working directory are looked up in the bundled data directory."
        ),
    )
    CATALOG_ENFORCE_UNIQUE_NUMBERS: bool = Field(
        default=False,
        description="If true, reject a source containing duplicate set numbers.",
    )

    LOG_LEVEL: str = Field(default="INFO", description="Root logging level name")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, v):
        """
        Accept level names in any case; reject names logging does not know.
        """
        if v is None:
            return "INFO"
        name = str(v).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level: {v!r}")
        return name


# PUBLIC_INTERFACE
def get_app_settings() -> AppSettings:
    """Return a new AppSettings instance populated from environment variables."""
    return AppSettings()
