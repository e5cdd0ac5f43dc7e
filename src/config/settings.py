"""Application settings and configuration."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    # Airtable configuration. The API key has no default and must come from
    # the environment or a secret store.
    AIRTABLE_API_KEY: Optional[str] = None
    AIRTABLE_API_URL: str = "https://api.airtable.com/v0"
    AIRTABLE_BASE_ID: str = "appd7mB2vELacH4Fh"
    AIRTABLE_PRICING_TABLE_ID: str = "tbliVrYxBgWFJ3AF1"
    AIRTABLE_FAQ_TABLE_ID: str = "tblkfsPmorGvt1o2q"
    REQUEST_TIMEOUT: int = 30

    # Page rendering
    RATES_ENDPOINT: str = "/api/rates"
    SITE_TITLE: str = "Topiary Park Living"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @property
    def airtable_configured(self) -> bool:
        """Whether a non-empty Airtable API key is available."""
        return bool(self.AIRTABLE_API_KEY and self.AIRTABLE_API_KEY.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
