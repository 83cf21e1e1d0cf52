"""Application configuration."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Food API (None selects the in-memory catalog)
    food_api_url: Optional[str] = None
    food_api_timeout: float = 10.0
    catalog_file: Optional[str] = None

    # Money display
    currency_symbol: str = "$"
    decimal_separator: str = "."
    thousands_separator: str = ","

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
