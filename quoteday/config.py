"""Quoteday configuration — loaded from .env via pydantic-settings."""

from pydantic_settings import BaseSettings
from pydantic import Field


class QuotedaySettings(BaseSettings):
    """All Quoteday configuration. Reads from .env file and environment variables."""

    # --- Quote service (quotes.rest) ---
    quotes_api_url: str = Field(
        default="https://quotes.rest",
        description="Quote service base URL (overrides the default endpoint)",
    )
    quotes_language: str = Field(
        default="en",
        description="Language selector sent as the ?language= query parameter",
    )
    quotes_timeout: float = Field(
        default=10.0,
        description="Seconds before a quote request is abandoned",
    )

    # --- Logging ---
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(
        default="console",
        description="Log format: 'console' for dev, 'json' for production",
    )

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


# Singleton — import this everywhere
settings = QuotedaySettings()
