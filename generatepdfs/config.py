"""
Configuration for the GeneratePDFs client.

Values are read from environment variables prefixed with GENERATEPDFS_
(or a .env file). Arguments passed to the client always take precedence.

Usage:
    from generatepdfs.config import get_settings
    settings = get_settings()
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_BASE_URL = "https://api.generatepdfs.com"
DEFAULT_TIMEOUT = 30.0  # seconds


class Settings(BaseSettings):
    """Client settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="GENERATEPDFS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_token: Optional[str] = Field(
        default=None,
        description="Bearer token used to authenticate against the API.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Root URL of the GeneratePDFs API.",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        description="Per-request timeout in seconds.",
    )


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
