"""
Configuration management for scholar_parser.

Uses pydantic-settings for type-safe configuration with automatic
environment variable loading and validation.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scholar_parser.constants import DEFAULT_LAYOUT, DEFAULT_SCHOLAR_SITE


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are validated at startup so a bad site URL fails fast
    instead of producing broken links in every parsed record.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore extra env vars
    )

    scholar_site: str = Field(
        default=DEFAULT_SCHOLAR_SITE,
        description="Base URL used to resolve relative result links",
    )
    scholar_layout: str = Field(
        default=DEFAULT_LAYOUT,
        description="Name of the result layout parsers use by default",
    )
    html_parser: str = Field(
        default="lxml",
        description="Preferred BeautifulSoup tree builder",
    )

    @field_validator("scholar_site", mode="before")
    @classmethod
    def normalize_site(cls, v: str) -> str:
        """Strip whitespace and trailing slashes; reject empty values."""
        if isinstance(v, str):
            v = v.strip().rstrip("/")
            if not v:
                raise ValueError("SCHOLAR_SITE must not be empty")
        return v

    @field_validator("scholar_layout", "html_parser", mode="before")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        """Strip whitespace from string values."""
        if isinstance(v, str):
            return v.strip()
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


def get_scholar_site() -> str:
    """Get the Scholar base URL from settings."""
    return get_settings().scholar_site


def get_scholar_layout() -> str:
    """Get the default layout name from settings."""
    return get_settings().scholar_layout


def get_html_parser() -> str:
    """Get the preferred BeautifulSoup tree builder from settings."""
    return get_settings().html_parser
