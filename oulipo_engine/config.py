"""
Configuration management for the Oulipo engine.

Settings only supply defaults for the HTTP and CLI surfaces. Rule parameters
(forbidden letters, vowels, end words, offsets) are always passed per call.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from OULIPO_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="OULIPO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Oulipo Engine")
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # API
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)
    api_workers: int = Field(default=1)
    max_text_length: int = Field(
        default=100_000,
        ge=1,
        description="Largest text, in characters, accepted by the HTTP surface",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="json")

    # Defaults for the command surfaces
    default_n_plus_offset: int = Field(default=7)
    default_haiku_theme: str = Field(default="nature")
    default_anagram_results: int = Field(default=10, ge=1)


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings


def reset_settings() -> Settings:
    """Re-read settings from the current environment."""
    global settings
    settings = Settings()
    return settings
