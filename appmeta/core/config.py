"""Service configuration, read from APPMETA_* environment variables via pydantic-settings."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceConfig(BaseSettings):
    """
    Process-level settings for the application metadata service.

    Each field maps to APPMETA_<FIELD> (e.g., APPMETA_PORT); anything unset
    keeps its default.
    """

    model_config = SettingsConfigDict(env_prefix="APPMETA_", env_file=".env", case_sensitive=False)

    host: str = Field(
        default="0.0.0.0",
        description="Interface the HTTP server binds to.",
    )
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="TCP port the HTTP server listens on.",
    )
    log_level: str = Field(
        default="DEBUG",
        description="Root logging level (e.g., 'DEBUG', 'INFO').",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names case-insensitively; reject anything logging does not know."""
        name = str(v).strip().upper()
        # getLevelName maps a registered name to its int level, anything else to a string.
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return name


@lru_cache
def get_config() -> ServiceConfig:
    return ServiceConfig()
