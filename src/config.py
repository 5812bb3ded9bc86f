# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from BACKOFFICE_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="BACKOFFICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Logistics Back Office"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:5173"])

    # Headers set by the identity provider in front of this service
    user_id_header: str = "X-User-Id"
    roles_header: str = "X-User-Roles"


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
