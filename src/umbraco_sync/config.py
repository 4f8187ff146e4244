"""Sync configuration via Pydantic BaseSettings."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    development = "development"
    staging = "staging"
    production = "production"


class Settings(BaseSettings):
    """Sync settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Environment
    ENVIRONMENT: Environment = Environment.development

    # Logging
    LOG_LEVEL: str = "INFO"

    # Venue whose events are mirrored into the CMS
    TARGET_VENUE: str = "Dubai Exhibition Centre"

    # Umbraco content tree
    UMBRACO_PARENT_ID: str = ""  # Parent node for newly created events; empty = CMS default
    PUBLISH_ON_SYNC: bool = True


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
