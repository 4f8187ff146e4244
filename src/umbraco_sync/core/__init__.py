"""Shared infrastructure -- logging setup."""

from src.umbraco_sync.core.logging import configure_structlog

__all__ = ["configure_structlog"]
