"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
"""

from concurrent.futures import ThreadPoolExecutor
from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExportSettings(BaseModel):
    """Ticket export settings."""

    # Worker pool built by create_executor()
    max_workers: int = Field(default=2, ge=1)

    # Where scripts/export_ticket.py writes rendered payloads
    output_dir: Path = Path("exports")

    # Raise instead of truncating when a formatted line exceeds the ticket width
    strict_width: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="COMISIONES_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production"] = "development"
    debug: bool = False

    # Nested settings
    export: ExportSettings = Field(default_factory=ExportSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def create_executor(settings: Optional[Settings] = None) -> ThreadPoolExecutor:
    """Build a thread pool sized for ticket exports.

    The pool belongs to the caller, who is responsible for shutting it down.
    """
    settings = settings or get_settings()
    return ThreadPoolExecutor(
        max_workers=settings.export.max_workers,
        thread_name_prefix="ticket-export",
    )
