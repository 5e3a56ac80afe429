"""Application configuration loaded from environment variables."""

from __future__ import annotations

import locale
import logging
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

from quicknotes.models import DEFAULT_TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def apply_locale() -> None:
    """Render timestamps with the user's locale instead of the C default."""
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as exc:
        logger.warning("Could not apply user locale, keeping default: %s", exc)


class Settings(BaseSettings):
    """QuickNotes settings, read from ``QUICKNOTES_*`` variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="QUICKNOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage
    storage_backend: Literal["file", "redis", "memory"] = "file"
    storage_path: Path = Path("notes_prefs.json")
    redis_url: str = "redis://localhost:6379"

    # Preference keys
    notes_key: str = "notes_list"
    theme_key: str = "theme_mode"

    # Presentation
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    # Logging
    log_level: str = "INFO"


settings = Settings()
