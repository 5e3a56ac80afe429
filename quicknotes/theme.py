"""Persisted light / dark / system theme preference."""

from __future__ import annotations

import logging

from quicknotes.errors import PersistenceError
from quicknotes.gateway import PersistenceGateway
from quicknotes.models import ThemeMode

logger = logging.getLogger(__name__)

DEFAULT_THEME_KEY = "theme_mode"


class ThemePreference:
    """Reads and writes the theme mode under a single gateway key."""

    def __init__(
        self, gateway: PersistenceGateway, key: str = DEFAULT_THEME_KEY
    ) -> None:
        self._gateway = gateway
        self._key = key

    def load(self) -> ThemeMode:
        """Return the stored mode, or SYSTEM when absent or unusable."""
        try:
            raw = self._gateway.get(self._key)
        except PersistenceError as exc:
            logger.error("Failed to read theme preference: %s", exc)
            return ThemeMode.SYSTEM
        if raw is None:
            return ThemeMode.SYSTEM
        try:
            return ThemeMode(int(raw.strip()))
        except ValueError:
            logger.warning("Ignoring invalid theme preference %r", raw)
            return ThemeMode.SYSTEM

    def save(self, mode: ThemeMode) -> None:
        """Persist ``mode``. Raises PersistenceError on failure."""
        self._gateway.set(self._key, str(int(mode)))
        logger.info("Theme preference set to %s", mode.name)


def is_dark(mode: ThemeMode, system_dark: bool) -> bool:
    """Resolve the effective appearance for ``mode``."""
    if mode is ThemeMode.LIGHT:
        return False
    if mode is ThemeMode.DARK:
        return True
    return system_dark
