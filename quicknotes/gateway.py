"""Key-value persistence gateways for notes and preferences.

Every gateway exposes the same two operations, ``get(key)`` and
``set(key, value)``, over plain strings. Backend failures surface as
:class:`~quicknotes.errors.PersistenceError`.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Protocol

import redis

from quicknotes.errors import PersistenceError

if TYPE_CHECKING:
    from quicknotes.config import Settings

logger = logging.getLogger(__name__)

REDIS_KEY_PREFIX = "quicknotes:"


class PersistenceGateway(Protocol):
    """Opaque string key-value store."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def close(self) -> None: ...


class MemoryGateway:
    """Dict-backed gateway. Nothing survives the process."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def close(self) -> None:
        pass


class JsonFileGateway:
    """Stores all keys in one JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Cannot read {self._path}: {exc}") from exc
        if not isinstance(data, dict):
            raise PersistenceError(f"{self._path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            # Written by something else; hand it back in string form.
            return json.dumps(value)
        return value

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self._path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self._path}: {exc}") from exc
        logger.debug("Wrote key '%s' to %s", key, self._path)

    def close(self) -> None:
        pass


class RedisGateway:
    """Synchronous Redis-backed gateway with namespaced keys."""

    def __init__(
        self,
        redis_url: str,
        prefix: str = REDIS_KEY_PREFIX,
        client: Optional[redis.Redis] = None,
    ) -> None:
        self._redis_url = redis_url
        self._prefix = prefix
        self._client = client or redis.Redis.from_url(
            redis_url, decode_responses=True
        )

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Optional[str]:
        try:
            return self._client.get(self._key(key))
        except redis.RedisError as exc:
            raise PersistenceError(f"Redis get failed for '{key}': {exc}") from exc

    def set(self, key: str, value: str) -> None:
        try:
            self._client.set(self._key(key), value)
        except redis.RedisError as exc:
            raise PersistenceError(f"Redis set failed for '{key}': {exc}") from exc

    def close(self) -> None:
        """Close the Redis connection pool."""
        self._client.close()


def build_gateway(settings: Settings) -> PersistenceGateway:
    """Create the gateway selected by ``settings.storage_backend``."""
    backend = settings.storage_backend
    if backend == "redis":
        logger.info("Using Redis storage at %s", settings.redis_url)
        return RedisGateway(settings.redis_url)
    if backend == "memory":
        logger.info("Using in-memory storage, nothing will be persisted")
        return MemoryGateway()
    logger.info("Using JSON file storage at %s", settings.storage_path)
    return JsonFileGateway(settings.storage_path)
