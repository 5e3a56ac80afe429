"""Pydantic models and JSON codec for notes and the theme preference."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)

# Medium date, short time, e.g. "Oct 17, 2026, 03:45 PM"
DEFAULT_TIMESTAMP_FORMAT = "%b %d, %Y, %I:%M %p"


class Note(BaseModel):
    """A single persisted note."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(..., ge=0, description="Unique, never reused identifier")
    text: str = Field(..., description="Note body")
    timestamp: str = Field(
        ...,
        validation_alias=AliasChoices("timestamp", "dateTime"),
        description="Locale-rendered creation or last edit time",
    )


class ThemeMode(IntEnum):
    """Appearance preference, stored by value."""

    LIGHT = 0
    DARK = 1
    SYSTEM = 2


_NOTES_ADAPTER: TypeAdapter[Optional[list[Note]]] = TypeAdapter(Optional[list[Note]])


def dump_notes(notes: list[Note]) -> str:
    """Serialize notes to a JSON array of ``{id, text, timestamp}`` objects."""
    return _NOTES_ADAPTER.dump_json(notes).decode("utf-8")


def parse_notes(raw: Optional[str]) -> list[Note]:
    """Deserialize a JSON array of notes.

    A missing payload or a JSON ``null`` yields an empty list. Anything
    structurally invalid raises ``pydantic.ValidationError``.
    """
    if raw is None:
        return []
    return _NOTES_ADAPTER.validate_json(raw) or []


def load_notes(raw: Optional[str]) -> list[Note]:
    """Like :func:`parse_notes` but falls back to an empty list on bad data."""
    try:
        return parse_notes(raw)
    except PydanticValidationError as exc:
        logger.warning(
            "Discarding malformed notes payload (%d errors), starting empty",
            exc.error_count(),
        )
        return []
