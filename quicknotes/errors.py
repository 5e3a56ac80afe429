"""Exceptions raised by the note store and its persistence gateways."""

from __future__ import annotations


class NoteStoreError(Exception):
    """Base class for every recoverable note store error."""


class ValidationError(NoteStoreError, ValueError):
    """Note text is empty or whitespace-only."""


class NotFoundError(NoteStoreError, LookupError):
    """No note with the requested id exists."""

    def __init__(self, note_id: int) -> None:
        super().__init__(f"Note {note_id} not found")
        self.note_id = note_id


class PersistenceError(NoteStoreError):
    """The underlying key-value store failed to read or write."""


class StoreNotLoadedError(NoteStoreError, RuntimeError):
    """A mutating operation was called before ``NoteStore.load()``."""
