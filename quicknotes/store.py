"""In-memory note collection kept in lockstep with a key-value gateway.

The store owns the ordered note list, the next-id counter and the single
edit session. Every mutation rewrites the whole serialized list before the
call returns, so memory and storage never diverge after a completed
operation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from quicknotes.errors import (
    NotFoundError,
    PersistenceError,
    StoreNotLoadedError,
    ValidationError,
)
from quicknotes.gateway import PersistenceGateway
from quicknotes.metrics import NOTES_STORED, STORE_OPERATIONS
from quicknotes.models import DEFAULT_TIMESTAMP_FORMAT, Note, dump_notes, load_notes

logger = logging.getLogger(__name__)

DEFAULT_NOTES_KEY = "notes_list"


class ChangeKind(str, Enum):
    """What happened to the store."""

    LOADED = "loaded"
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    EDIT_STARTED = "edit_started"
    EDIT_CANCELLED = "edit_cancelled"


@dataclass(frozen=True)
class StoreEvent:
    """Change notification passed to store subscribers."""

    kind: ChangeKind
    note_id: Optional[int] = None


Listener = Callable[[StoreEvent], None]


def _require_text(text: str) -> None:
    if not isinstance(text, str) or not text.strip():
        raise ValidationError("Note text must not be blank")


class NoteStore:
    """Authoritative note collection with create/edit/delete/list operations."""

    def __init__(
        self,
        gateway: PersistenceGateway,
        notes_key: str = DEFAULT_NOTES_KEY,
        clock: Optional[Callable[[], datetime]] = None,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ) -> None:
        self._gateway = gateway
        self._key = notes_key
        self._clock = clock or datetime.now
        self._timestamp_format = timestamp_format
        self._notes: list[Note] = []
        self._next_id = 0
        self._editing_id: Optional[int] = None
        self._loaded = False
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def loaded(self) -> bool:
        """Whether ``load()`` has run."""
        return self._loaded

    @property
    def editing_id(self) -> Optional[int]:
        """Id of the note in the active edit session, if any."""
        return self._editing_id

    @property
    def next_id(self) -> int:
        """Id the next created note will receive."""
        return self._next_id

    @property
    def count(self) -> int:
        """Number of stored notes."""
        return len(self._notes)

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for change events. Returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, kind: ChangeKind, note_id: Optional[int] = None) -> None:
        event = StoreEvent(kind=kind, note_id=note_id)
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Store listener failed on %s", kind.value)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> None:
        """Replace all state with the collection held by the gateway.

        Missing, malformed or unreadable data leaves the store empty.
        """
        try:
            raw = self._gateway.get(self._key)
        except PersistenceError as exc:
            logger.error("Failed to read notes: %s, starting empty", exc)
            raw = None

        notes = load_notes(raw)
        ids = [n.id for n in notes]
        if len(set(ids)) != len(ids):
            logger.warning("Persisted notes contain duplicate ids: %s", ids)

        self._notes = notes
        self._next_id = max(ids, default=-1) + 1
        self._editing_id = None
        self._loaded = True
        NOTES_STORED.set(len(self._notes))
        logger.info(
            "Loaded %d notes from key '%s' (next id %d)",
            len(self._notes),
            self._key,
            self._next_id,
        )
        self._notify(ChangeKind.LOADED)

    def persist(self) -> None:
        """Write the full collection to the gateway."""
        self._ensure_loaded()
        try:
            self._gateway.set(self._key, dump_notes(self._notes))
        except PersistenceError as exc:
            logger.error("Failed to persist %d notes: %s", len(self._notes), exc)
            raise
        finally:
            NOTES_STORED.set(len(self._notes))

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            raise StoreNotLoadedError("NoteStore.load() must run before mutations")

    def _timestamp(self) -> str:
        return self._clock().strftime(self._timestamp_format)

    def _index_of(self, note_id: int) -> int:
        for i, note in enumerate(self._notes):
            if note.id == note_id:
                return i
        raise NotFoundError(note_id)

    def _persist_for(self, operation: str) -> None:
        try:
            self.persist()
        except PersistenceError:
            STORE_OPERATIONS.labels(operation=operation, status="persistence_error").inc()
            raise
        STORE_OPERATIONS.labels(operation=operation, status="success").inc()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def create(self, text: str) -> Note:
        """Append a new note and persist. Raises ValidationError on blank text."""
        self._ensure_loaded()
        try:
            _require_text(text)
        except ValidationError:
            STORE_OPERATIONS.labels(operation="create", status="invalid").inc()
            raise

        note = Note(id=self._next_id, text=text, timestamp=self._timestamp())
        self._next_id += 1
        self._notes.append(note)
        logger.info("Created note %d", note.id)
        self._persist_for("create")
        self._notify(ChangeKind.CREATED, note.id)
        return note

    def get(self, note_id: int) -> Note:
        """Return the note with ``note_id`` or raise NotFoundError."""
        return self._notes[self._index_of(note_id)]

    def begin_edit(self, note_id: int) -> str:
        """Start editing ``note_id`` and return its current text."""
        note = self.get(note_id)
        self._editing_id = note.id
        logger.debug("Editing note %d", note.id)
        self._notify(ChangeKind.EDIT_STARTED, note.id)
        return note.text

    def update(self, note_id: int, text: str) -> Note:
        """Replace the text and timestamp of ``note_id`` in place and persist."""
        self._ensure_loaded()
        try:
            _require_text(text)
            index = self._index_of(note_id)
        except ValidationError:
            STORE_OPERATIONS.labels(operation="update", status="invalid").inc()
            raise
        except NotFoundError:
            STORE_OPERATIONS.labels(operation="update", status="not_found").inc()
            raise

        note = self._notes[index].model_copy(
            update={"text": text, "timestamp": self._timestamp()}
        )
        self._notes[index] = note
        self._editing_id = None
        logger.info("Updated note %d", note.id)
        self._persist_for("update")
        self._notify(ChangeKind.UPDATED, note.id)
        return note

    def cancel_edit(self) -> None:
        """Drop the edit session, if any."""
        previous = self._editing_id
        self._editing_id = None
        if previous is not None:
            self._notify(ChangeKind.EDIT_CANCELLED, previous)

    def delete(self, note_id: int) -> None:
        """Remove ``note_id`` and persist. An edit in progress on it is abandoned."""
        self._ensure_loaded()
        try:
            index = self._index_of(note_id)
        except NotFoundError:
            STORE_OPERATIONS.labels(operation="delete", status="not_found").inc()
            raise

        del self._notes[index]
        if self._editing_id == note_id:
            self._editing_id = None
        logger.info("Deleted note %d", note_id)
        self._persist_for("delete")
        self._notify(ChangeKind.DELETED, note_id)

    def save(self, text: str) -> Note:
        """Editor save action: update the note being edited, else create one."""
        if self._editing_id is not None:
            return self.update(self._editing_id, text)
        return self.create(text)

    def list(self) -> list[Note]:
        """Notes, most recently created first."""
        return self._notes[::-1]
