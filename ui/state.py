"""Per-session wiring of the note store and theme preference.

Streamlit reruns the script on every interaction, so long-lived objects
live in ``st.session_state`` and are built once per browser session.
"""

from __future__ import annotations

import logging

import streamlit as st

from quicknotes.config import Settings
from quicknotes.gateway import build_gateway
from quicknotes.store import NoteStore, StoreEvent
from quicknotes.theme import ThemePreference

logger = logging.getLogger(__name__)

# Session-state keys
STORE_KEY = "note_store"
THEME_KEY = "theme_preference"
TEXT_KEY = "note_text"
FLASH_KEY = "flash_message"


def _log_event(event: StoreEvent) -> None:
    logger.debug("Store event %s (note=%s)", event.kind.value, event.note_id)


def ensure_session() -> None:
    """Build and load the store on first run of this session."""
    if STORE_KEY in st.session_state:
        return
    settings = Settings()
    gateway = build_gateway(settings)
    store = NoteStore(
        gateway,
        notes_key=settings.notes_key,
        timestamp_format=settings.timestamp_format,
    )
    store.subscribe(_log_event)
    store.load()
    st.session_state[STORE_KEY] = store
    st.session_state[THEME_KEY] = ThemePreference(gateway, key=settings.theme_key)
    st.session_state.setdefault(TEXT_KEY, "")


def get_store() -> NoteStore:
    return st.session_state[STORE_KEY]


def get_theme() -> ThemePreference:
    return st.session_state[THEME_KEY]


def flash(level: str, message: str) -> None:
    """Queue a message to show on the next rerun."""
    st.session_state[FLASH_KEY] = (level, message)


def render_flash() -> None:
    """Show and clear the queued message, if any."""
    pending = st.session_state.pop(FLASH_KEY, None)
    if not pending:
        return
    level, message = pending
    if level == "error":
        st.error(message)
    elif level == "warning":
        st.warning(message)
    else:
        st.toast(message)
