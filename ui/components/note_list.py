"""Newest-first list of note cards with edit and delete actions."""

from __future__ import annotations

import streamlit as st

from quicknotes.errors import NoteStoreError
from quicknotes.models import Note
from ui import state


def _begin_edit(note_id: int) -> None:
    try:
        text = state.get_store().begin_edit(note_id)
    except NoteStoreError as e:
        state.flash("error", str(e))
        return
    st.session_state[state.TEXT_KEY] = text


# Set by the dialog callbacks; the dialog closes itself on its next run.
_DIALOG_DONE_KEY = "delete_dialog_done"


def _delete(note_id: int) -> None:
    store = state.get_store()
    was_editing = store.editing_id == note_id
    try:
        store.delete(note_id)
    except NoteStoreError as e:
        state.flash("error", str(e))
    else:
        if was_editing:
            st.session_state[state.TEXT_KEY] = ""
        state.flash("info", f"Note #{note_id} deleted")
    st.session_state[_DIALOG_DONE_KEY] = True


def _close_dialog() -> None:
    st.session_state[_DIALOG_DONE_KEY] = True


@st.dialog("Delete note")
def _confirm_delete(note_id: int) -> None:
    if st.session_state.pop(_DIALOG_DONE_KEY, False):
        st.rerun()
    st.write("Are you sure you want to delete this note?")
    delete_col, cancel_col = st.columns(2)
    with delete_col:
        st.button(
            "Delete",
            key=f"confirm_delete_{note_id}",
            type="primary",
            use_container_width=True,
            on_click=_delete,
            args=(note_id,),
        )
    with cancel_col:
        st.button(
            "Cancel",
            key=f"cancel_delete_{note_id}",
            use_container_width=True,
            on_click=_close_dialog,
        )


def _render_card(note: Note) -> None:
    with st.container(border=True):
        meta_col, edit_col, delete_col = st.columns(
            [6, 1, 1], vertical_alignment="center"
        )
        with meta_col:
            st.caption(f"🕐 {note.timestamp}")
        with edit_col:
            st.button(
                "✏️",
                key=f"edit_{note.id}",
                help="Edit",
                on_click=_begin_edit,
                args=(note.id,),
            )
        with delete_col:
            if st.button("🗑️", key=f"delete_{note.id}", help="Delete"):
                _confirm_delete(note.id)
        st.divider()
        st.text(note.text)


def render() -> None:
    """Render all notes, most recent first."""
    # A full rerun has already closed any dialog.
    st.session_state.pop(_DIALOG_DONE_KEY, None)
    notes = state.get_store().list()
    if not notes:
        st.info("No notes yet. Add your first one above.")
        return
    st.caption(f"{len(notes)} note{'s' if len(notes) != 1 else ''}")
    for note in notes:
        _render_card(note)
