"""Note text field with Save / Cancel actions."""

from __future__ import annotations

import streamlit as st

from quicknotes.errors import NoteStoreError, PersistenceError, ValidationError
from ui import state


def _save() -> None:
    store = state.get_store()
    editing = store.editing_id
    try:
        note = store.save(st.session_state[state.TEXT_KEY])
    except ValidationError:
        state.flash("warning", "Write something before saving.")
        return
    except PersistenceError as e:
        state.flash("error", f"Note kept in this session but not saved: {e}")
        return
    except NoteStoreError as e:
        state.flash("error", str(e))
        return
    st.session_state[state.TEXT_KEY] = ""
    verb = "updated" if editing is not None else "added"
    state.flash("info", f"Note #{note.id} {verb}")


def _cancel() -> None:
    state.get_store().cancel_edit()
    st.session_state[state.TEXT_KEY] = ""


def render() -> None:
    """Render the editor for a new note or the note being edited."""
    store = state.get_store()
    editing = store.editing_id

    with st.container(border=True):
        if editing is not None:
            st.caption(f"✏️ Editing note #{editing}")
        st.text_area(
            "Note",
            key=state.TEXT_KEY,
            placeholder="Write a note...",
            label_visibility="collapsed",
            height=120,
        )
        if editing is None:
            st.button(
                "Add note",
                key="save_note",
                type="primary",
                use_container_width=True,
                on_click=_save,
            )
        else:
            save_col, cancel_col = st.columns(2)
            with save_col:
                st.button(
                    "Save",
                    key="save_note",
                    type="primary",
                    use_container_width=True,
                    on_click=_save,
                )
            with cancel_col:
                st.button(
                    "Cancel",
                    key="cancel_edit",
                    use_container_width=True,
                    on_click=_cancel,
                )
