"""QuickNotes: single-screen Streamlit note app.

Run with:
    streamlit run ui/app.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# Ensure the project root is on sys.path so `ui.*` and `quicknotes.*`
# imports resolve regardless of the working directory Streamlit uses.
_project_root = str(Path(__file__).resolve().parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import streamlit as st  # noqa: E402

st.set_page_config(
    page_title="QuickNotes",
    page_icon="📝",
    layout="centered",
)

from quicknotes.config import LOG_FORMAT, apply_locale, settings  # noqa: E402
from ui import state  # noqa: E402
from ui.components import editor, header, note_list  # noqa: E402

logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
apply_locale()

state.ensure_session()

header.render()
state.render_flash()
editor.render()
note_list.render()
