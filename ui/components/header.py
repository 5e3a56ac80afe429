"""Title bar with the theme selector."""

from __future__ import annotations

import streamlit as st

from quicknotes.errors import PersistenceError
from quicknotes.models import ThemeMode
from quicknotes.theme import is_dark
from ui import state

_THEME_LABELS: dict[ThemeMode, str] = {
    ThemeMode.LIGHT: "☀️ Light",
    ThemeMode.DARK: "🌙 Dark",
    ThemeMode.SYSTEM: "⚙️ System",
}

LIGHT_PALETTE: dict[str, str] = {
    "primary": "#3F51B5",
    "background": "#F5F5F5",
    "surface": "#FFFFFF",
    "on_surface": "#1C1B1F",
    "on_surface_variant": "#49454F",
}

DARK_PALETTE: dict[str, str] = {
    "primary": "#8B9DC3",
    "background": "#121212",
    "surface": "#1E1E1E",
    "on_surface": "#E6E1E5",
    "on_surface_variant": "#CAC4D0",
}


def palette_for(mode: ThemeMode, system_dark: bool) -> dict[str, str]:
    """Colour scheme for ``mode`` given the host's appearance."""
    return DARK_PALETTE if is_dark(mode, system_dark) else LIGHT_PALETTE


def _palette_css(colors: dict[str, str]) -> str:
    return f"""
<style>
.stApp {{ background-color: {colors["background"]}; color: {colors["on_surface"]}; }}
.stApp h1 {{ color: {colors["primary"]}; }}
.stApp [data-testid="stVerticalBlockBorderWrapper"] {{ background-color: {colors["surface"]}; }}
.stApp [data-testid="stCaptionContainer"] {{ color: {colors["on_surface_variant"]}; }}
</style>
"""


def _on_theme_change() -> None:
    mode = st.session_state["theme_select"]
    try:
        state.get_theme().save(mode)
    except PersistenceError as e:
        state.flash("error", f"Could not save theme: {e}")


def render() -> ThemeMode:
    """Render the title row and return the active theme mode."""
    current = state.get_theme().load()
    title_col, theme_col = st.columns([3, 1], vertical_alignment="bottom")
    with title_col:
        st.title("📝 Notes")
    with theme_col:
        st.selectbox(
            "Theme",
            options=list(ThemeMode),
            index=list(ThemeMode).index(current),
            format_func=lambda m: _THEME_LABELS[m],
            key="theme_select",
            on_change=_on_theme_change,
        )
    mode = st.session_state.get("theme_select", current)
    system_dark = st.context.theme.type == "dark"
    st.markdown(_palette_css(palette_for(mode, system_dark)), unsafe_allow_html=True)
    return mode
