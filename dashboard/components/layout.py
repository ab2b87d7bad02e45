"""
Shared layout helpers for dashboard components.

Provides common UI utilities for the banner, field rows and diagnostics so
every panel draws them the same way.
"""

from typing import Any, Callable, Optional

import streamlit as st


def format_field_row(label: str, value: Any) -> str:
    """
    Format a labelled value as a single markdown line.

    Args:
        label: Field label, rendered bold
        value: Value to show; ``None`` renders as an empty string

    Returns:
        Markdown string
    """
    shown = "" if value is None else str(value)
    return f"**{label}:** {shown}"


def render_field_row(label: str, value: Any) -> None:
    """Render a labelled value."""
    st.markdown(format_field_row(label, value))


def render_error_banner(slot: Any, message: Optional[str]) -> None:
    """
    Render (or clear) the error banner in a placeholder.

    Args:
        slot: ``st.empty()`` placeholder owning the banner
        message: Error text; falsy clears the banner
    """
    if message:
        slot.error(f"**Error:** {message}")
    else:
        slot.empty()


def render_loading_indicator(slot: Any, loading: bool, label: str) -> None:
    """Show ``label`` in ``slot`` while loading, clear it otherwise."""
    if loading:
        slot.info(f"⏳ {label}")
    else:
        slot.empty()


def render_refresh_button(
    slot: Any,
    label: str,
    disabled: bool,
    on_click: Optional[Callable[[], None]] = None,
    key: str = "refresh",
) -> None:
    """
    Render the manual-refresh control in a placeholder.

    Streamlit widget keys must be unique per script run, so the disabled
    (in-flight) variant uses its own key.
    """
    slot.button(
        label,
        key=f"{key}_loading" if disabled else key,
        disabled=disabled,
        on_click=on_click,
    )


def render_debug_dump(dump: str) -> None:
    """Render a diagnostic JSON dump under a small header."""
    st.caption("Debug Info:")
    st.code(dump, language="json")
