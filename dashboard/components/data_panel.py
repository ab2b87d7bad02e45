"""
Backend data panel component.

Shows the greeting, version and timestamp returned by the configured backend,
with loading and error states and a manual refresh.
Use `render_panel()` to draw the panel; `build_panel_view()` is the pure part.
"""

import asyncio
import json
from datetime import tzinfo
from typing import Any, Dict, Optional

import streamlit as st

from config.config import LOADING_LABEL, PANEL_TITLE, REFRESH_LABEL, load_panel_config
from config.schemas import PanelView
from dashboard.components.layout import (
    render_debug_dump,
    render_error_banner,
    render_field_row,
    render_loading_indicator,
    render_refresh_button,
)
from data_panel import DataPanel, PanelState
from utils.datetime import to_local_display
from utils.logging import get_logger

logger = get_logger(__name__)

PANEL_SESSION_KEY = "data_panel"
REFRESH_REQUEST_KEY = "_data_panel_refresh_requested"
REFRESH_BUTTON_KEY = "data_panel_refresh"


def _present(value: Any) -> Optional[str]:
    """Return ``value`` as text when it is worth displaying, else None."""
    if value is None or value == "":
        return None
    return str(value)


def _panel_status(state: PanelState) -> str:
    if state.loading:
        return "loading"
    if state.error:
        return "error"
    if state.payload:
        return "success"
    return "empty"


def build_panel_view(
    state: PanelState,
    endpoint: str,
    tz: Optional[tzinfo] = None,
) -> PanelView:
    """
    Derive everything the panel displays from a state snapshot.

    Args:
        state: Current panel state
        endpoint: Endpoint URL shown for diagnostics
        tz: Timezone for the timestamp row; defaults to the local zone

    Returns:
        PanelView with display-ready values
    """
    payload = state.payload
    raw_timestamp = _present(payload.get("timestamp"))

    return PanelView(
        status=_panel_status(state),
        title=PANEL_TITLE,
        loading=state.loading,
        error=state.error,
        endpoint=endpoint,
        greeting=_present(payload.get("greeting")) or "",
        version=_present(payload.get("version")),
        timestamp=to_local_display(raw_timestamp, tz) if raw_timestamp else None,
        button_label=LOADING_LABEL if state.loading else REFRESH_LABEL,
        button_disabled=state.loading,
        debug_dump=json.dumps(payload, indent=2, ensure_ascii=False, default=str),
    )


def _get_panel() -> DataPanel:
    """Return the session's panel, creating it on first use (component mount)."""
    if PANEL_SESSION_KEY not in st.session_state:
        st.session_state[PANEL_SESSION_KEY] = DataPanel(load_panel_config())
    return st.session_state[PANEL_SESSION_KEY]


def _request_refresh() -> None:
    st.session_state[REFRESH_REQUEST_KEY] = True


class _Slots:
    """Placeholders redrawn on every panel state change."""

    def __init__(self):
        self.loading = st.empty()
        self.error = st.empty()
        self.body = st.empty()
        self.button = st.empty()
        self.debug = st.empty()

    def draw(self, view: PanelView) -> None:
        render_loading_indicator(self.loading, view["loading"], LOADING_LABEL)
        render_error_banner(self.error, view["error"])

        with self.body.container():
            render_field_row("API URL", view["endpoint"])
            render_field_row("Message", view["greeting"])
            if view["version"]:
                render_field_row("Backend Version", view["version"])
            if view["timestamp"]:
                render_field_row("Last updated", view["timestamp"])

        render_refresh_button(
            self.button,
            view["button_label"],
            disabled=view["button_disabled"],
            on_click=_request_refresh,
            key=REFRESH_BUTTON_KEY,
        )

        with self.debug.container():
            render_debug_dump(view["debug_dump"])


def render_panel() -> Dict[str, Any]:
    """
    Render the backend data panel.

    Runs the startup refresh on first render of a session and a manual
    refresh when the button was clicked on the previous run.

    Returns:
        Dict with ``status`` and the final ``view``
    """
    panel = _get_panel()
    st.title(PANEL_TITLE)
    slots = _Slots()

    refresh_requested = st.session_state.pop(REFRESH_REQUEST_KEY, False)
    if not panel.mounted or refresh_requested:
        unsubscribe = panel.subscribe(
            lambda state: slots.draw(build_panel_view(state, panel.endpoint))
        )
        try:
            if panel.mounted:
                asyncio.run(panel.refresh())
            else:
                asyncio.run(panel.mount())
        finally:
            unsubscribe()
    else:
        slots.draw(build_panel_view(panel.state, panel.endpoint))

    view = build_panel_view(panel.state, panel.endpoint)
    logger.debug(f"Data panel rendered with status={view['status']}")
    return {"status": view["status"], "view": view}
