"""Project-wide single-source configuration constants for the backend data panel."""

import os
from typing import Mapping, Optional

from config.models import PanelConfig

# ------ Endpoint configuration -------
API_URL_ENV_VAR: str = "BACKEND_API_URL"
DEFAULT_API_URL: str = "http://localhost:9001/api/message"

# ------ Request policy -------
REQUEST_TIMEOUT_S: float = 10.0     # total budget for one GET
BODY_PREVIEW_CHARS: int = 100       # raw body shown for non-JSON responses
JSON_MEDIA_TYPE: str = "application/json"

# ------ Failure texts -------
FAILURE_GREETING: str = "Failed to connect to backend."
TIMEOUT_MESSAGE: str = "Request timed out"
CONNECTION_MESSAGE: str = "Failed to connect to backend - check if server is running"

# ------ UI strings -------
PANEL_TITLE: str = "Frontend Displaying Backend Data"
LOADING_LABEL: str = "Loading..."
REFRESH_LABEL: str = "Refresh Data"

# ------ Logging -------
LOG_LEVEL_ENV_VAR: str = "DATA_PANEL_LOG_LEVEL"
LOG_FILE_ENV_VAR: str = "DATA_PANEL_LOG_FILE"


def resolve_api_url(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the endpoint override from the environment, else the default.

    Args:
        environ: Mapping to read from. Defaults to ``os.environ``.

    Returns:
        The endpoint URL. Blank overrides are ignored.
    """
    env = os.environ if environ is None else environ
    override = (env.get(API_URL_ENV_VAR) or "").strip()
    return override or DEFAULT_API_URL


def load_panel_config(environ: Optional[Mapping[str, str]] = None) -> PanelConfig:
    """Build the immutable panel configuration once, at panel creation."""
    return PanelConfig(
        api_url=resolve_api_url(environ),
        timeout_s=REQUEST_TIMEOUT_S,
        body_preview_chars=BODY_PREVIEW_CHARS,
    )
