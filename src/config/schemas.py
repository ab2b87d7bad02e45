"""Schema definitions for structured data used in the project."""

from typing import Optional, TypedDict


class BackendPayload(TypedDict, total=False):
    greeting: str
    version: str
    timestamp: str  # ISO8601, any offset
    error: str      # only set on the failure sentinel
    # unknown keys from the backend are kept as-is


class FailurePayload(TypedDict):
    greeting: str
    error: str


class PanelView(TypedDict):
    status: str  # "loading" | "error" | "success" | "empty"
    title: str
    loading: bool
    error: Optional[str]
    endpoint: str
    greeting: str
    version: Optional[str]
    timestamp: Optional[str]  # already localized for display
    button_label: str
    button_disabled: bool
    debug_dump: str
