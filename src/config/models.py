"""Configuration models and data structures."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PanelConfig:
    """Configuration for the backend data panel."""
    api_url: str
    timeout_s: float = 10.0
    body_preview_chars: int = 100
