"""Backend data panel state."""

from .panel import DataPanel, PanelState, describe_failure, failure_payload

__all__ = ["DataPanel", "PanelState", "describe_failure", "failure_payload"]
