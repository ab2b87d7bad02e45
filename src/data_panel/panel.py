"""State holder for the backend data panel.

``DataPanel`` owns the last payload, the loading flag and the error message.
Only :meth:`DataPanel.refresh` mutates them; hosts read immutable
:class:`PanelState` snapshots and may subscribe to be told when to re-render.

Overlapping refreshes are not queued: a call made while another request is in
flight returns immediately without touching the network or the state.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

import httpx

from backend.client import fetch_payload
from backend.errors import BackendConnectionError, BackendError, RequestTimeoutError
from config.config import CONNECTION_MESSAGE, FAILURE_GREETING, TIMEOUT_MESSAGE
from config.models import PanelConfig
from config.schemas import BackendPayload, FailurePayload
from utils.logging import get_logger

logger = get_logger(__name__)

Listener = Callable[["PanelState"], None]


@dataclass(frozen=True)
class PanelState:
    """Point-in-time view of the panel's three mutable fields."""
    payload: BackendPayload = field(default_factory=dict)
    loading: bool = False
    error: Optional[str] = None


def describe_failure(exc: BackendError) -> str:
    """Turn a failure into the message shown to the user."""
    if isinstance(exc, RequestTimeoutError):
        return TIMEOUT_MESSAGE
    if isinstance(exc, BackendConnectionError):
        return CONNECTION_MESSAGE
    return str(exc)


def failure_payload(message: str) -> FailurePayload:
    return FailurePayload(greeting=FAILURE_GREETING, error=message)


class DataPanel:
    """Fetches, validates and holds the payload shown by the dashboard."""

    def __init__(
        self,
        config: PanelConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the panel with empty state.

        Args:
            config: Immutable endpoint/timeout configuration.
            transport: Optional httpx transport handed to every request.
        """
        self.config = config
        self._transport = transport
        self._payload: BackendPayload = {}
        self._loading = False
        self._error: Optional[str] = None
        self._mounted = False
        self._listeners: List[Listener] = []

    @property
    def endpoint(self) -> str:
        return self.config.api_url

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def state(self) -> PanelState:
        return PanelState(
            payload=dict(self._payload),
            loading=self._loading,
            error=self._error,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for state changes; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)

    async def mount(self) -> None:
        """Run the startup refresh; only the first call does anything."""
        if self._mounted:
            return
        self._mounted = True
        await self.refresh()

    async def refresh(self) -> None:
        """Fetch the payload once and fold the outcome into the panel state."""
        if self._loading:
            logger.debug(f"Refresh ignored, request to {self.endpoint} still in flight")
            return

        self._loading = True
        self._error = None
        try:
            self._notify()
            payload = await fetch_payload(self.config, transport=self._transport)
            self._payload = payload
            self._error = None
        except BackendError as e:
            message = describe_failure(e)
            logger.error(f"Error fetching data from backend ({type(e).__name__}): {e}")
            self._error = message
            self._payload = failure_payload(message)
        finally:
            self._loading = False
            self._notify()
