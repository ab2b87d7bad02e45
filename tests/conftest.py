"""Test configuration and shared fixtures."""

from typing import Callable, List

import httpx
import pytest

from config.models import PanelConfig

TEST_API_URL = "http://backend.test/api/message"


@pytest.fixture
def panel_config():
    """Panel configuration pointing at a fake host."""
    return PanelConfig(api_url=TEST_API_URL, timeout_s=10.0, body_preview_chars=100)


@pytest.fixture
def fast_timeout_config():
    """Panel configuration with a timeout short enough for tests."""
    return PanelConfig(api_url=TEST_API_URL, timeout_s=0.05, body_preview_chars=100)


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_transport(recorded_requests) -> Callable[..., httpx.MockTransport]:
    """Build a MockTransport that records requests and delegates to ``handler``."""

    def _make(handler):
        async def _handle(request: httpx.Request):
            recorded_requests.append(request)
            result = handler(request)
            if hasattr(result, "__await__"):
                result = await result
            return result

        return httpx.MockTransport(_handle)

    return _make


@pytest.fixture
def sample_payload():
    """Payload with every field the panel knows about plus an extra one."""
    return {
        "greeting": "Hi",
        "version": "1.0.0",
        "timestamp": "2023-01-01T00:00:00Z",
        "region": "eu-north-1",
    }
