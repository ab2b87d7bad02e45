"""Async HTTP client that fetches and validates the backend payload.

One call to :func:`fetch_payload` issues one GET, following redirects the
way a browser fetch does. Transport-level failures from httpx are
translated into the :mod:`backend.errors` taxonomy so callers only ever have
to handle :class:`~backend.errors.BackendError`.
"""

import asyncio
from typing import Optional

import httpx

from config.config import JSON_MEDIA_TYPE
from config.models import PanelConfig
from config.schemas import BackendPayload
from utils.logging import get_logger

from .errors import (
    BackendConnectionError,
    BackendError,
    HttpStatusError,
    MalformedJsonError,
    RequestTimeoutError,
    UnexpectedContentTypeError,
)

logger = get_logger(__name__)

REQUEST_HEADERS = {
    "Accept": JSON_MEDIA_TYPE,
    "Content-Type": JSON_MEDIA_TYPE,
}


def _is_json_content_type(content_type: Optional[str]) -> bool:
    """True when the media type (parameters ignored) is application/json."""
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE


async def _get(
    config: PanelConfig,
    transport: Optional[httpx.AsyncBaseTransport],
) -> httpx.Response:
    async with httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(config.timeout_s),
        follow_redirects=True,
    ) as client:
        # Non-streaming get: the body is fully read before the client closes.
        return await client.get(config.api_url, headers=REQUEST_HEADERS)


async def _send(
    config: PanelConfig,
    transport: Optional[httpx.AsyncBaseTransport],
) -> httpx.Response:
    """Run the GET under the total timeout, translating httpx failures."""
    try:
        return await asyncio.wait_for(_get(config, transport), timeout=config.timeout_s)
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        raise RequestTimeoutError(
            f"No response from {config.api_url} within {config.timeout_s:g}s"
        ) from e
    except httpx.UnsupportedProtocol as e:
        raise BackendError(str(e)) from e
    except httpx.TransportError as e:
        raise BackendConnectionError(str(e) or type(e).__name__) from e
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise BackendError(str(e)) from e


def _parse_response(response: httpx.Response, preview_chars: int) -> BackendPayload:
    """Validate status, content type and body of a received response."""
    if not response.is_success:
        raise HttpStatusError(response.status_code, response.reason_phrase)

    content_type = response.headers.get("content-type")
    if not _is_json_content_type(content_type):
        text = response.text
        logger.debug(f"Non-JSON response received: {text!r}")
        raise UnexpectedContentTypeError(content_type, text[:preview_chars])

    try:
        data = response.json()
    except ValueError as e:
        raise MalformedJsonError(f"Invalid JSON in response: {e}") from e

    if not isinstance(data, dict):
        raise MalformedJsonError(
            f"Expected a JSON object but received {type(data).__name__}"
        )
    return data


async def fetch_payload(
    config: PanelConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> BackendPayload:
    """Fetch the JSON payload from ``config.api_url``.

    Args:
        config: Panel configuration (endpoint, timeout, preview length).
        transport: Optional httpx transport, e.g. ``httpx.MockTransport`` in tests.

    Returns:
        The decoded JSON object, unknown keys included.

    Raises:
        RequestTimeoutError: No settlement within ``config.timeout_s``.
        BackendConnectionError: DNS, refused connection or network failure.
        HttpStatusError: Non-2xx status.
        UnexpectedContentTypeError: Content type other than application/json.
        MalformedJsonError: Body is not a JSON object.
        BackendError: Any other request failure (invalid URL, unsupported scheme).
    """
    logger.info(f"Fetching from: {config.api_url}")
    response = await _send(config, transport)

    logger.debug(f"Response status: {response.status_code} {response.reason_phrase}")
    logger.debug(f"Response headers: {dict(response.headers)}")

    data = _parse_response(response, config.body_preview_chars)
    logger.debug(f"Parsed data: {data}")
    return data
