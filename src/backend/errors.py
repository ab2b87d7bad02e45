"""Failure kinds raised while fetching the backend payload."""


class BackendError(Exception):
    """Base class for every failure surfaced by the backend client."""


class RequestTimeoutError(BackendError, TimeoutError):
    """The request did not settle within the configured timeout."""


class BackendConnectionError(BackendError, ConnectionError):
    """The transport could not reach the backend (DNS, refused, network)."""


class HttpStatusError(BackendError):
    """The backend answered with a non-success status code."""

    def __init__(self, status: int, status_text: str):
        self.status = status
        self.status_text = status_text
        super().__init__(f"HTTP error! status: {status} - {status_text}")


class UnexpectedContentTypeError(BackendError):
    """The backend answered, but not with ``application/json``."""

    def __init__(self, content_type: str | None, body_prefix: str):
        self.content_type = content_type
        self.body_prefix = body_prefix
        super().__init__(
            f"Expected JSON but received: {content_type}. Response: {body_prefix}..."
        )


class MalformedJsonError(BackendError, ValueError):
    """The body claimed to be JSON but did not decode to a JSON object."""
