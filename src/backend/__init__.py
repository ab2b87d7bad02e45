"""HTTP access to the backend that feeds the data panel."""

from .client import fetch_payload
from .errors import (
    BackendConnectionError,
    BackendError,
    HttpStatusError,
    MalformedJsonError,
    RequestTimeoutError,
    UnexpectedContentTypeError,
)

__all__ = [
    "fetch_payload",
    "BackendError",
    "BackendConnectionError",
    "HttpStatusError",
    "MalformedJsonError",
    "RequestTimeoutError",
    "UnexpectedContentTypeError",
]
