"""
Exceptions raised by the discord_bots_org client library.

This module defines a hierarchy of custom exceptions so callers can handle
failures at whatever granularity they need. Every concrete error carries an
`ErrorKind`, which makes the set of failures closed and easy to report.
"""

import enum
from typing import Optional

import httpx


class ErrorKind(enum.Enum):
    """The closed set of failure kinds a client call can produce."""

    INVALID_URL = "invalid_url"
    JSON_DECODE = "json_decode"
    TRANSPORT_FAILURE = "transport_failure"
    BAD_RESPONSE = "bad_response"
    INVALID_RESPONSE = "invalid_response"
    UNAUTHORIZED = "unauthorized"
    INVALID_HEADER_VALUE = "invalid_header_value"


class DiscordBotsOrgError(Exception):
    """Base exception for all library errors."""

    kind: Optional[ErrorKind] = None


# --- Usage Errors ---

class BuilderConsumedError(DiscordBotsOrgError):
    """Raised when a builder is used again after `build()` consumed it."""
    pass


# --- Request Construction Errors ---

class InvalidUrlError(DiscordBotsOrgError):
    """Raised when a URL or its query parameters cannot be built."""

    kind = ErrorKind.INVALID_URL


class InvalidHeaderValueError(DiscordBotsOrgError):
    """Raised when an authorization token cannot be sent as a header."""

    kind = ErrorKind.INVALID_HEADER_VALUE


# --- Infrastructure Errors ---

class InfrastructureError(DiscordBotsOrgError):
    """Base class for errors raised while talking to the service."""
    pass


class TransportFailureError(InfrastructureError):
    """Raised when the request never produced a response (connection,
    timeout, protocol failure). The httpx error is kept as `__cause__`."""

    kind = ErrorKind.TRANSPORT_FAILURE


class ResponseError(InfrastructureError):
    """Base class for non-2xx responses; keeps the raw response."""

    def __init__(self, message: str, response: httpx.Response):
        super().__init__(message)
        self.response = response

    @property
    def status_code(self) -> int:
        return self.response.status_code


class BadResponseError(ResponseError):
    """Raised when the service rejects the request as malformed (400)."""

    kind = ErrorKind.BAD_RESPONSE


class UnauthorizedError(ResponseError):
    """Raised when the token is missing, wrong, or not allowed (401/403)."""

    kind = ErrorKind.UNAUTHORIZED


class InvalidResponseError(ResponseError):
    """Raised for any other unsuccessful status code."""

    kind = ErrorKind.INVALID_RESPONSE


class JsonDecodeError(InfrastructureError):
    """Raised when a response body is not JSON or does not match the
    expected model."""

    kind = ErrorKind.JSON_DECODE

    def __init__(self, message: str, response: Optional[httpx.Response] = None):
        super().__init__(message)
        self.response = response
