from __future__ import annotations
from typing import Optional


class KrakenError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class CredentialsError(KrakenError):
    """The private key is not valid base64."""


class MissingCredentialsError(KrakenError):
    """A private endpoint was dispatched by a client without credentials."""


class InvalidUserAgentError(KrakenError):
    """The user agent cannot be sent as an HTTP header value."""


class TransportError(KrakenError):
    """Network/timeout/TLS failure before a response was received."""

    def __init__(
        self,
        message: str,
        *,
        method: Optional[str] = None,
        url: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.method = method
        self.url = url


class DecodeError(KrakenError):
    """
    The response body did not match the envelope or the requested result type.

    `field` names the part that failed: "envelope", "error" or "result".
    When only the result failed, `errors` still holds the decoded error list.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int,
        field: str,
        errors: Optional[list[str]] = None,
        body: Optional[bytes] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message, cause=cause)
        self.status = status
        self.field = field
        self.errors = list(errors or [])
        self.body = body[:512] if body else b""

    def __str__(self) -> str:
        return f"{self.args[0]} (status={self.status}, field={self.field})"


class ServiceError(KrakenError):
    """Raised on request by Response.raise_for_errors()."""

    def __init__(self, errors: list[str], status: int):
        super().__init__(", ".join(errors) or f"HTTP {status}")
        self.errors = list(errors)
        self.status = status
