"""Exception hierarchy for the Aiven API client.

Every public operation either returns its response model or raises one of
the exceptions below. All of them derive from :class:`AivenError`, so a
single ``except AivenError`` catches any failure originating from a call.
"""

from typing import Any


class AivenError(Exception):
    """Base exception for all Aiven client errors."""


class ValidationError(AivenError):
    """Raised when a local precondition fails before any request is sent.

    Attributes:
        field: Name of the offending parameter.
        reason: Human readable description of the problem.
    """

    def __init__(self, field: str, reason: str):
        super().__init__(f"Invalid value for '{field}': {reason}")
        self.field = field
        self.reason = reason


class TransportError(AivenError):
    """Raised when the HTTP exchange fails at the connection level.

    Covers DNS resolution, TLS, connect and read timeouts, and connection
    resets. The original ``httpx`` exception is kept as ``cause`` and as
    ``__cause__``.
    """

    def __init__(self, cause: Exception):
        super().__init__(f"HTTP transport failure: {cause!r}")
        self.cause = cause


class DeserializationError(AivenError):
    """Raised when a successful response body does not match the schema.

    Attributes:
        raw_snippet: Leading part of the response body.
        cause: The underlying JSON or pydantic validation error.
    """

    def __init__(self, raw_snippet: str, cause: Exception):
        super().__init__(f"Failed to deserialize response: {cause}")
        self.raw_snippet = raw_snippet
        self.cause = cause


class RemoteError(AivenError):
    """Raised when the API answers with a non-success status code.

    Attributes:
        status: HTTP status code of the response.
        messages: Error messages reported by the API. When the error body
            could not be parsed this holds the raw body text instead.
        errors: Structured error entries, empty when the body did not parse.
    """

    def __init__(
        self,
        status: int,
        messages: list[str],
        errors: list[Any] | None = None,
    ):
        joined = "; ".join(messages) if messages else "no error message"
        super().__init__(f"API returned status {status}: {joined}")
        self.status = status
        self.messages = messages
        self.errors = errors or []
