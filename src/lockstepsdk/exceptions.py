"""Exceptions for the Lockstep SDK."""

from typing import Any

import httpx


class LockstepError(Exception):
    """Base exception for everything raised by the Lockstep SDK."""


class LockstepTransportError(LockstepError):
    """Raised when no HTTP response was received.

    Covers DNS failures, refused connections, TLS errors and timeouts. The
    underlying httpx exception is available as ``__cause__``.
    """

    def __init__(self, message: str, method: str, url: str) -> None:
        super().__init__(message)
        self.message = message
        self.method = method
        self.url = url

    def __str__(self) -> str:
        return f"{self.method} {self.url}: {self.message}"


class LockstepAPIError(httpx.HTTPStatusError, LockstepError):
    """Base exception for errors reported by the Lockstep Platform.

    Extends httpx.HTTPStatusError so users can catch both LockstepAPIError
    and httpx.HTTPStatusError to handle API errors.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
        request: httpx.Request | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        """Initialize LockstepAPIError.

        Args:
            message: Error message
            status_code: HTTP status code from the API response
            response_data: Parsed error body from the API
            request: The request that caused the error
            response: The response from the API
        """
        if request is not None and response is not None:
            super().__init__(message, request=request, response=response)
        else:
            Exception.__init__(self, message)

        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class LockstepAuthError(LockstepAPIError):
    """Raised when authentication fails (401/403)."""

    pass


class LockstepRateLimitError(LockstepAPIError):
    """Raised when the platform throttles the caller (429)."""

    pass


class LockstepNotFoundError(LockstepAPIError):
    """Raised when a resource is not found (404)."""

    pass


class LockstepValidationError(LockstepAPIError):
    """Raised when request validation fails (400)."""

    pass


class LockstepMethodNotAllowedError(LockstepAPIError):
    """Raised when HTTP method is not allowed (405)."""

    pass


class LockstepUnsupportedMediaTypeError(LockstepAPIError):
    """Raised when media type is not supported (415)."""

    pass


class LockstepServerError(LockstepAPIError):
    """Raised when server encounters an error (5xx)."""

    pass


class LockstepDeserializationError(LockstepError):
    """Raised when a successful response does not match the declared type.

    Not an HTTP status failure: the server answered 2xx, so this does not
    extend httpx.HTTPStatusError.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}
        self.response = response

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message
