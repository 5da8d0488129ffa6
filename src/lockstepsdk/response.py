"""Uniform success/error envelope returned by every API call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Literal, TypeVar

import httpx

from lockstepsdk.exceptions import (
    LockstepAPIError,
    LockstepAuthError,
    LockstepDeserializationError,
    LockstepError,
    LockstepMethodNotAllowedError,
    LockstepNotFoundError,
    LockstepRateLimitError,
    LockstepServerError,
    LockstepUnsupportedMediaTypeError,
    LockstepValidationError,
)

T = TypeVar("T")

ErrorKind = Literal["api", "deserialization"]


@dataclass(frozen=True)
class ErrorResult:
    """Details of a failed call.

    Attributes:
        kind: ``"api"`` for non-2xx responses, ``"deserialization"`` when a
            successful response did not match the declared result type
        status_code: HTTP status code of the response
        message: Human readable summary taken from the server when possible
        detail: Parsed problem details body, empty when it was not JSON
    """

    kind: ErrorKind
    status_code: int | None
    message: str
    detail: dict[str, Any] = field(default_factory=dict)

    def to_exception(
        self, response: httpx.Response | None = None
    ) -> LockstepError:
        """Build the exception matching this error."""
        if self.kind == "deserialization":
            return LockstepDeserializationError(
                self.message, self.status_code, self.detail, response
            )
        request = response.request if response is not None else None
        return exception_for_status(
            self.status_code, self.message, self.detail, request, response
        )


@dataclass(frozen=True)
class LockstepResponse(Generic[T]):
    """Outcome of one API call.

    Exactly one of ``result`` and ``error`` is set, as told by ``success``.
    """

    success: bool
    status_code: int | None = None
    result: T | None = None
    error: ErrorResult | None = None
    response: httpx.Response | None = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("A successful response cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("A failed response must carry an error")
        if not self.success and self.result is not None:
            raise ValueError("A failed response cannot carry a result")

    @classmethod
    def ok(
        cls, result: T, status_code: int, response: httpx.Response | None = None
    ) -> LockstepResponse[T]:
        return cls(
            success=True, status_code=status_code, result=result, response=response
        )

    @classmethod
    def fail(
        cls, error: ErrorResult, response: httpx.Response | None = None
    ) -> LockstepResponse[T]:
        return cls(
            success=False,
            status_code=error.status_code,
            error=error,
            response=response,
        )

    @property
    def is_error(self) -> bool:
        return not self.success

    def raise_for_error(self) -> T:
        """Return the result, or raise the exception matching the error.

        Raises:
            LockstepAPIError: Subclass chosen from the status code, or
                LockstepDeserializationError for malformed bodies
        """
        if self.error is not None:
            raise self.error.to_exception(self.response)
        return self.result  # type: ignore[return-value]


def exception_for_status(
    status_code: int | None,
    message: str,
    error_data: dict[str, Any],
    request: httpx.Request | None = None,
    response: httpx.Response | None = None,
) -> LockstepAPIError:
    """Map an HTTP status code to the matching LockstepAPIError subclass."""
    if status_code == 400:
        return LockstepValidationError(
            message, status_code, error_data, request, response
        )
    elif status_code in (401, 403):
        return LockstepAuthError(message, status_code, error_data, request, response)
    elif status_code == 404:
        return LockstepNotFoundError(
            message, status_code, error_data, request, response
        )
    elif status_code == 405:
        return LockstepMethodNotAllowedError(
            message, status_code, error_data, request, response
        )
    elif status_code == 415:
        return LockstepUnsupportedMediaTypeError(
            message, status_code, error_data, request, response
        )
    elif status_code == 429:
        return LockstepRateLimitError(
            message, status_code, error_data, request, response
        )
    elif status_code is not None and status_code >= 500:
        return LockstepServerError(message, status_code, error_data, request, response)
    else:
        return LockstepAPIError(message, status_code, error_data, request, response)
