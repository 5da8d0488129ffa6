"""Lockstep SDK - Python client library for the Lockstep Platform API."""

from lockstepsdk._version import __version__
from lockstepsdk.client_async import (
    AsyncCompaniesClient,
    AsyncInvoicesClient,
    AsyncLockstepApi,
    AsyncNotesClient,
)
from lockstepsdk.client_base import ClientConfig, QueryOptions
from lockstepsdk.client_sync import (
    CompaniesClient,
    InvoicesClient,
    LockstepApi,
    NotesClient,
)
from lockstepsdk.exceptions import (
    LockstepAPIError,
    LockstepAuthError,
    LockstepDeserializationError,
    LockstepError,
    LockstepNotFoundError,
    LockstepRateLimitError,
    LockstepServerError,
    LockstepTransportError,
    LockstepValidationError,
)
from lockstepsdk.response import ErrorResult, LockstepResponse

__all__ = [
    "__version__",
    "LockstepApi",
    "AsyncLockstepApi",
    "CompaniesClient",
    "InvoicesClient",
    "NotesClient",
    "AsyncCompaniesClient",
    "AsyncInvoicesClient",
    "AsyncNotesClient",
    "ClientConfig",
    "QueryOptions",
    "LockstepResponse",
    "ErrorResult",
    "LockstepError",
    "LockstepAPIError",
    "LockstepAuthError",
    "LockstepDeserializationError",
    "LockstepNotFoundError",
    "LockstepRateLimitError",
    "LockstepServerError",
    "LockstepTransportError",
    "LockstepValidationError",
]
