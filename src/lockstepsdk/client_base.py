"""Base client functionality for the Lockstep Platform API."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic_core import to_json

from lockstepsdk._version import __version__
from lockstepsdk.models.common import FetchResult
from lockstepsdk.response import ErrorResult, LockstepResponse

if TYPE_CHECKING:
    from lockstepsdk.client_async import AsyncLockstepApi
    from lockstepsdk.client_sync import LockstepApi

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


class ClientConfig:
    """Configuration for Lockstep Platform API clients."""

    ENVIRONMENTS = {
        "sbx": "https://api.sbx.lockstep.io",
        "prd": "https://api.lockstep.io",
    }
    DEFAULT_ENVIRONMENT = "sbx"
    DEFAULT_TIMEOUT = 30.0
    SDK_NAME = "Python"

    @classmethod
    def resolve_base_url(cls, env: str) -> str:
        """Turn an environment name or an absolute URL into a base URL.

        Raises:
            ValueError: If ``env`` is neither a known environment nor a URL
        """
        if env in cls.ENVIRONMENTS:
            return cls.ENVIRONMENTS[env]
        if env.startswith(("https://", "http://")):
            return env.rstrip("/")
        known = ", ".join(sorted(cls.ENVIRONMENTS))
        raise ValueError(f"Unknown environment {env!r}; use one of {known} or a URL")

    @classmethod
    def default_headers(cls, app_name: str | None = None) -> dict[str, str]:
        """Headers sent with every request regardless of authentication."""
        headers = {
            "User-Agent": f"LockstepSDK-Python/{__version__}",
            "SdkName": cls.SDK_NAME,
            "SdkVersion": __version__,
        }
        if app_name:
            headers["ApplicationName"] = app_name
        return headers


@dataclass(frozen=True)
class QueryOptions:
    """Filtering, sorting, expansion and paging options for a query.

    Every field is optional; unset fields are left out of the query string.
    See the Searchlight query language documentation for ``filter`` and
    ``order`` syntax.
    """

    filter: str | None = None
    include: str | None = None
    order: str | None = None
    page_size: int | None = None
    page_number: int | None = None

    def to_params(self) -> dict[str, Any]:
        params = {
            "filter": self.filter,
            "include": self.include,
            "order": self.order,
            "pageSize": self.page_size,
            "pageNumber": self.page_number,
        }
        return clean_params(params)


def clean_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Drop query parameters whose value is None."""
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None}


def serialize_body(body: Any) -> bytes:
    """Encode a request body as JSON.

    Models are dumped by alias with unset fields left out, so a PATCH only
    carries the fields the caller filled in. Decimal amounts are written as
    JSON numbers with every digit of the Decimal kept.

    Raises:
        ValueError: If an amount is NaN or infinite
    """
    return _encode(_to_python(body)).encode()


def _to_python(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(by_alias=True, exclude_none=True)
    if isinstance(body, (list, tuple)):
        return [_to_python(item) for item in body]
    if isinstance(body, dict):
        return {key: _to_python(value) for key, value in body.items()}
    return body


def _encode(value: Any) -> str:
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Amount {value} cannot be sent as a JSON number")
        return format(value, "f")
    if isinstance(value, dict):
        members = (
            f"{_encode(str(key))}:{_encode(item)}" for key, item in value.items()
        )
        return "{" + ",".join(members) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_encode(item) for item in value) + "]"
    return to_json(value).decode()


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def parse_error_response(response: httpx.Response) -> ErrorResult:
    """Build an API error from a non-2xx response.

    Args:
        response: HTTP response from the API

    Returns:
        ErrorResult carrying the status code and the server's detail
    """
    status_code = response.status_code
    try:
        error_data: Any = response.json()
    except ValueError:
        error_data = None

    if isinstance(error_data, dict):
        message = (
            error_data.get("detail")
            or error_data.get("title")
            or error_data.get("message")
            or response.text
            or f"HTTP {status_code} error"
        )
    else:
        message = response.text or f"HTTP {status_code} error"
        error_data = {}

    return ErrorResult(
        kind="api",
        status_code=status_code,
        message=str(message),
        detail=error_data,
    )


def build_response(
    response: httpx.Response, result_type: type[T] | Any
) -> LockstepResponse[T]:
    """Turn an HTTP response into an envelope of ``result_type``.

    Args:
        response: HTTP response from the API
        result_type: Expected payload type; ``bytes`` returns the raw body

    Returns:
        Successful envelope, or an error envelope for non-2xx responses and
        bodies that do not match ``result_type``
    """
    if not response.is_success:
        return LockstepResponse.fail(parse_error_response(response), response)

    if result_type is bytes:
        return LockstepResponse.ok(response.content, response.status_code, response)

    try:
        result = _adapter(result_type).validate_json(response.content)
    except ValidationError as e:
        logger.warning(
            "Response from %s %s did not match %s: %d error(s)",
            response.request.method,
            response.request.url.path,
            getattr(result_type, "__name__", result_type),
            e.error_count(),
        )
        error = ErrorResult(
            kind="deserialization",
            status_code=response.status_code,
            message=f"Response body could not be read as {result_type!r}",
            detail={"errors": e.errors(include_url=False, include_context=False)},
        )
        return LockstepResponse.fail(error, response)

    return LockstepResponse.ok(result, response.status_code, response)


class PaginatedIterator(Iterator[M]):
    """Iterator over every record matched by a query endpoint.

    Automatically fetches subsequent pages as needed, stopping once
    ``totalCount`` records were produced or a page comes back empty.
    """

    def __init__(
        self,
        client: LockstepApi,
        url: str,
        options: QueryOptions,
        model_class: type[M],
    ) -> None:
        """Initialize paginated iterator.

        Args:
            client: Shared API client used for each page request
            url: Query endpoint path
            options: Query options; ``page_number`` is the first page fetched
            model_class: Pydantic model class for response items
        """
        self.client = client
        self.url = url
        self.options = options
        self.model_class = model_class
        self.current_page = options.page_number or 0
        self.total_count: int | None = None
        self.items: list[M] = []
        self.index = 0
        self.produced = 0
        self._fetched_first_page = False

    def __iter__(self) -> Iterator[M]:
        """Return iterator."""
        return self

    def __next__(self) -> M:
        """Get next item, fetching new page if needed."""
        if not self._fetched_first_page:
            self._fetch_page(self.current_page)
            self._fetched_first_page = True
        elif self.index >= len(self.items):
            if not self.items or self._exhausted():
                raise StopIteration
            self._fetch_page(self.current_page + 1)

        if self.index < len(self.items) and not self._exhausted():
            item = self.items[self.index]
            self.index += 1
            self.produced += 1
            return item

        raise StopIteration

    def _exhausted(self) -> bool:
        return self.total_count is not None and self.produced >= self.total_count

    def _fetch_page(self, page: int) -> None:
        """Fetch a specific page of results.

        Args:
            page: Page number to fetch

        Raises:
            LockstepAPIError: If the page request failed
        """
        params = self.options.to_params()
        params["pageNumber"] = page

        envelope = self.client.request(
            "GET", self.url, FetchResult[self.model_class], params=params
        )
        page_result = envelope.raise_for_error()

        if not self._fetched_first_page and page_result.page_size:
            # Records on the pages before the starting page count as produced.
            self.produced = page * page_result.page_size
        self.current_page = page
        self.total_count = page_result.total_count
        self.items = list(page_result.records or [])
        self.index = 0


class AsyncPaginatedIterator(Generic[M]):
    """Async iterator over every record matched by a query endpoint.

    Automatically fetches subsequent pages as needed.
    """

    def __init__(
        self,
        client: AsyncLockstepApi,
        url: str,
        options: QueryOptions,
        model_class: type[M],
    ) -> None:
        """Initialize async paginated iterator.

        Args:
            client: Shared async API client used for each page request
            url: Query endpoint path
            options: Query options; ``page_number`` is the first page fetched
            model_class: Pydantic model class for response items
        """
        self.client = client
        self.url = url
        self.options = options
        self.model_class = model_class
        self.current_page = options.page_number or 0
        self.total_count: int | None = None
        self.items: list[M] = []
        self.index = 0
        self.produced = 0
        self._fetched_first_page = False

    def __aiter__(self) -> AsyncIterator[M]:
        """Return async iterator."""
        return self

    async def __anext__(self) -> M:
        """Get next item, fetching new page if needed."""
        if not self._fetched_first_page:
            await self._fetch_page(self.current_page)
            self._fetched_first_page = True
        elif self.index >= len(self.items):
            if not self.items or self._exhausted():
                raise StopAsyncIteration
            await self._fetch_page(self.current_page + 1)

        if self.index < len(self.items) and not self._exhausted():
            item = self.items[self.index]
            self.index += 1
            self.produced += 1
            return item

        raise StopAsyncIteration

    def _exhausted(self) -> bool:
        return self.total_count is not None and self.produced >= self.total_count

    async def _fetch_page(self, page: int) -> None:
        """Fetch a specific page of results.

        Args:
            page: Page number to fetch

        Raises:
            LockstepAPIError: If the page request failed
        """
        params = self.options.to_params()
        params["pageNumber"] = page

        envelope = await self.client.request(
            "GET", self.url, FetchResult[self.model_class], params=params
        )
        page_result = envelope.raise_for_error()

        if not self._fetched_first_page and page_result.page_size:
            # Records on the pages before the starting page count as produced.
            self.produced = page * page_result.page_size
        self.current_page = page
        self.total_count = page_result.total_count
        self.items = list(page_result.records or [])
        self.index = 0
