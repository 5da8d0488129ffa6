"""Asynchronous Lockstep Platform API client."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID

import httpx

from lockstepsdk.auth import BaseAuth, resolve_auth
from lockstepsdk.client_base import (
    AsyncPaginatedIterator,
    ClientConfig,
    QueryOptions,
    build_response,
    clean_params,
    serialize_body,
)
from lockstepsdk.exceptions import LockstepTransportError
from lockstepsdk.models import (
    ActionResultModel,
    AtRiskInvoiceSummaryModel,
    BulkDeleteRequestModel,
    CompanyModel,
    CustomerDetailsModel,
    CustomerSummaryModel,
    DeleteResult,
    FetchResult,
    InvoiceModel,
    InvoiceSummaryModel,
    InvoiceSummaryTotalsModel,
    LockstepModel,
    NoteModel,
    SummaryFetchResult,
)
from lockstepsdk.response import LockstepResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=LockstepModel)


class AsyncLockstepApi:
    """Asynchronous client for the Lockstep Platform API.

    Holds the configuration, credentials and connection pool shared by the
    resource clients exposed as ``companies``, ``invoices`` and ``notes``.
    """

    def __init__(
        self,
        env: str = ClientConfig.DEFAULT_ENVIRONMENT,
        *,
        api_key: str | None = None,
        bearer_token: str | None = None,
        app_name: str | None = None,
        timeout: float = ClientConfig.DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize Lockstep client.

        Args:
            env: ``"sbx"``, ``"prd"`` or the absolute URL of a custom server
            api_key: Lockstep Platform API key
            bearer_token: JWT for a signed in user
            app_name: Name of the calling application, sent for diagnostics
            timeout: Request timeout in seconds

        Raises:
            ValueError: If the environment is unknown, or if not exactly one
                of api_key and bearer_token is provided
        """
        self.base_url = ClientConfig.resolve_base_url(env)
        self.timeout = timeout
        self.auth: BaseAuth = resolve_auth(api_key, bearer_token)

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=ClientConfig.default_headers(app_name),
        )

        self.companies = AsyncCompaniesClient(self)
        self.invoices = AsyncInvoicesClient(self)
        self.notes = AsyncNotesClient(self)

    async def __aenter__(self) -> AsyncLockstepApi:
        """Context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def request(
        self,
        method: str,
        path: str,
        result_type: type[T] | Any,
        params: dict[str, Any] | None = None,
        body: Any = None,
    ) -> LockstepResponse[T]:
        """Send one request and wrap the outcome in an envelope.

        Args:
            method: HTTP method
            path: API path with identifiers already substituted
            result_type: Type the response body is read into
            params: Query parameters; None values are left out
            body: Request body, sent as JSON when not None

        Returns:
            Envelope holding the result or the error reported by the API

        Raises:
            LockstepTransportError: If no response was received
        """
        headers = self.auth.get_headers()
        kwargs: dict[str, Any] = {}
        query = clean_params(params)
        if query:
            kwargs["params"] = query
        if body is not None:
            headers["Content-Type"] = "application/json"
            kwargs["content"] = serialize_body(body)

        try:
            response = await self.client.request(
                method=method,
                url=path,
                headers=headers,
                **kwargs,
            )
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %r", method, path, e)
            raise LockstepTransportError(
                str(e) or type(e).__name__, method, path
            ) from e

        logger.debug("%s %s -> %d", method, path, response.status_code)
        return build_response(response, result_type)


class AsyncResourceClient(Generic[ModelT]):
    """Operations shared by every Lockstep Platform resource.

    Subclasses set ``path`` and ``model`` and add resource specific views.
    """

    path: ClassVar[str]
    model: type[ModelT]

    def __init__(self, client: AsyncLockstepApi) -> None:
        """Initialize resource client.

        Args:
            client: Parent AsyncLockstepApi instance
        """
        self._client = client

    async def retrieve(
        self, id: UUID | str, include: str | None = None
    ) -> LockstepResponse[ModelT]:
        """Retrieve one record by its Lockstep Platform id.

        Args:
            id: Lockstep Platform id; NOT the customer's ERP key
            include: Comma separated collections to embed in the result

        Returns:
            Envelope with the record
        """
        return await self._client.request(
            "GET", f"{self.path}/{id}", self.model, params={"include": include}
        )

    async def update(
        self, id: UUID | str, body: dict[str, Any] | LockstepModel
    ) -> LockstepResponse[ModelT]:
        """Change the given fields of one record, leaving the rest alone.

        Args:
            id: Lockstep Platform id of the record to update
            body: Field names and new values, or a model with only the
                fields to change set

        Returns:
            Envelope with the updated record
        """
        return await self._client.request(
            "PATCH", f"{self.path}/{id}", self.model, body=body
        )

    async def create(self, body: Sequence[ModelT]) -> LockstepResponse[list[ModelT]]:
        """Create one or more records.

        Args:
            body: Records to create

        Returns:
            Envelope with the records as created
        """
        return await self._client.request(
            "POST", self.path, list[self.model], body=list(body)
        )

    async def query(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LockstepResponse[FetchResult[ModelT]]:
        """Query records using Searchlight filtering, sorting and paging.

        Args:
            filter: Searchlight filter expression
            include: Comma separated collections to embed in each record
            order: Searchlight sort order
            page_size: Records per page
            page_number: Zero based page number

        Returns:
            Envelope with one page of records
        """
        options = QueryOptions(filter, include, order, page_size, page_number)
        return await self._query_view("query", FetchResult[self.model], options)

    def iter_query(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> AsyncPaginatedIterator[ModelT]:
        """Iterate over every record matched by a query.

        Pages are requested lazily. Unlike ``query`` this raises the
        matching LockstepAPIError if a page request fails.

        Returns:
            Async iterator of records
        """
        return AsyncPaginatedIterator(
            client=self._client,
            url=f"{self.path}/query",
            options=QueryOptions(filter, include, order, page_size, page_number),
            model_class=self.model,
        )

    async def _delete(
        self, id: UUID | str, result_type: type[T]
    ) -> LockstepResponse[T]:
        return await self._client.request("DELETE", f"{self.path}/{id}", result_type)

    async def _query_view(
        self, view: str, result_type: type[T] | Any, options: QueryOptions
    ) -> LockstepResponse[T]:
        return await self._client.request(
            "GET", f"{self.path}/{view}", result_type, params=options.to_params()
        )


class AsyncCompaniesClient(AsyncResourceClient[CompanyModel]):
    """API methods related to Companies.

    A Company represents a customer, a vendor, or a company within the
    organization of the account holder.
    """

    path = "/api/v1/Companies"
    model = CompanyModel

    async def retrieve_company(
        self, id: UUID | str, include: str | None = None
    ) -> LockstepResponse[CompanyModel]:
        """Retrieve a Company.

        Args:
            id: Lockstep Platform id of the Company
            include: Attachments, Contacts, CustomFields, Invoices, Notes,
                Classification
        """
        return await self.retrieve(id, include)

    async def update_company(
        self, id: UUID | str, body: dict[str, Any] | CompanyModel
    ) -> LockstepResponse[CompanyModel]:
        """Update a Company, changing only the fields supplied.

        Args:
            id: Lockstep Platform id of the Company
            body: Fields to change, as camelCase keys or a CompanyModel with
                only those fields set

        Returns:
            Envelope with the updated Company
        """
        return await self.update(id, body)

    async def disable_company(
        self, id: UUID | str
    ) -> LockstepResponse[ActionResultModel]:
        """Disable the Company referred to by this id."""
        return await self._delete(id, ActionResultModel)

    async def create_companies(
        self, body: Sequence[CompanyModel]
    ) -> LockstepResponse[list[CompanyModel]]:
        """Create one or more Companies.

        Args:
            body: Companies to create

        Returns:
            Envelope with the Companies as created
        """
        return await self.create(body)

    async def query_companies(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LockstepResponse[FetchResult[CompanyModel]]:
        """Query Companies using Searchlight filtering, sorting and paging.

        Args:
            filter: Searchlight filter expression
            include: Attachments, Contacts, CustomFields, Invoices, Notes,
                Classification
            order: Searchlight sort order
            page_size: Records per page
            page_number: Zero based page number

        Returns:
            Envelope with one page of Companies
        """
        return await self.query(filter, include, order, page_size, page_number)

    async def query_customer_summary(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LockstepResponse[FetchResult[CustomerSummaryModel]]:
        """Query the Customer Summary view.

        The view adds receivables figures such as outstanding amount and DSO
        to each customer.
        """
        options = QueryOptions(filter, include, order, page_size, page_number)
        return await self._query_view(
            "views/customer-summary", FetchResult[CustomerSummaryModel], options
        )

    async def retrieve_customer_detail(
        self, id: UUID | str
    ) -> LockstepResponse[CustomerDetailsModel]:
        """Retrieve the Customer Details view of a Company.

        Args:
            id: Lockstep Platform id of the Company; NOT the customer's ERP key
        """
        return await self._client.request(
            "GET", f"{self.path}/views/customer-details/{id}", CustomerDetailsModel
        )


class AsyncInvoicesClient(AsyncResourceClient[InvoiceModel]):
    """API methods related to Invoices.

    An Invoice represents a bill sent from one company to another.
    """

    path = "/api/v1/Invoices"
    model = InvoiceModel

    async def retrieve_invoice(
        self, id: UUID | str, include: str | None = None
    ) -> LockstepResponse[InvoiceModel]:
        """Retrieve an Invoice.

        Args:
            id: Lockstep Platform id of the Invoice
            include: Addresses, Lines, Payments, Notes, Attachments, Company,
                Customer, CustomFields, CreditMemos
        """
        return await self.retrieve(id, include)

    async def update_invoice(
        self, id: UUID | str, body: dict[str, Any] | InvoiceModel
    ) -> LockstepResponse[InvoiceModel]:
        """Update an Invoice, changing only the fields supplied.

        Args:
            id: Lockstep Platform id of the Invoice
            body: Fields to change, as camelCase keys or an InvoiceModel with
                only those fields set

        Returns:
            Envelope with the updated Invoice
        """
        return await self.update(id, body)

    async def delete_invoice(self, id: UUID | str) -> LockstepResponse[DeleteResult]:
        """Delete the Invoice referred to by this id.

        Args:
            id: Lockstep Platform id of the Invoice

        Returns:
            Envelope with the delete result
        """
        return await self._delete(id, DeleteResult)

    async def create_invoices(
        self, body: Sequence[InvoiceModel]
    ) -> LockstepResponse[list[InvoiceModel]]:
        """Create one or more Invoices.

        Args:
            body: Invoices to create

        Returns:
            Envelope with the Invoices as created
        """
        return await self.create(body)

    async def delete_invoices(
        self, ids: Sequence[UUID | str] | BulkDeleteRequestModel
    ) -> LockstepResponse[DeleteResult]:
        """Delete several Invoices in one call.

        Args:
            ids: Lockstep Platform ids of the Invoices to delete
        """
        if not isinstance(ids, BulkDeleteRequestModel):
            ids = BulkDeleteRequestModel(ids_to_delete=list(ids))
        return await self._client.request("DELETE", self.path, DeleteResult, body=ids)

    async def query_invoices(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LockstepResponse[FetchResult[InvoiceModel]]:
        """Query Invoices using Searchlight filtering, sorting and paging.

        Args:
            filter: Searchlight filter expression
            include: Addresses, Lines, Payments, Notes, Attachments, Company,
                Customer, CustomFields, CreditMemos
            order: Searchlight sort order
            page_size: Records per page
            page_number: Zero based page number

        Returns:
            Envelope with one page of Invoices
        """
        return await self.query(filter, include, order, page_size, page_number)

    async def retrieve_invoice_pdf(self, id: UUID | str) -> LockstepResponse[bytes]:
        """Retrieve the PDF of an Invoice synced from Quickbooks Online or Xero.

        Returns:
            Envelope with the raw PDF bytes
        """
        return await self._client.request("GET", f"{self.path}/{id}/pdf", bytes)

    async def query_invoice_summary_view(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LockstepResponse[
        SummaryFetchResult[InvoiceSummaryModel, InvoiceSummaryTotalsModel]
    ]:
        """Query the Invoice Summary view.

        Args:
            include: Summary, Aging
        """
        options = QueryOptions(filter, include, order, page_size, page_number)
        return await self._query_view(
            "views/summary",
            SummaryFetchResult[InvoiceSummaryModel, InvoiceSummaryTotalsModel],
            options,
        )

    async def query_at_risk_view(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LockstepResponse[FetchResult[AtRiskInvoiceSummaryModel]]:
        """Query the At Risk Invoice Summary view."""
        options = QueryOptions(filter, include, order, page_size, page_number)
        return await self._query_view(
            "views/at-risk-summary", FetchResult[AtRiskInvoiceSummaryModel], options
        )


class AsyncNotesClient(AsyncResourceClient[NoteModel]):
    """API methods related to Notes.

    A Note is a free text string attached to a record, used for internal
    communication, correspondence with clients or reminders.
    """

    path = "/api/v1/Notes"
    model = NoteModel

    async def retrieve_note(
        self, id: UUID | str, include: str | None = None
    ) -> LockstepResponse[NoteModel]:
        """Retrieve a Note.

        Args:
            id: Lockstep Platform id of the Note
            include: No collections are currently available for Notes

        Returns:
            Envelope with the Note
        """
        return await self.retrieve(id, include)

    async def archive_note(self, id: UUID | str) -> LockstepResponse[ActionResultModel]:
        """Archive the Note referred to by this id."""
        return await self._delete(id, ActionResultModel)

    async def create_notes(
        self, body: Sequence[NoteModel]
    ) -> LockstepResponse[list[NoteModel]]:
        """Create one or more Notes.

        Args:
            body: Notes to create

        Returns:
            Envelope with the Notes as created
        """
        return await self.create(body)

    async def query_notes(
        self,
        filter: str | None = None,
        include: str | None = None,
        order: str | None = None,
        page_size: int | None = None,
        page_number: int | None = None,
    ) -> LockstepResponse[FetchResult[NoteModel]]:
        """Query Notes using Searchlight filtering, sorting and paging.

        Args:
            filter: Searchlight filter expression
            include: No collections are currently available for Notes
            order: Searchlight sort order
            page_size: Records per page
            page_number: Zero based page number

        Returns:
            Envelope with one page of Notes
        """
        return await self.query(filter, include, order, page_size, page_number)
