"""Tests for AsyncLockstepApi (asynchronous)."""

import asyncio
import json
from decimal import Decimal
from uuid import UUID

import httpx
import pytest
import respx
from httpx import Response

from lockstepsdk import AsyncLockstepApi
from lockstepsdk.exceptions import LockstepNotFoundError, LockstepTransportError
from lockstepsdk.models import InvoiceModel


class TestAuthentication:
    """Test authentication methods."""

    @pytest.mark.asyncio
    async def test_api_key_initialization(self, api_key: str):
        """Test client initialization with an API key."""
        async with AsyncLockstepApi(api_key=api_key) as client:
            assert client.auth is not None

    def test_missing_credentials_raises_error(self):
        """Test that missing credentials raises ValueError."""
        try:
            AsyncLockstepApi()
            assert False, "Should have raised ValueError"
        except ValueError as e:
            assert "Either api_key or bearer_token" in str(e)

    @pytest.mark.asyncio
    async def test_context_manager(self, api_key: str):
        """Test client works as async context manager."""
        async with AsyncLockstepApi(api_key=api_key) as client:
            assert client is not None
        assert client.client.is_closed


class TestInvoiceEndpoints:
    """Test invoice-related endpoints."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_retrieve_invoice_with_include(
        self, api_key: str, base_url: str, invoice_id: UUID, mock_invoice: dict
    ):
        """Test retrieving an invoice with nested collections."""
        route = respx.get(f"{base_url}/api/v1/Invoices/{invoice_id}").mock(
            return_value=Response(200, json=mock_invoice)
        )

        async with AsyncLockstepApi(api_key=api_key) as client:
            envelope = await client.invoices.retrieve_invoice(
                invoice_id, include="Lines,Payments"
            )

        assert envelope.success
        assert isinstance(envelope.result, InvoiceModel)
        assert envelope.result.invoice_id == invoice_id
        request = route.calls.last.request
        assert request.url.path == f"/api/v1/Invoices/{invoice_id}"
        assert dict(request.url.params) == {"include": "Lines,Payments"}
        assert request.headers["Api-Key"] == api_key
        assert request.content == b""

    @pytest.mark.asyncio
    @respx.mock
    async def test_query_invoices_page(
        self, async_client: AsyncLockstepApi, base_url: str, mock_invoice: dict
    ):
        """Test that a page reports the server total, not the page length."""
        route = respx.get(f"{base_url}/api/v1/Invoices/query").mock(
            return_value=Response(
                200,
                json={
                    "records": [mock_invoice] * 10,
                    "totalCount": 25,
                    "pageSize": 10,
                    "pageNumber": 0,
                },
            )
        )

        envelope = await async_client.invoices.query_invoices(page_size=10)

        assert len(envelope.result.records) <= 10
        assert envelope.result.total_count == 25
        assert dict(route.calls.last.request.url.params) == {"pageSize": "10"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_invoices_with_empty_list(
        self, async_client: AsyncLockstepApi, base_url: str
    ):
        """Test that an empty create still posts an empty array."""
        route = respx.post(f"{base_url}/api/v1/Invoices").mock(
            return_value=Response(200, json=[])
        )

        envelope = await async_client.invoices.create_invoices([])

        assert route.called
        assert json.loads(route.calls.last.request.content) == []
        assert envelope.result == []

    @pytest.mark.asyncio
    @respx.mock
    async def test_create_invoices_keeps_amount_digits(
        self, async_client: AsyncLockstepApi, base_url: str
    ):
        """Test that an amount beyond float precision is posted digit for digit."""
        route = respx.post(f"{base_url}/api/v1/Invoices").mock(
            return_value=Response(200, json=[])
        )

        await async_client.invoices.create_invoices(
            [
                InvoiceModel(
                    erp_key="INV-9", total_amount=Decimal("12345678901234567.89")
                )
            ]
        )

        request = route.calls.last.request
        assert request.headers["Content-Type"] == "application/json"
        assert request.content == (
            b'[{"erpKey":"INV-9","totalAmount":12345678901234567.89}]'
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_delete_invoices_in_bulk(
        self, async_client: AsyncLockstepApi, base_url: str, invoice_id: UUID
    ):
        """Test that bulk delete sends the ids in the body of a DELETE."""
        route = respx.delete(f"{base_url}/api/v1/Invoices").mock(
            return_value=Response(200, json={"messages": ["Deleted 1 record"]})
        )

        envelope = await async_client.invoices.delete_invoices([invoice_id])

        assert envelope.success
        assert json.loads(route.calls.last.request.content) == {
            "idsToDelete": [str(invoice_id)]
        }

    @pytest.mark.asyncio
    @respx.mock
    async def test_retrieve_invoice_pdf(
        self, async_client: AsyncLockstepApi, base_url: str, invoice_id: UUID
    ):
        """Test that the invoice PDF is returned as raw bytes."""
        respx.get(f"{base_url}/api/v1/Invoices/{invoice_id}/pdf").mock(
            return_value=Response(200, content=b"%PDF-1.7")
        )

        envelope = await async_client.invoices.retrieve_invoice_pdf(invoice_id)

        assert envelope.result == b"%PDF-1.7"


class TestCompanyAndNoteEndpoints:
    """Test company and note endpoints."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_retrieve_customer_detail(
        self, async_client: AsyncLockstepApi, base_url: str, company_id: UUID
    ):
        """Test the customer details view path."""
        route = respx.get(
            f"{base_url}/api/v1/Companies/views/customer-details/{company_id}"
        ).mock(return_value=Response(200, json={"name": "Test Company Inc."}))

        envelope = await async_client.companies.retrieve_customer_detail(company_id)

        assert envelope.result.name == "Test Company Inc."
        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_archive_note(
        self, async_client: AsyncLockstepApi, base_url: str, note_id: UUID
    ):
        """Test archiving a note."""
        respx.delete(f"{base_url}/api/v1/Notes/{note_id}").mock(
            return_value=Response(200, json={"messages": ["Archived"]})
        )

        envelope = await async_client.notes.archive_note(note_id)

        assert envelope.result.messages == ["Archived"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_iter_query_walks_pages(
        self, async_client: AsyncLockstepApi, base_url: str, mock_note: dict
    ):
        """Test that async iteration fetches pages until totalCount is reached."""
        pages = [
            Response(
                200,
                json={
                    "records": [mock_note, mock_note],
                    "totalCount": 3,
                    "pageSize": 2,
                    "pageNumber": 0,
                },
            ),
            Response(
                200,
                json={
                    "records": [mock_note],
                    "totalCount": 3,
                    "pageSize": 2,
                    "pageNumber": 1,
                },
            ),
        ]
        route = respx.get(f"{base_url}/api/v1/Notes/query").mock(side_effect=pages)

        notes = [note async for note in async_client.notes.iter_query(page_size=2)]

        assert len(notes) == 3
        assert route.call_count == 2


class TestErrorHandling:
    """Test error handling."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_404_returns_error_envelope(
        self,
        async_client: AsyncLockstepApi,
        base_url: str,
        invoice_id: UUID,
        problem_details: dict,
    ):
        """Test that a 404 is reported in the envelope, not raised."""
        respx.get(f"{base_url}/api/v1/Invoices/{invoice_id}").mock(
            return_value=Response(404, json=problem_details)
        )

        envelope = await async_client.invoices.retrieve_invoice(invoice_id)

        assert not envelope.success
        assert envelope.result is None
        assert envelope.error.status_code == 404
        with pytest.raises(LockstepNotFoundError):
            envelope.raise_for_error()

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error_is_raised(
        self, async_client: AsyncLockstepApi, base_url: str, company_id: UUID
    ):
        """Test that connection failures raise LockstepTransportError."""
        respx.get(f"{base_url}/api/v1/Companies/{company_id}").mock(
            side_effect=httpx.ConnectError("Name or service not known")
        )

        with pytest.raises(LockstepTransportError):
            await async_client.companies.retrieve_company(company_id)

    @pytest.mark.asyncio
    @respx.mock
    async def test_concurrent_calls_are_independent(
        self,
        async_client: AsyncLockstepApi,
        base_url: str,
        invoice_id: UUID,
        note_id: UUID,
        mock_invoice: dict,
    ):
        """Test that a failing call does not affect one running alongside it."""
        respx.get(f"{base_url}/api/v1/Invoices/{invoice_id}").mock(
            return_value=Response(200, json=mock_invoice)
        )
        respx.get(f"{base_url}/api/v1/Notes/{note_id}").mock(
            return_value=Response(403, json={"title": "Forbidden"})
        )

        invoice, note = await asyncio.gather(
            async_client.invoices.retrieve_invoice(invoice_id),
            async_client.notes.retrieve_note(note_id),
        )

        assert invoice.success
        assert not note.success
        assert note.error.message == "Forbidden"
