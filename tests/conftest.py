"""Pytest fixtures for Lockstep SDK tests."""

from typing import Any
from uuid import UUID

import pytest

from lockstepsdk import AsyncLockstepApi, LockstepApi


@pytest.fixture
def api_key() -> str:
    """Return a test API key."""
    return "test_api_key_12345"


@pytest.fixture
def base_url() -> str:
    """Return the sandbox API URL."""
    return "https://api.sbx.lockstep.io"


@pytest.fixture
def sync_client(api_key: str):
    """Create a sync LockstepApi for testing."""
    client = LockstepApi("sbx", api_key=api_key)
    yield client
    client.close()


@pytest.fixture
async def async_client(api_key: str):
    """Create an async LockstepApi for testing."""
    client = AsyncLockstepApi("sbx", api_key=api_key)
    yield client
    await client.close()


@pytest.fixture
def invoice_id() -> UUID:
    """Return a test invoice id."""
    return UUID("6c3f1a2e-9a4b-4d1e-8f0a-1b2c3d4e5f60")


@pytest.fixture
def company_id() -> UUID:
    """Return a test company id."""
    return UUID("0b1c2d3e-4f50-4617-8293-a4b5c6d7e8f9")


@pytest.fixture
def note_id() -> UUID:
    """Return a test note id."""
    return UUID("f0e1d2c3-b4a5-4697-8877-665544332211")


@pytest.fixture
def mock_invoice(invoice_id: UUID, company_id: UUID) -> dict[str, Any]:
    """Return mock invoice data."""
    return {
        "groupKey": "11111111-2222-3333-4444-555555555555",
        "invoiceId": str(invoice_id),
        "companyId": str(company_id),
        "erpKey": "INV-1001",
        "invoiceTypeCode": "Invoice",
        "invoiceStatusCode": "Open",
        "currencyCode": "USD",
        "totalAmount": 1250.5,
        "outstandingBalanceAmount": 1000.25,
        "invoiceDate": "2023-01-05",
        "paymentDueDate": "2023-02-04",
        "isVoided": False,
        "lines": [
            {
                "invoiceLineId": "22222222-3333-4444-5555-666666666666",
                "lineNumber": "1",
                "description": "Consulting",
                "quantity": 10,
                "unitPrice": 125.05,
                "totalAmount": 1250.5,
            }
        ],
    }


@pytest.fixture
def mock_company(company_id: UUID) -> dict[str, Any]:
    """Return mock company data."""
    return {
        "companyId": str(company_id),
        "companyName": "Test Company Inc.",
        "companyType": "Customer",
        "erpKey": "CUST-42",
        "isActive": True,
        "defaultCurrencyCode": "USD",
        "city": "Seattle",
        "country": "US",
    }


@pytest.fixture
def mock_note(note_id: UUID, invoice_id: UUID) -> dict[str, Any]:
    """Return mock note data."""
    return {
        "noteId": str(note_id),
        "tableKey": "Invoice",
        "objectKey": str(invoice_id),
        "noteText": "Customer promised payment next week",
        "noteType": "Internal",
        "isArchived": False,
    }


@pytest.fixture
def problem_details() -> dict[str, Any]:
    """Return a problem details error body as sent by the platform."""
    return {
        "type": "https://tools.ietf.org/html/rfc7231#section-6.5.4",
        "title": "Not Found",
        "status": 404,
        "detail": "No invoice with this id exists",
        "traceId": "00-abc-def-00",
    }
