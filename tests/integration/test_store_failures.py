"""Integration tests: store failures surface as a generic 500."""

from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from app.main import app
from app.services.customer_directory import CustomerDirectory
from app.services.invoice_ledger import InvoiceLedger

DB_ERROR_TEXT = "connection to server at db-primary lost"


@pytest.fixture
async def lenient_client(async_client: AsyncClient):
    """Client that returns 500 responses instead of re-raising app exceptions."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def _db_error() -> OperationalError:
    return OperationalError("SELECT", {}, Exception(DB_ERROR_TEXT))


async def test_customer_list_store_failure(
    lenient_client: AsyncClient, api_base: str, registered_admin: dict
):
    with patch.object(CustomerDirectory, "list_all", side_effect=_db_error()):
        resp = await lenient_client.get(f"{api_base}/customers", headers=registered_admin["headers"])

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}
    assert DB_ERROR_TEXT not in resp.text


async def test_invoice_list_store_failure(
    lenient_client: AsyncClient, api_base: str, registered_admin: dict
):
    with patch.object(InvoiceLedger, "list", side_effect=_db_error()):
        resp = await lenient_client.get(f"{api_base}/invoices", headers=registered_admin["headers"])

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}
    assert "SELECT" not in resp.text


async def test_monthly_roster_load_failure(
    lenient_client: AsyncClient, api_base: str, registered_admin: dict
):
    with patch.object(CustomerDirectory, "list_all", side_effect=_db_error()):
        resp = await lenient_client.post(
            f"{api_base}/invoices/generate-monthly",
            json={"billingPeriod": "2024-01", "dueDate": "2024-01-31"},
            headers=registered_admin["headers"],
        )

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal server error"}
    assert DB_ERROR_TEXT not in resp.text
