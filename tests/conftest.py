"""
Shared pytest fixtures for vaultix-sdk tests.

Provides a configured Vaultix facade with its HTTP layer patched, a
response factory, and sample API objects.
"""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from vaultix_sdk import Vaultix
from vaultix_sdk.client import VaultixClient
from vaultix_sdk.config import VaultixConfig

BASE_URL = "https://api.vaultix.test"


def make_response(status_code=200, json=None, content=None):
    """Build a real httpx.Response for the mocked transport."""
    if json is not None:
        return httpx.Response(status_code, json=json)
    return httpx.Response(status_code, content=content or b"")


@pytest.fixture
def config():
    """Test-mode configuration pointing at a fake base URL."""
    return VaultixConfig(secret_key="sk_test_abc", base_url=BASE_URL)


@pytest.fixture
def client(config):
    """Request executor built from the test configuration."""
    return VaultixClient(config)


@pytest.fixture
def mock_sleep():
    """Make retry backoff instant and record the requested delays."""
    with patch("vaultix_sdk.client.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


@pytest.fixture
def vaultix():
    """Vaultix facade in test mode."""
    return Vaultix(secret_key="sk_test_abc", base_url=BASE_URL)


@pytest.fixture
def mock_request(vaultix):
    """Patch the facade's HTTP client; set return_value or side_effect."""
    with patch.object(vaultix._client._http, "request", new_callable=AsyncMock) as request:
        request.return_value = make_response(200, json={})
        yield request


@pytest.fixture
def sample_charge():
    """Pending PIX charge as returned by POST /v1/charges."""
    return {
        "id": "ch_test123",
        "object": "charge",
        "amount": 5000,
        "currency": "BRL",
        "payment_method": "pix",
        "status": "pending",
        "description": "Test purchase",
        "created": "2024-06-01T12:00:00Z",
        "livemode": False,
        "pix": {
            "qr_code": "00020126580014br.gov.bcb.pix0136a629532e",
            "qr_code_url": "https://api.vaultix.test/qr/ch_test123.png",
            "expires_at": "2024-06-01T13:00:00Z",
        },
    }


@pytest.fixture
def sample_customer():
    return {
        "id": "cus_test123",
        "object": "customer",
        "name": "Maria Santos",
        "email": "maria@email.com",
        "document": "12345678900",
        "created": "2024-06-01T12:00:00Z",
        "livemode": False,
    }


@pytest.fixture
def sample_refund():
    return {
        "id": "re_test123",
        "object": "refund",
        "amount": 2500,
        "charge": "ch_test123",
        "status": "pending",
        "reason": "requested_by_customer",
        "created": "2024-06-02T12:00:00Z",
        "livemode": False,
    }


@pytest.fixture
def sample_payout():
    return {
        "id": "po_test123",
        "object": "payout",
        "amount": 50000,
        "currency": "BRL",
        "destination": {
            "type": "pix",
            "pix_key": "email@example.com",
            "holder_name": "Joao Silva",
        },
        "status": "pending",
        "created": "2024-06-03T12:00:00Z",
        "livemode": False,
    }


@pytest.fixture
def sample_product():
    return {
        "id": "prod_test123",
        "object": "product",
        "name": "Camiseta Basica",
        "slug": "camiseta-basica",
        "price": 4990,
        "currency": "BRL",
        "stock_quantity": 100,
        "stock_status": "in_stock",
        "track_inventory": True,
        "status": "active",
        "visibility": "visible",
        "is_active": True,
        "is_featured": False,
        "is_digital": False,
        "has_variants": False,
        "created_at": "2024-06-01T12:00:00Z",
        "livemode": False,
    }


@pytest.fixture
def sample_order():
    return {
        "id": "ord_test123",
        "object": "order",
        "order_number": "1001",
        "status": "completed",
        "payment_status": "paid",
        "fulfillment_status": "shipped",
        "customer_id": "cus_test123",
        "billing_address": {},
        "shipping_address": {},
        "amounts": {"subtotal": 9980, "shipping": 1500, "total": 11480},
        "currency": "BRL",
        "payment": {"method": "pix", "transaction_id": "ch_test123"},
        "shipping": {"carrier": "Correios", "tracking_number": "BR123"},
        "created_at": "2024-06-01T12:00:00Z",
        "livemode": False,
    }


def list_of(*items, has_more=False):
    """Wrap items in the API's list envelope."""
    return {"object": "list", "data": list(items), "has_more": has_more}
