"""
Tests for vaultix_sdk.client module.

Tests the VaultixClient request executor with the httpx client patched:
URL and header construction, payload encoding, retry policy, timeout
and network error translation.
"""

from unittest.mock import AsyncMock, call, patch

import httpx
import pytest

from conftest import BASE_URL, make_response
from vaultix_sdk.client import IDEMPOTENCY_HEADER, USER_AGENT, VaultixClient
from vaultix_sdk.config import VaultixConfig
from vaultix_sdk.errors import (
    APIError,
    AuthenticationError,
    InvalidRequestError,
    RateLimitError,
    VaultixAPIError,
    VaultixNetworkError,
    VaultixTimeoutError,
)


SERVER_ERROR = {"error": {"type": "api_error", "code": "internal_error", "message": "Internal error"}}


class TestVaultixClientInit:
    """Tests for VaultixClient initialization."""

    def test_keeps_config(self, config):
        client = VaultixClient(config)
        assert client.config is config
        assert client.retry_policy.max_retries == config.max_retries

    def test_test_mode(self, config):
        assert VaultixClient(config).is_test_mode is True

    async def test_async_context_manager(self, config):
        async with VaultixClient(config) as client:
            assert client is not None
        assert client._http.is_closed

    async def test_uses_injected_http_client(self, config):
        http = httpx.AsyncClient()
        client = VaultixClient(config, http_client=http)
        assert client._http is http
        await client.close()


class TestVaultixClientRequest:
    """Tests for request construction."""

    async def test_returns_parsed_json(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(200, json={"id": "ch_1"})

            result = await client.get("/v1/charges/ch_1")

            assert result == {"id": "ch_1"}
            mock_request.assert_awaited_once()

    async def test_url_and_auth_headers(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(200, json={})

            await client.get("/v1/balance")

            args, kwargs = mock_request.call_args
            assert args == ("GET", f"{BASE_URL}/v1/balance")
            headers = kwargs["headers"]
            assert headers["Authorization"] == "Bearer sk_test_abc"
            assert headers["Content-Type"] == "application/json"
            assert headers["User-Agent"] == USER_AGENT
            assert kwargs["timeout"] == client.config.timeout

    async def test_get_sends_query_params(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(200, json={"object": "list", "data": []})

            await client.get(
                "/v1/charges",
                {"limit": 10, "status": "paid", "starting_after": None, "is_active": True},
            )

            kwargs = mock_request.call_args.kwargs
            assert kwargs["params"] == {"limit": "10", "status": "paid", "is_active": "true"}
            assert kwargs["json"] is None

    async def test_get_list_params_repeat(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(200, json={})

            await client.get("/v1/orders", {"expand": ["items", "customer"]})

            assert mock_request.call_args.kwargs["params"] == {"expand": ["items", "customer"]}

    async def test_post_sends_json_body(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(200, json={"id": "ch_1"})

            await client.post("/v1/charges", {"amount": 5000, "payment_method": "pix"})

            kwargs = mock_request.call_args.kwargs
            assert kwargs["json"] == {"amount": 5000, "payment_method": "pix"}
            assert kwargs["params"] is None

    async def test_put_sends_json_body(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(200, json={})

            await client.put("/v1/customers/cus_1", {"phone": "+5511999999999"})

            args, kwargs = mock_request.call_args
            assert args[0] == "PUT"
            assert kwargs["json"] == {"phone": "+5511999999999"}

    async def test_delete_sends_no_body(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(200, json={"id": "cus_1", "deleted": True})

            await client.delete("/v1/customers/cus_1")

            args, kwargs = mock_request.call_args
            assert args[0] == "DELETE"
            assert kwargs["json"] is None
            assert kwargs["params"] is None

    async def test_empty_body_returns_none(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(204)
            assert await client.post("/v1/charges/ch_1/cancel") is None


class TestIdempotency:
    """Tests for the Idempotency-Key header on POST requests."""

    async def test_post_has_generated_key(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(200, json={})

            await client.post("/v1/charges", {"amount": 100})

            key = mock_request.call_args.kwargs["headers"][IDEMPOTENCY_HEADER]
            assert len(key) == 32

    async def test_each_call_gets_new_key(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(200, json={})

            await client.post("/v1/charges", {"amount": 100})
            await client.post("/v1/charges", {"amount": 100})

            keys = [c.kwargs["headers"][IDEMPOTENCY_HEADER] for c in mock_request.call_args_list]
            assert keys[0] != keys[1]

    async def test_caller_key_is_used(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(200, json={})

            await client.post("/v1/charges", {"amount": 100}, idempotency_key="order-42")

            assert mock_request.call_args.kwargs["headers"][IDEMPOTENCY_HEADER] == "order-42"

    async def test_key_reused_across_retries(self, client, mock_sleep):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = [
                make_response(503, json=SERVER_ERROR),
                make_response(200, json={"id": "ch_1"}),
            ]

            await client.post("/v1/charges", {"amount": 100})

            keys = {c.kwargs["headers"][IDEMPOTENCY_HEADER] for c in mock_request.call_args_list}
            assert len(keys) == 1

    async def test_get_has_no_key(self, client):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(200, json={})

            await client.get("/v1/balance")

            assert IDEMPOTENCY_HEADER not in mock_request.call_args.kwargs["headers"]


class TestRetryPolicy:
    """Tests for retries on 5xx, 429 and transport failures."""

    @pytest.mark.parametrize("status", [500, 502, 503, 429])
    async def test_retries_up_to_max_then_fails(self, client, mock_sleep, status):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(status, json=SERVER_ERROR)

            with pytest.raises(VaultixAPIError) as exc_info:
                await client.get("/v1/charges")

            # First attempt plus max_retries retries
            assert mock_request.await_count == client.config.max_retries + 1
            assert exc_info.value.status_code == status

    async def test_backoff_delays(self, client, mock_sleep):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(500, json=SERVER_ERROR)

            with pytest.raises(APIError):
                await client.get("/v1/charges")

            assert mock_sleep.await_args_list == [call(1.0), call(2.0), call(4.0)]

    async def test_backoff_is_capped(self, mock_sleep):
        client = VaultixClient(
            VaultixConfig(secret_key="sk_test_abc", base_url=BASE_URL, max_retries=6)
        )
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(503)

            with pytest.raises(APIError):
                await client.get("/v1/charges")

            delays = [c.args[0] for c in mock_sleep.await_args_list]
            assert delays == [1.0, 2.0, 4.0, 8.0, 10.0, 10.0]

    async def test_recovers_after_transient_failure(self, client, mock_sleep):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = [
                make_response(502),
                make_response(429, json={"error": {"type": "rate_limit_error", "code": "rate", "message": "slow"}}),
                make_response(200, json={"id": "ch_1"}),
            ]

            result = await client.get("/v1/charges/ch_1")

            assert result == {"id": "ch_1"}
            assert mock_request.await_count == 3

    async def test_rate_limit_error_after_budget(self, client, mock_sleep):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(
                429, json={"error": {"type": "rate_limit_error", "code": "rate_limited", "message": "Too many"}}
            )

            with pytest.raises(RateLimitError) as exc_info:
                await client.get("/v1/charges")

            assert exc_info.value.code == "rate_limited"

    async def test_zero_retries_fails_immediately(self, mock_sleep):
        client = VaultixClient(
            VaultixConfig(secret_key="sk_test_abc", base_url=BASE_URL, max_retries=0)
        )
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(500)

            with pytest.raises(APIError):
                await client.get("/v1/charges")

            assert mock_request.await_count == 1
            mock_sleep.assert_not_awaited()

    @pytest.mark.parametrize(
        "status, error_cls, body",
        [
            (400, InvalidRequestError, {"error": {"type": "invalid_request_error", "code": "missing", "message": "amount is required", "param": "amount"}}),
            (401, AuthenticationError, {"error": {"type": "authentication_error", "code": "invalid_api_key", "message": "Invalid API key"}}),
            (404, APIError, {"error": {"type": "api_error", "code": "not_found", "message": "No such charge"}}),
        ],
    )
    async def test_client_errors_surface_immediately(self, client, mock_sleep, status, error_cls, body):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(status, json=body)

            with pytest.raises(error_cls) as exc_info:
                await client.get("/v1/charges/ch_missing")

            assert mock_request.await_count == 1
            mock_sleep.assert_not_awaited()
            assert exc_info.value.status_code == status
            assert exc_info.value.message == body["error"]["message"]

    async def test_invalid_request_carries_param(self, client):
        body = {"error": {"type": "invalid_request_error", "code": "invalid", "message": "Bad", "param": "payment_method"}}
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(400, json=body)

            with pytest.raises(InvalidRequestError) as exc_info:
                await client.post("/v1/charges", {"amount": 100, "payment_method": "cash"})

            assert exc_info.value.param == "payment_method"


class TestTransportFailures:
    """Tests for timeout and network error handling."""

    async def test_timeout_is_not_retried(self, client, mock_sleep):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = httpx.ReadTimeout("timed out")

            with pytest.raises(VaultixTimeoutError) as exc_info:
                await client.get("/v1/charges")

            assert mock_request.await_count == 1
            mock_sleep.assert_not_awaited()
            assert exc_info.value.code == "timeout"
            assert exc_info.value.status_code == 408

    async def test_network_error_retried_then_translated(self, client, mock_sleep):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = httpx.ConnectError("Connection refused")

            with pytest.raises(VaultixNetworkError) as exc_info:
                await client.get("/v1/charges")

            assert mock_request.await_count == client.config.max_retries + 1
            assert exc_info.value.code == "network_error"
            assert exc_info.value.status_code == 0
            assert "Connection refused" in exc_info.value.message
            assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    async def test_decoding_error_retried_then_translated(self, client, mock_sleep):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = httpx.DecodingError("Error -3 while decompressing data")

            with pytest.raises(VaultixNetworkError) as exc_info:
                await client.get("/v1/balance")

            assert mock_request.await_count == client.config.max_retries + 1
            assert isinstance(exc_info.value.__cause__, httpx.DecodingError)

    async def test_network_error_then_success(self, client, mock_sleep):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = [
                httpx.ConnectError("reset"),
                make_response(200, json={"ok": True}),
            ]

            assert await client.get("/v1/balance") == {"ok": True}
            assert mock_sleep.await_args_list == [call(1.0)]

    async def test_invalid_json_on_success_is_retried(self, client, mock_sleep):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.side_effect = [
                make_response(200, content=b"<html>gateway</html>"),
                make_response(200, json={"ok": True}),
            ]

            assert await client.get("/v1/balance") == {"ok": True}
            assert mock_request.await_count == 2

    async def test_non_json_error_body(self, client, mock_sleep):
        with patch.object(client._http, "request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = make_response(403, content=b"Forbidden")

            with pytest.raises(APIError) as exc_info:
                await client.get("/v1/balance")

            assert exc_info.value.code == "unknown_error"
            assert exc_info.value.status_code == 403
