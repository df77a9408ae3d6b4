"""
Location: vaultix_sdk/client.py

Summary:
    VaultixClient, the single request executor behind every resource.
    Performs one authenticated HTTP call per attempt and applies the retry
    policy: 429, 5xx and transport failures are retried with exponential
    backoff; timeouts and other 4xx errors surface immediately.

Usage:
    Resource classes call get/post/put/delete with a path template filled
    in. Most callers never touch this class directly; the Vaultix facade
    owns one instance.

Example:
    from vaultix_sdk.client import VaultixClient
    from vaultix_sdk.config import VaultixConfig

    async with VaultixClient(VaultixConfig(secret_key="sk_test_...")) as client:
        charge = await client.post("/v1/charges", {"amount": 5000, "payment_method": "pix"})
        print(charge["status"])
"""

import asyncio
import logging
import uuid
from typing import Any, Literal, Optional

import httpx

from . import __version__
from .config import VaultixConfig
from .errors import VaultixAPIError, VaultixNetworkError, VaultixTimeoutError
from .retry import RetryPolicy, is_retryable_status

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

USER_AGENT = f"vaultix-sdk-python/{__version__}"
IDEMPOTENCY_HEADER = "Idempotency-Key"


class VaultixClient:
    """
    Authenticated HTTP executor with bounded retries.

    Attributes:
        config: Immutable client configuration
        retry_policy: Backoff policy derived from config.max_retries
    """

    def __init__(
        self,
        config: VaultixConfig,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the executor.

        Args:
            config: Validated VaultixConfig
            http_client: Optional preconfigured httpx.AsyncClient; when
                omitted one is created with the configured timeout
        """
        self.config = config
        self.retry_policy = RetryPolicy(config.max_retries)
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout)

    @property
    def is_test_mode(self) -> bool:
        """True when configured with an sk_test_ key."""
        return self.config.is_test_mode

    async def close(self) -> None:
        """Close the HTTP client and release pooled connections."""
        await self._http.aclose()

    async def __aenter__(self) -> "VaultixClient":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        data: Optional[dict[str, Any]] = None,
        *,
        idempotency_key: Optional[str] = None,
    ) -> Any:
        """
        Make a request to the Vaultix API.

        GET data is sent as query parameters, any other method sends it
        as a JSON body. POST requests carry an Idempotency-Key header that
        stays the same across retries of this call.

        Args:
            method: HTTP method
            path: API path such as "/v1/charges" (appended to base_url)
            data: Query parameters or JSON body
            idempotency_key: Optional caller-supplied key for POST requests

        Returns:
            Parsed JSON response body

        Raises:
            VaultixTimeoutError: If an attempt exceeds the configured timeout
            VaultixNetworkError: If the API stays unreachable after all retries
            VaultixAPIError: For any HTTP error response (subclass by type)
        """
        url = f"{self.config.base_url}{path}"
        headers = self._build_headers()
        if method == "POST":
            headers[IDEMPOTENCY_HEADER] = idempotency_key or uuid.uuid4().hex

        params = None
        body = None
        if data is not None:
            if method == "GET":
                params = _encode_query(data)
            elif method != "DELETE":
                body = data

        retry_count = 0
        while True:
            logger.debug("%s %s (attempt %d)", method, path, retry_count + 1)
            try:
                response = await self._http.request(
                    method,
                    url,
                    params=params,
                    json=body,
                    headers=headers,
                    timeout=self.config.timeout,
                )
                payload = _parse_json(response)
            except httpx.TimeoutException as e:
                logger.debug("%s %s timed out after %ss", method, path, self.config.timeout)
                raise VaultixTimeoutError(self.config.timeout) from e
            except (httpx.RequestError, ValueError) as e:
                # RequestError also covers DecodingError from a corrupt body
                if self.retry_policy.can_retry(retry_count):
                    await self._backoff(method, path, retry_count, repr(e))
                    retry_count += 1
                    continue
                raise VaultixNetworkError(str(e) or "Network error") from e

            if response.is_success:
                return payload

            if self.retry_policy.should_retry_status(response.status_code, retry_count):
                await self._backoff(
                    method, path, retry_count, f"HTTP {response.status_code}"
                )
                retry_count += 1
                continue

            error = VaultixAPIError.from_response(response.status_code, payload)
            if is_retryable_status(response.status_code):
                logger.debug(
                    "%s %s failed after %d retries: %s",
                    method, path, retry_count, error,
                )
            raise error

    async def get(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        """GET request helper."""
        return await self.request("GET", path, params)

    async def post(
        self,
        path: str,
        data: Optional[dict[str, Any]] = None,
        *,
        idempotency_key: Optional[str] = None,
    ) -> Any:
        """POST request helper."""
        return await self.request("POST", path, data, idempotency_key=idempotency_key)

    async def put(self, path: str, data: Optional[dict[str, Any]] = None) -> Any:
        """PUT request helper."""
        return await self.request("PUT", path, data)

    async def delete(self, path: str) -> Any:
        """DELETE request helper."""
        return await self.request("DELETE", path)

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.secret_key}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    async def _backoff(
        self, method: str, path: str, retry_count: int, reason: str
    ) -> None:
        delay = self.retry_policy.get_delay(retry_count)
        logger.warning(
            "%s %s failed (%s), retrying in %.1fs (retry %d of %d)",
            method, path, reason, delay, retry_count + 1, self.retry_policy.max_retries,
        )
        await asyncio.sleep(delay)


def _encode_query(data: dict[str, Any]) -> dict[str, Any]:
    """
    Convert GET data to query parameters.

    None values are dropped, booleans become "true"/"false" and lists are
    kept so httpx repeats the parameter once per element.
    """
    params: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            params[key] = [
                ("true" if v else "false") if isinstance(v, bool) else str(v)
                for v in value
            ]
        else:
            params[key] = str(value)
    return params


def _parse_json(response: httpx.Response) -> Optional[Any]:
    """
    Parse a response body as JSON.

    Empty bodies yield None. A non-JSON body on a successful response
    raises ValueError, which the executor treats as a transport failure;
    on an error response it yields None so the status still drives the
    error mapping.
    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        if response.is_success:
            raise
        return None
