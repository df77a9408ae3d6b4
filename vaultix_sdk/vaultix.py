"""
Location: vaultix_sdk/vaultix.py

Summary:
    The Vaultix facade. Owns one VaultixClient and exposes every API area
    as an attribute.

Usage:
    The primary entry point of the SDK. Use it as an async context
    manager, or call close() when done.

Example:
    from vaultix_sdk import Vaultix

    async with Vaultix(secret_key="sk_test_...") as vaultix:
        charge = await vaultix.charges.create(amount=5000, payment_method="pix")

        if vaultix.is_test_mode:
            charge = await vaultix.sandbox.pay_charge(charge.id)

        print(charge.status)  # "paid"
"""

from typing import Optional

import httpx

from .client import VaultixClient
from .config import VaultixConfig
from .resources import (
    BalanceResource,
    Charges,
    Customers,
    Orders,
    PaymentLinks,
    Payouts,
    Products,
    Refunds,
    Sandbox,
    Tokens,
    Transactions,
)


class Vaultix:
    """
    Vaultix API client.

    Attributes:
        charges: Create and manage payment charges
        customers: Create and manage customers
        tokens: Tokenize credit card data
        refunds: Create and manage refunds
        balance: Account balance and statement
        payment_links: Shareable payment links
        payouts: Withdrawals to bank accounts and PIX keys
        sandbox: Test mode simulations (sk_test_ keys only)
        products: Product catalog
        orders: Store orders
        transactions: Unified transaction history
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        config: Optional[VaultixConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the SDK.

        Args:
            secret_key: Secret API key (sk_live_... or sk_test_...)
            base_url: Optional API base URL override
            timeout: Optional request timeout in seconds
            max_retries: Optional maximum retries per request
            config: Prebuilt VaultixConfig; other settings are ignored
            http_client: Optional httpx.AsyncClient to send requests with

        Raises:
            VaultixConfigError: If the secret key is missing or malformed
        """
        if config is None:
            settings = {
                "base_url": base_url,
                "timeout": timeout,
                "max_retries": max_retries,
            }
            config = VaultixConfig(
                secret_key=secret_key,
                **{k: v for k, v in settings.items() if v is not None},
            )

        self._client = VaultixClient(config, http_client=http_client)

        self.charges = Charges(self._client)
        self.customers = Customers(self._client)
        self.tokens = Tokens(self._client)
        self.refunds = Refunds(self._client)
        self.balance = BalanceResource(self._client)
        self.payment_links = PaymentLinks(self._client)
        self.payouts = Payouts(self._client)
        self.sandbox = Sandbox(self._client)
        self.products = Products(self._client)
        self.orders = Orders(self._client)
        self.transactions = Transactions(self._client)

    @classmethod
    def from_env(cls, **overrides) -> "Vaultix":
        """Create a client from VAULTIX_* environment variables."""
        return cls(config=VaultixConfig.from_env(**overrides))

    @property
    def config(self) -> VaultixConfig:
        return self._client.config

    @property
    def is_test_mode(self) -> bool:
        """True when the SDK is configured with a test-mode key."""
        return self._client.is_test_mode

    async def close(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> "Vaultix":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
