"""
Location: vaultix_sdk/__init__.py

Summary:
    Main package initialization for vaultix-sdk, the Python client for
    the Vaultix payment API. Exports the facade, configuration, errors
    and typed models.

Usage:
    from vaultix_sdk import Vaultix, VaultixAPIError

    # Or import specific modules
    from vaultix_sdk.types import Charge, ChargeCreateParams
    from vaultix_sdk.client import VaultixClient
"""

__version__ = "1.0.0"

from .client import VaultixClient
from .config import VaultixConfig
from .errors import (
    APIError,
    AuthenticationError,
    InvalidRequestError,
    RateLimitError,
    VaultixAPIError,
    VaultixConfigError,
    VaultixNetworkError,
    VaultixTimeoutError,
)
from .pagination import auto_paginate
from .retry import RetryPolicy
from .types import (
    Balance,
    BalanceTransaction,
    Charge,
    ChargeCreateParams,
    ChargeListParams,
    Currency,
    Customer,
    CustomerCreateParams,
    CustomerUpdateParams,
    DeletedObject,
    ListParams,
    ListResponse,
    Order,
    OrderItem,
    PaymentLink,
    PaymentLinkCreateParams,
    PaymentMethod,
    Payout,
    PayoutCreateParams,
    Product,
    ProductCreateParams,
    Refund,
    RefundCreateParams,
    TestCard,
    Token,
    TokenCreateParams,
    Transaction,
    TransactionSummary,
)
from .vaultix import Vaultix

__all__ = [
    "__version__",
    # Main client
    "Vaultix",
    "VaultixClient",
    "VaultixConfig",
    "RetryPolicy",
    "auto_paginate",
    # Exceptions
    "VaultixAPIError",
    "VaultixConfigError",
    "APIError",
    "AuthenticationError",
    "InvalidRequestError",
    "RateLimitError",
    "VaultixTimeoutError",
    "VaultixNetworkError",
    # Types
    "Currency",
    "PaymentMethod",
    "ListParams",
    "ListResponse",
    "DeletedObject",
    "Charge",
    "ChargeCreateParams",
    "ChargeListParams",
    "Customer",
    "CustomerCreateParams",
    "CustomerUpdateParams",
    "Token",
    "TokenCreateParams",
    "Refund",
    "RefundCreateParams",
    "Balance",
    "BalanceTransaction",
    "PaymentLink",
    "PaymentLinkCreateParams",
    "Payout",
    "PayoutCreateParams",
    "Product",
    "ProductCreateParams",
    "Order",
    "OrderItem",
    "Transaction",
    "TransactionSummary",
    "TestCard",
]
