"""
Location: vaultix_sdk/resources/__init__.py

Summary:
    Resource proxies, one per API area. Each maps its methods one-to-one
    onto REST endpoints through the shared VaultixClient.
"""

from .balance import BalanceResource
from .base import BaseResource
from .charges import Charges
from .customers import Customers
from .orders import Orders
from .payment_links import PaymentLinks
from .payouts import Payouts
from .products import Products
from .refunds import Refunds
from .sandbox import Sandbox
from .tokens import Tokens
from .transactions import Transactions

__all__ = [
    "BaseResource",
    "BalanceResource",
    "Charges",
    "Customers",
    "Orders",
    "PaymentLinks",
    "Payouts",
    "Products",
    "Refunds",
    "Sandbox",
    "Tokens",
    "Transactions",
]
