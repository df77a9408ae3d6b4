"""
Location: vaultix_sdk/resources/tokens.py

Summary:
    Tokens API. Tokenize credit card data so charges never carry raw
    card numbers. Tokens are single-use and expire after 15 minutes.

Example:
    token = await vaultix.tokens.create(card={
        "number": "4242424242424242",
        "exp_month": 12,
        "exp_year": 2030,
        "cvc": "123",
    })
    charge = await vaultix.charges.create(
        amount=5000,
        payment_method="credit_card",
        card={"token": token.id},
    )
"""

from typing import Any

from ..types import Token, TokenCreateParams
from .base import BaseResource, ParamsInput


class Tokens(BaseResource):
    """Proxy for /v1/tokens."""

    async def create(self, params: ParamsInput = None, **fields: Any) -> Token:
        payload = self._build_params(TokenCreateParams, params, fields)
        data = await self._client.post("/v1/tokens", payload)
        return self._parse(Token, data)

    async def retrieve(self, id: str) -> Token:
        data = await self._client.get(f"/v1/tokens/{self._path_id(id)}")
        return self._parse(Token, data)
