"""
Location: vaultix_sdk/resources/base.py

Summary:
    Shared plumbing for resource proxies: normalizing caller parameters
    into request payloads, quoting path identifiers and validating
    responses into typed models.

Usage:
    Every resource class extends BaseResource and calls the executor
    through self._client with a fixed path template.
"""

from typing import TYPE_CHECKING, Any, AsyncIterator, Optional, TypeVar, Union
from urllib.parse import quote

from pydantic import BaseModel, ValidationError

from ..errors import APIError
from ..pagination import auto_paginate
from ..types import DeletedObject, ListResponse, VaultixParams

if TYPE_CHECKING:
    from ..client import VaultixClient

M = TypeVar("M", bound=BaseModel)

ParamsInput = Union[VaultixParams, dict[str, Any], None]

INVALID_RESPONSE = "invalid_response"


class BaseResource:
    """
    Base class for API resources.

    Attributes:
        _client: The request executor shared by all resources
    """

    def __init__(self, client: "VaultixClient"):
        self._client = client

    @staticmethod
    def _build_params(
        params_cls: type,
        params: ParamsInput = None,
        fields: Optional[dict[str, Any]] = None,
    ) -> Optional[dict[str, Any]]:
        """
        Merge a params model or dict with keyword fields into a payload.

        The merged data is validated against params_cls, so wrong types
        fail before any request is made. Keyword fields win over params.

        Returns:
            JSON-ready dict without unset fields, or None when nothing
            was given
        """
        if params is None and not fields:
            return None

        if isinstance(params, BaseModel):
            data = params.model_dump(exclude_none=True)
        else:
            data = dict(params or {})
        data.update(fields or {})

        return params_cls.model_validate(data).to_payload()

    @staticmethod
    def _path_id(value: str) -> str:
        """Quote an identifier for use as a single path segment."""
        return quote(str(value), safe="")

    @staticmethod
    def _parse(model_cls: type[M], data: Any) -> M:
        """
        Validate a response body into model_cls.

        Raises:
            APIError: With code "invalid_response" when the body is empty
                or does not match the model
        """
        if data is None:
            raise APIError(
                f"Empty response body, expected {model_cls.__name__}",
                code=INVALID_RESPONSE,
            )
        try:
            return model_cls.model_validate(data)
        except ValidationError as e:
            raise APIError(
                f"Response did not match {model_cls.__name__}: "
                f"{e.error_count()} validation error(s)",
                code=INVALID_RESPONSE,
            ) from e

    @classmethod
    def _parse_deleted(cls, id: str, data: Any) -> DeletedObject:
        # A 204 with no body confirms the delete
        if data is None:
            return DeletedObject(id=id, deleted=True)
        return cls._parse(DeletedObject, data)

    @staticmethod
    async def _iterate(
        list_method: Any,
        params: ParamsInput,
        fields: dict[str, Any],
        max_items: Optional[int],
    ) -> AsyncIterator[Any]:
        if isinstance(params, BaseModel):
            initial = params.model_dump(exclude_none=True)
        else:
            initial = dict(params or {})
        initial.update(fields)

        async def fetch_page(page_params: dict[str, Any]) -> ListResponse:
            return await list_method(page_params)

        async for item in auto_paginate(fetch_page, initial, max_items=max_items):
            yield item
