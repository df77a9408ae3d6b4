"""
Location: vaultix_sdk/config.py

Summary:
    Client configuration for vaultix-sdk. Holds the secret key, base URL,
    request timeout and retry ceiling as an immutable Pydantic model.

Usage:
    Built by the Vaultix facade from keyword arguments, or directly by
    callers who want to share one configuration between clients. The
    secret key prefix selects live or test mode.

Example:
    from vaultix_sdk.config import VaultixConfig

    config = VaultixConfig(secret_key="sk_test_abc", timeout=10.0)
    assert config.is_test_mode

    # Or from VAULTIX_* environment variables
    config = VaultixConfig.from_env()
"""

import os
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .errors import VaultixConfigError


DEFAULT_BASE_URL = "https://console.velon.app/api"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 3

LIVE_KEY_PREFIX = "sk_live_"
TEST_KEY_PREFIX = "sk_test_"

ENV_SECRET_KEY = "VAULTIX_SECRET_KEY"
ENV_BASE_URL = "VAULTIX_BASE_URL"
ENV_TIMEOUT = "VAULTIX_TIMEOUT"
ENV_MAX_RETRIES = "VAULTIX_MAX_RETRIES"


class VaultixConfig(BaseModel):
    """
    Immutable SDK configuration.

    Attributes:
        secret_key: Secret API key (sk_live_... or sk_test_...)
        base_url: API base URL, trailing slash removed
        timeout: Per-request timeout in seconds
        max_retries: Retries allowed after the first attempt
    """
    secret_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)
    max_retries: int = Field(DEFAULT_MAX_RETRIES, ge=0)

    model_config = {"frozen": True}

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _config_error(e) from e

    @classmethod
    def model_validate(cls, obj: Any, **kwargs: Any) -> "VaultixConfig":
        try:
            return super().model_validate(obj, **kwargs)
        except ValidationError as e:
            raise _config_error(e) from e

    @model_validator(mode="before")
    @classmethod
    def _check_secret_key(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        key = data.get("secret_key")
        if not key:
            raise VaultixConfigError("Secret key is required")
        if not isinstance(key, str) or not key.startswith("sk_"):
            raise VaultixConfigError(
                "Invalid secret key format. Must start with sk_live_ or sk_test_"
            )
        return data

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/") or DEFAULT_BASE_URL

    @property
    def is_test_mode(self) -> bool:
        """True when the secret key is a test-mode key."""
        return self.secret_key.startswith(TEST_KEY_PREFIX)

    @property
    def is_live_mode(self) -> bool:
        return self.secret_key.startswith(LIVE_KEY_PREFIX)

    @classmethod
    def from_env(cls, **overrides: Any) -> "VaultixConfig":
        """
        Build a configuration from VAULTIX_* environment variables.

        Explicit keyword overrides take precedence over the environment.
        Unset variables fall back to the model defaults.

        Args:
            **overrides: Field values that win over the environment

        Returns:
            A validated VaultixConfig

        Raises:
            VaultixConfigError: If the key is missing or malformed, or a
                numeric variable cannot be parsed
        """
        data: dict[str, Any] = {}

        secret_key = os.getenv(ENV_SECRET_KEY)
        if secret_key:
            data["secret_key"] = secret_key

        base_url = os.getenv(ENV_BASE_URL)
        if base_url:
            data["base_url"] = base_url

        timeout = _read_number(ENV_TIMEOUT, float)
        if timeout is not None:
            data["timeout"] = timeout

        max_retries = _read_number(ENV_MAX_RETRIES, int)
        if max_retries is not None:
            data["max_retries"] = max_retries

        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)


def _read_number(name: str, cast: type) -> Optional[Any]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return cast(raw.strip())
    except ValueError as e:
        raise VaultixConfigError(f"{name} must be a number, got {raw!r}") from e


def _config_error(e: ValidationError) -> VaultixConfigError:
    """Return the VaultixConfigError raised by a validator, or wrap e in one."""
    for error in e.errors():
        cause = error.get("ctx", {}).get("error")
        if isinstance(cause, VaultixConfigError):
            return cause
    return VaultixConfigError(f"Invalid configuration: {e}")
