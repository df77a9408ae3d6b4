"""
Location: vaultix_sdk/errors.py

Summary:
    Exception hierarchy for vaultix-sdk. Every failure surfaced by the
    request executor is a VaultixAPIError, subclassed by error category
    so callers can catch one type or narrow by cause.

Usage:
    Raised by client.py. The from_response() factory turns an API error
    payload plus HTTP status into the matching subclass.

Example:
    from vaultix_sdk.errors import VaultixAPIError, InvalidRequestError

    try:
        await vaultix.charges.create(amount=50, payment_method="pix")
    except InvalidRequestError as e:
        print(e.param, e.message)
    except VaultixAPIError as e:
        print(e.type, e.code, e.status_code)
"""

from typing import Any, Literal, Optional


ErrorType = Literal[
    "api_error",
    "authentication_error",
    "invalid_request_error",
    "rate_limit_error",
]


class VaultixConfigError(ValueError):
    """Exception raised when the SDK configuration is invalid."""
    pass


class VaultixAPIError(Exception):
    """
    Base exception for every error returned by the request executor.

    Attributes:
        type: Error category reported by the API
        code: Machine-readable error code
        message: Human-readable description
        param: Offending request parameter, if any
        doc_url: Link to the error documentation, if any
        status_code: HTTP status (0 for transport failures)
    """

    def __init__(
        self,
        message: str,
        *,
        type: ErrorType = "api_error",
        code: str = "unknown_error",
        status_code: int = 0,
        param: Optional[str] = None,
        doc_url: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.type = type
        self.code = code
        self.status_code = status_code
        self.param = param
        self.doc_url = doc_url

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(type={self.type!r}, code={self.code!r}, "
            f"status_code={self.status_code}, message={self.message!r})"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the error in the API's wire shape."""
        error: dict[str, Any] = {
            "type": self.type,
            "code": self.code,
            "message": self.message,
        }
        if self.param is not None:
            error["param"] = self.param
        if self.doc_url is not None:
            error["doc_url"] = self.doc_url
        return {"error": error}

    @classmethod
    def from_response(
        cls, status_code: int, body: Optional[dict[str, Any]]
    ) -> "VaultixAPIError":
        """
        Build the matching error subclass from an HTTP error response.

        Args:
            status_code: HTTP status of the failed response
            body: Parsed JSON body, or None when it was not JSON

        Returns:
            A VaultixAPIError subclass instance
        """
        error = body.get("error") if isinstance(body, dict) else None
        if not isinstance(error, dict):
            error = {
                "type": "api_error",
                "code": "unknown_error",
                "message": "An unknown error occurred",
            }

        error_type = error.get("type")
        if error_type not in _ERROR_CLASSES:
            error_type = "api_error"

        error_cls = _ERROR_CLASSES[error_type]
        if error_cls is APIError:
            # Fall back to the HTTP status when the body is not specific
            error_cls = _STATUS_CLASSES.get(status_code, APIError)

        return error_cls(
            error.get("message") or "An unknown error occurred",
            type=error_type,
            code=error.get("code") or "unknown_error",
            status_code=status_code,
            param=error.get("param"),
            doc_url=error.get("doc_url"),
        )


class APIError(VaultixAPIError):
    """Generic server-side or unclassified API error."""
    pass


class AuthenticationError(VaultixAPIError):
    """Exception raised when the secret key is missing, invalid or revoked."""
    pass


class InvalidRequestError(VaultixAPIError):
    """Exception raised when request parameters are rejected; see param."""
    pass


class RateLimitError(VaultixAPIError):
    """Exception raised when too many requests hit the API too quickly."""
    pass


class VaultixTimeoutError(VaultixAPIError):
    """Exception raised when a request exceeds the configured timeout."""

    def __init__(self, timeout: float):
        super().__init__(
            f"Request timed out after {timeout:g}s",
            type="api_error",
            code="timeout",
            status_code=408,
        )
        self.timeout = timeout


class VaultixNetworkError(VaultixAPIError):
    """Exception raised when the API could not be reached after all retries."""

    def __init__(self, message: str = "Network error"):
        super().__init__(
            message,
            type="api_error",
            code="network_error",
            status_code=0,
        )


_ERROR_CLASSES: dict[str, type] = {
    "api_error": APIError,
    "authentication_error": AuthenticationError,
    "invalid_request_error": InvalidRequestError,
    "rate_limit_error": RateLimitError,
}

_STATUS_CLASSES: dict[int, type] = {
    401: AuthenticationError,
    429: RateLimitError,
}
