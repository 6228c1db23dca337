# shopsearch/core/exceptions.py

"""Exception hierarchy shared by the client, the endpoints and the view.

Every error carries the JSON payload it is rendered as by the HTTP layer:

- ConfigurationError: the Zenserp API key is not configured (500)
- ValidationError: required request input is missing (400)
- UpstreamError: Zenserp answered with a non-2xx status (status mirrored)
- TransportError: Zenserp could not be reached or sent unreadable JSON (500)
- ApiError: an error payload received from this service's own HTTP API
"""

import json
from typing import Any


class ShopSearchError(Exception):
    """Base exception for shopsearch."""

    status_code: int = 500

    def __init__(
        self,
        error: str,
        details: Any = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(error)
        self.error = error
        self.details = details
        if status_code is not None:
            self.status_code = status_code

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body used for the HTTP error response."""
        payload: dict[str, Any] = {"error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        if self.details is None:
            return self.error
        return f"{self.error}: " + json.dumps(
            self.details, ensure_ascii=False, default=str
        )


class ConfigurationError(ShopSearchError):
    """Required process configuration (the API key) is missing."""

    def __init__(self, error: str = "API key is missing") -> None:
        super().__init__(error, status_code=500)


class ValidationError(ShopSearchError):
    """Required request input is missing; no upstream call is made."""

    def __init__(self, error: str) -> None:
        super().__init__(error, status_code=400)


class QueryRequired(ValidationError):
    def __init__(self) -> None:
        super().__init__("Query is required")


class ProductIdRequired(ValidationError):
    def __init__(self) -> None:
        super().__init__("Product ID is required")


class UpstreamError(ShopSearchError):
    """Zenserp returned a non-2xx status; the raw body is kept as details."""

    def __init__(self, status_code: int, body: Any) -> None:
        super().__init__(
            "Zenserp API error", details=body, status_code=status_code
        )


class TransportError(ShopSearchError):
    """Network failure or malformed JSON while talking to Zenserp."""

    def __init__(self, message: str) -> None:
        super().__init__(
            "Internal Server Error", details=message, status_code=500
        )


class ApiError(ShopSearchError):
    """Error payload returned by the shopsearch HTTP API."""

    @classmethod
    def from_payload(
        cls, payload: Any, status_code: int,
    ) -> "ApiError":
        """Build an ApiError from a decoded ``{"error", "details"}`` body."""
        if isinstance(payload, dict) and payload.get("error"):
            return cls(
                str(payload["error"]),
                details=payload.get("details"),
                status_code=status_code,
            )
        return cls(
            f"HTTP {status_code}", details=payload, status_code=status_code
        )
