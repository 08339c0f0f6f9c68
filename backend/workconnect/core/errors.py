"""
Domain errors raised by the marketplace service and access policy.

Each error carries the HTTP status it maps to; the handlers registered in
``workconnect.main`` turn them into ``{"message": ...}`` responses.
"""

from typing import Any, Optional

from fastapi import status


class MarketplaceError(Exception):
    """Base class for every expected, client-facing failure."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None, errors: Optional[list[Any]] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    def to_body(self) -> dict:
        body: dict[str, Any] = {"message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationFailed(MarketplaceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class Unauthenticated(MarketplaceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authenticated"


class Forbidden(MarketplaceError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Forbidden"


class NotFound(MarketplaceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(MarketplaceError):
    # Duplicate records are reported as 400 to match the public contract
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already exists"
