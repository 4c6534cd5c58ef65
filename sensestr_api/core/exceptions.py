"""
Exception hierarchy for the resource services.

Every error a request can end with inherits from ResourceError, which carries
the HTTP status and the short error label rendered in the response body.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class ResourceError(Exception):
    """Base exception for all request-level errors."""

    status_code: int = 500
    error: str = "internal error"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


# -----------------------------------------------------------------------------
# Client errors
# -----------------------------------------------------------------------------


class ValidationError(ResourceError):
    """Raised when input shape or type is invalid, before any business logic."""

    status_code = 400
    error = "validation error"


class NotFoundError(ResourceError):
    """Raised when a referenced resource id does not exist."""

    status_code = 404
    error = "not found"


class UnauthorizedError(ResourceError):
    """Raised for missing or invalid credentials and for impersonation without scope."""

    status_code = 401
    error = "unauthorized"


class BadRequestError(ResourceError):
    """Raised when a machine principal tries to become a resource owner."""

    status_code = 400
    error = "bad request"


# -----------------------------------------------------------------------------
# Server errors
# -----------------------------------------------------------------------------


class StoreUnavailableError(ResourceError):
    """Raised when the document store cannot be reached or fails an operation."""

    status_code = 503
    error = "store unavailable"
