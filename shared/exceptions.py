"""
Base exception classes for the gateway.

Each module should define its own exceptions that inherit from these bases.
Every base carries the HTTP status it maps to, and a public message that is
the only text ever returned to the caller.
"""

from typing import Optional, Any


class GatewayError(Exception):
    """
    Base exception for all gateway errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    @property
    def public_message(self) -> str:
        """Message safe to return to the caller."""
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging and diagnostics."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(GatewayError):
    """Input validation failed."""

    status_code = 400


class AuthenticationError(GatewayError):
    """
    Authentication failed (missing, malformed or forged initData).

    All sub-reasons collapse to one public message so a caller cannot
    tell which check rejected the payload.
    """

    status_code = 401

    @property
    def public_message(self) -> str:
        return "Invalid initData"


class AuthorizationError(GatewayError):
    """Authorization failed (insufficient entitlement)."""

    status_code = 403


class NotFoundError(GatewayError):
    """Resource not found."""

    status_code = 404


class ExternalServiceError(GatewayError):
    """Error communicating with an external service."""

    status_code = 500

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service

    @property
    def public_message(self) -> str:
        return "Internal server error"


class InternalError(GatewayError):
    """Unexpected failure; the detail is logged, never returned."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, code="INTERNAL_ERROR")

    @property
    def public_message(self) -> str:
        return "Internal server error"
