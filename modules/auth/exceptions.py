"""
Authentication module exceptions.

Every initData failure is an AuthenticationError, so the API layer answers
all of them with the same 401 body. The distinct classes exist for logs
and tests.
"""

from shared.exceptions import AuthenticationError, NotFoundError


class MissingInitDataError(AuthenticationError):
    """Raised when the request carries no initData at all."""

    def __init__(self, message: str = "initData is required"):
        super().__init__(message, code="MISSING_INIT_DATA")


class MalformedInitDataError(AuthenticationError):
    """Raised when initData cannot be decoded as query-string pairs."""

    def __init__(self, message: str = "initData is not a valid query string"):
        super().__init__(message, code="MALFORMED_INIT_DATA")


class MissingSignatureError(AuthenticationError):
    """Raised when initData has no hash field."""

    def __init__(self, message: str = "initData hash is missing"):
        super().__init__(message, code="MISSING_SIGNATURE")


class InvalidSignatureError(AuthenticationError):
    """Raised when the initData hash does not match the recomputed one."""

    def __init__(self, message: str = "initData signature mismatch"):
        super().__init__(message, code="INVALID_SIGNATURE")


class InvalidUserPayloadError(AuthenticationError):
    """Raised when the signed user field is absent or not a valid user object."""

    def __init__(self, message: str = "initData user payload is invalid"):
        super().__init__(message, code="INVALID_USER_PAYLOAD")


class ExpiredInitDataError(AuthenticationError):
    """Raised when auth_date is older than the configured freshness window."""

    def __init__(self, age_seconds: int, max_age_seconds: int):
        super().__init__(
            f"initData is {age_seconds}s old, limit is {max_age_seconds}s",
            code="INIT_DATA_EXPIRED",
            details={"age_seconds": age_seconds, "max_age_seconds": max_age_seconds},
        )


class ProfileNotFoundError(NotFoundError):
    """Raised when no profile exists for a verified Telegram user."""

    def __init__(self, telegram_id: int):
        super().__init__(
            "Profile not found",
            code="PROFILE_NOT_FOUND",
            details={"telegram_id": telegram_id},
        )
