"""
Products module exceptions.
"""

from shared.exceptions import (
    AuthorizationError,
    NotFoundError,
    ValidationError,
)


class NotEntitledError(AuthorizationError):
    """Raised when a non-premium profile attempts a product mutation."""

    def __init__(self, profile_id: str, action: str):
        super().__init__(
            "Premium subscription required",
            code="NOT_ENTITLED",
            details={"profile_id": profile_id, "action": action},
        )


class ProductNotFoundError(NotFoundError):
    """Raised when a product does not exist."""

    def __init__(self, product_id: str):
        super().__init__(
            "Product not found",
            code="PRODUCT_NOT_FOUND",
            details={"product_id": product_id},
        )


class NotOwnerError(ProductNotFoundError):
    """
    Raised when a product exists but belongs to another profile.

    Renders exactly like ProductNotFoundError so callers cannot tell
    someone else's product from a missing one.
    """

    def __init__(self, product_id: str, profile_id: str):
        super().__init__(product_id)
        self.details["profile_id"] = profile_id


class MissingProductIdError(ValidationError):
    """Raised when update/delete is requested without a productId."""

    def __init__(self, action: str):
        super().__init__(
            "productId is required",
            code="MISSING_PRODUCT_ID",
            details={"action": action},
        )


class InvalidProductDataError(ValidationError):
    """Raised when the product payload is missing or fails validation."""

    def __init__(self, message: str = "Invalid product data"):
        super().__init__(message, code="INVALID_PRODUCT_DATA")
