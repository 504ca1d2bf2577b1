"""
Products module.

Premium profiles create, update and delete their own product listings.

Public API:
- IProductService: Interface for product mutations
- EntitlementGate: Tier and ownership checks
- detect_media_type: media_url classification
"""

from .interfaces import IProductService
from .gate import Decision, DenyReason, EntitlementGate
from .media import detect_media_type
from .models import (
    DeleteProductResponse,
    MediaType,
    Product,
    ProductAction,
    ProductInput,
    ProductResponse,
)
from .exceptions import (
    NotEntitledError,
    ProductNotFoundError,
    NotOwnerError,
    MissingProductIdError,
    InvalidProductDataError,
)

__all__ = [
    "IProductService",
    "Decision",
    "DenyReason",
    "EntitlementGate",
    "detect_media_type",
    "DeleteProductResponse",
    "MediaType",
    "Product",
    "ProductAction",
    "ProductInput",
    "ProductResponse",
    "NotEntitledError",
    "ProductNotFoundError",
    "NotOwnerError",
    "MissingProductIdError",
    "InvalidProductDataError",
]
