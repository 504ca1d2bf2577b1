"""
Products module data models.

A product (table `user_products`) is a listing owned by exactly one profile.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from shared.models import Money


class MediaType(str, Enum):
    """Kind of media attached to a product, derived from its media_url."""

    IMAGE = "image"
    YOUTUBE = "youtube"


class ProductAction(str, Enum):
    """Mutating product actions guarded by the entitlement gate."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class ProductInput(BaseModel):
    """
    Product fields accepted from the client.

    Unknown fields, including any client-sent media_type, are dropped.
    """

    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=5000)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    currency: Optional[str] = Field(None, min_length=1, max_length=10)
    media_url: Optional[str] = None
    link: Optional[str] = None

    model_config = {"extra": "ignore"}


class Product(BaseModel):
    """A persisted product row."""

    id: str = Field(..., description="Product ID (UUID)")
    user_profile_id: str = Field(..., description="Owner profile ID")
    title: str
    description: Optional[str] = None
    price: Money = Field(default=Decimal(0))
    currency: str = "RUB"
    media_url: Optional[str] = None
    media_type: Optional[MediaType] = None
    link: Optional[str] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class ProductResponse(BaseModel):
    """Response for create and update."""

    product: Product


class DeleteProductResponse(BaseModel):
    """Response for delete."""

    success: bool = True
