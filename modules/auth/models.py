"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, StrictInt


class SubscriptionTier(str, Enum):
    """Profile subscription tiers."""

    FREE = "free"
    PREMIUM = "premium"


class TelegramUser(BaseModel):
    """
    The user object embedded in signed initData.

    Only `id` is guaranteed by the platform; everything else may be absent.
    """

    id: StrictInt = Field(..., description="Telegram user ID")
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    username: Optional[str] = Field(None, description="Username without @")
    language_code: Optional[str] = Field(None, description="IETF language tag")
    is_premium: Optional[bool] = Field(None, description="Telegram Premium flag")

    model_config = {"frozen": True, "extra": "ignore"}


class VerifiedInitData(BaseModel):
    """
    initData whose signature has been checked.

    `fields` holds every signed field except `hash`, in the order received.
    """

    user: TelegramUser
    auth_date: Optional[int] = Field(None, description="Unix time the payload was issued")
    fields: dict[str, str] = Field(default_factory=dict)

    model_config = {"frozen": True}


class Profile(BaseModel):
    """
    Internal account bound to one Telegram user.

    Profiles are provisioned outside the gateway; here they are read-only.
    """

    id: str = Field(..., description="Profile ID (UUID)")
    telegram_id: int = Field(..., description="Telegram user ID")
    subscription_tier: SubscriptionTier = Field(default=SubscriptionTier.FREE)
    referral_code: Optional[str] = Field(None, description="Code shared with invitees")
    referral_earnings: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        description="Accumulated referral earnings",
    )
    referred_by: Optional[str] = Field(None, description="Referrer profile ID")

    model_config = {"frozen": True}

    @property
    def is_premium(self) -> bool:
        return self.subscription_tier == SubscriptionTier.PREMIUM
