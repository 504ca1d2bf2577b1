"""
Referrals module data models.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.models import Money


class EarningEntry(BaseModel):
    """One row of the referral earnings ledger, with the referred user's name."""

    id: str = Field(..., description="Ledger row ID")
    purchase_amount: Money = Field(default=Decimal(0))
    earning_amount: Money = Field(default=Decimal(0))
    purchase_type: Optional[str] = None
    created_at: datetime
    referred_name: str = Field(..., description="Display name of the referred user")


class ReferralStats(BaseModel):
    """Referral statistics for one profile, serialized in camelCase."""

    model_config = ConfigDict(populate_by_name=True)

    referral_code: Optional[str] = Field(None, alias="referralCode")
    referral_count: int = Field(default=0, ge=0, alias="referralCount")
    total_earnings: Money = Field(default=Decimal(0), alias="totalEarnings")
    earnings: list[EarningEntry] = Field(default_factory=list)
