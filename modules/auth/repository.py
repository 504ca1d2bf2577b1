"""
Profile repository for database access.

Reads the `profiles` table. Profiles are provisioned elsewhere, so this
repository never inserts or updates them.
"""

from decimal import Decimal
from typing import Optional, Any

from shared.repository import BaseRepository
from .models import Profile, SubscriptionTier

PROFILE_COLUMNS = "id, telegram_id, subscription_tier, referral_code, referral_earnings, referred_by"


class ProfileRepository(BaseRepository[Profile]):
    """Repository for profile lookups."""

    def get_by_telegram_id(self, telegram_id: int) -> Optional[Profile]:
        """
        Get the profile bound to a Telegram user.

        Args:
            telegram_id: Telegram user ID from verified initData.

        Returns:
            Profile if one exists, None otherwise.
        """
        result = (
            self._db.table("profiles")
            .select(PROFILE_COLUMNS)
            .eq("telegram_id", telegram_id)
            .limit(1)
            .execute()
        )

        if not result.data:
            return None

        return self._map_to_profile(result.data[0])

    def _map_to_profile(self, data: dict[str, Any]) -> Profile:
        """Map database row to Profile model."""
        referred_by = data.get("referred_by")
        return Profile(
            id=str(data["id"]),
            telegram_id=int(data["telegram_id"]),
            subscription_tier=SubscriptionTier(data.get("subscription_tier") or "free"),
            referral_code=data.get("referral_code"),
            referral_earnings=Decimal(str(data.get("referral_earnings") or 0)),
            referred_by=str(referred_by) if referred_by else None,
        )
