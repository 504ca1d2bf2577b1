"""
Referral repository for database access.

Reads `profiles` (who was referred by whom) and the append-only
`referral_earnings` ledger.
"""

from decimal import Decimal
from typing import Any, Optional

from shared.repository import BaseRepository
from .models import EarningEntry

REFERRED_NAME_PLACEHOLDER = "Пользователь"

EARNING_COLUMNS = (
    "id, purchase_amount, earning_amount, purchase_type, created_at, "
    "referred:referred_id(first_name, username)"
)


class ReferralRepository(BaseRepository[EarningEntry]):
    """Repository for referral counts and ledger reads. Never writes."""

    def count_referrals(self, profile_id: str) -> int:
        """Count profiles whose referred_by is profile_id."""
        result = (
            self._db.table("profiles")
            .select("id", count="exact", head=True)
            .eq("referred_by", profile_id)
            .execute()
        )
        return result.count or 0

    def list_recent_earnings(self, referrer_id: str, limit: int = 20) -> list[EarningEntry]:
        """
        Load the most recent ledger rows for a referrer, newest first.

        Args:
            referrer_id: Referrer profile ID.
            limit: Maximum number of rows.
        """
        result = (
            self._db.table("referral_earnings")
            .select(EARNING_COLUMNS)
            .eq("referrer_id", referrer_id)
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [self._map_to_entry(row) for row in result.data or []]

    def sum_earnings(self, referrer_id: str) -> Decimal:
        """Sum earning_amount over every ledger row of a referrer."""
        result = (
            self._db.table("referral_earnings")
            .select("earning_amount")
            .eq("referrer_id", referrer_id)
            .execute()
        )
        return sum(
            (Decimal(str(row.get("earning_amount") or 0)) for row in result.data or []),
            Decimal(0),
        )

    def _map_to_entry(self, data: dict[str, Any]) -> EarningEntry:
        """Map a ledger row with its embedded referred profile."""
        return EarningEntry(
            id=str(data["id"]),
            purchase_amount=Decimal(str(data.get("purchase_amount") or 0)),
            earning_amount=Decimal(str(data.get("earning_amount") or 0)),
            purchase_type=data.get("purchase_type"),
            created_at=data["created_at"],
            referred_name=display_name(data.get("referred")),
        )


def display_name(referred: Optional[dict[str, Any]]) -> str:
    """First name, else username, else the generic placeholder."""
    if not referred:
        return REFERRED_NAME_PLACEHOLDER
    return referred.get("first_name") or referred.get("username") or REFERRED_NAME_PLACEHOLDER
