"""
Referrals module interface.
"""

from typing import Protocol, runtime_checkable

from modules.auth.models import Profile

from .models import ReferralStats


@runtime_checkable
class IReferralService(Protocol):
    """Interface for referral statistics."""

    async def get_stats(self, profile: Profile) -> ReferralStats:
        """
        Aggregate referral statistics for a profile.

        Read-only. A profile with no referrals yields a zero count and an
        empty history.
        """
        ...
