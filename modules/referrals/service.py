"""
Referrals service implementation.

Derives referral counts and earnings history for a resolved profile.
"""

import logging

from modules.auth.models import Profile

from .interfaces import IReferralService
from .models import ReferralStats
from .repository import ReferralRepository

logger = logging.getLogger(__name__)


class ReferralService(IReferralService):
    """
    Referral ledger aggregator.

    By default total earnings come from the profile's accumulator. With
    totals_from_ledger the ledger is summed at read time instead.
    """

    def __init__(
        self,
        repository: ReferralRepository,
        history_limit: int = 20,
        totals_from_ledger: bool = False,
    ):
        self._repository = repository
        self._history_limit = history_limit
        self._totals_from_ledger = totals_from_ledger

    async def get_stats(self, profile: Profile) -> ReferralStats:
        referral_count = self._repository.count_referrals(profile.id)
        earnings = self._repository.list_recent_earnings(profile.id, self._history_limit)

        if self._totals_from_ledger:
            total = self._repository.sum_earnings(profile.id)
        else:
            total = profile.referral_earnings

        logger.debug(
            "Referral stats for profile %s: count=%d, history=%d",
            profile.id, referral_count, len(earnings),
        )

        return ReferralStats(
            referral_code=profile.referral_code,
            referral_count=referral_count,
            total_earnings=total,
            earnings=earnings,
        )
