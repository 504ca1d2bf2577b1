"""
Referrals module.

Read-only aggregation of referral counts and the earnings ledger.

Public API:
- IReferralService: Interface for referral statistics
- ReferralStats, EarningEntry: Models
"""

from .interfaces import IReferralService
from .models import EarningEntry, ReferralStats

__all__ = [
    "IReferralService",
    "EarningEntry",
    "ReferralStats",
]
