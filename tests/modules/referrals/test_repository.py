"""Tests for the referral repository."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.referrals.repository import (
    REFERRED_NAME_PLACEHOLDER,
    ReferralRepository,
    display_name,
)


def create_mock_earning_data(earning_id: str = "earning-1", referred=None, **overrides) -> dict:
    """Helper to create a referral_earnings row with its embedded referred profile."""
    data = {
        "id": earning_id,
        "purchase_amount": 1000,
        "earning_amount": 100,
        "purchase_type": "subscription",
        "created_at": datetime.now(timezone.utc).isoformat(),
        "referred": referred,
    }
    data.update(overrides)
    return data


class TestCountReferrals:
    def test_count(self):
        mock_db = MagicMock()
        repo = ReferralRepository(mock_db)
        query = mock_db.table.return_value.select.return_value.eq.return_value
        query.execute.return_value.count = 3

        assert repo.count_referrals("profile-1") == 3
        mock_db.table.assert_called_with("profiles")
        mock_db.table.return_value.select.assert_called_once_with("id", count="exact", head=True)
        mock_db.table.return_value.select.return_value.eq.assert_called_once_with("referred_by", "profile-1")

    def test_count_none_is_zero(self):
        mock_db = MagicMock()
        repo = ReferralRepository(mock_db)
        query = mock_db.table.return_value.select.return_value.eq.return_value
        query.execute.return_value.count = None

        assert repo.count_referrals("profile-1") == 0


class TestListRecentEarnings:
    def _query(self, mock_db):
        return (
            mock_db.table.return_value.select.return_value.eq.return_value
            .order.return_value.limit.return_value
        )

    def test_list(self):
        mock_db = MagicMock()
        repo = ReferralRepository(mock_db)
        self._query(mock_db).execute.return_value.data = [
            create_mock_earning_data("e1", referred={"first_name": "Anna", "username": "anna"}),
            create_mock_earning_data("e2", referred={"first_name": None, "username": "bob"}),
            create_mock_earning_data("e3", referred=None),
        ]

        earnings = repo.list_recent_earnings("profile-1", limit=20)

        assert [e.id for e in earnings] == ["e1", "e2", "e3"]
        assert [e.referred_name for e in earnings] == ["Anna", "bob", REFERRED_NAME_PLACEHOLDER]
        assert earnings[0].earning_amount == Decimal("100")
        mock_db.table.assert_called_with("referral_earnings")
        select = mock_db.table.return_value.select.return_value
        select.eq.assert_called_once_with("referrer_id", "profile-1")
        select.eq.return_value.order.assert_called_once_with("created_at", desc=True)
        select.eq.return_value.order.return_value.limit.assert_called_once_with(20)

    def test_list_empty(self):
        mock_db = MagicMock()
        repo = ReferralRepository(mock_db)
        self._query(mock_db).execute.return_value.data = []

        assert repo.list_recent_earnings("profile-1") == []


class TestSumEarnings:
    def test_sum(self):
        mock_db = MagicMock()
        repo = ReferralRepository(mock_db)
        query = mock_db.table.return_value.select.return_value.eq.return_value
        query.execute.return_value.data = [
            {"earning_amount": 100},
            {"earning_amount": "50.25"},
            {"earning_amount": None},
        ]

        assert repo.sum_earnings("profile-1") == Decimal("150.25")

    def test_sum_empty(self):
        mock_db = MagicMock()
        repo = ReferralRepository(mock_db)
        query = mock_db.table.return_value.select.return_value.eq.return_value
        query.execute.return_value.data = []

        assert repo.sum_earnings("profile-1") == Decimal(0)


class TestDisplayName:
    @pytest.mark.parametrize(
        "referred, expected",
        [
            ({"first_name": "Anna", "username": "anna"}, "Anna"),
            ({"first_name": "", "username": "anna"}, "anna"),
            ({"first_name": None, "username": None}, REFERRED_NAME_PLACEHOLDER),
            ({}, REFERRED_NAME_PLACEHOLDER),
            (None, REFERRED_NAME_PLACEHOLDER),
        ],
    )
    def test_fallbacks(self, referred, expected):
        assert display_name(referred) == expected
