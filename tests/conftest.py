"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import hashlib
import hmac
import json
from decimal import Decimal
from typing import Optional
from urllib.parse import urlencode

import pytest

from api.dependencies import reset_container
from modules.auth.models import Profile, SubscriptionTier


# Test bot token (only for testing)
TEST_BOT_TOKEN = "123456:TEST-bot-token-for-testing-only"

OWNER_PROFILE_ID = "11111111-1111-1111-1111-111111111111"
OTHER_PROFILE_ID = "22222222-2222-2222-2222-222222222222"
PRODUCT_ID = "33333333-3333-3333-3333-333333333333"


def sign_fields(fields: dict[str, str], bot_token: str = TEST_BOT_TOKEN) -> str:
    """Compute the Telegram WebApp hash for a set of fields."""
    data_check_string = "\n".join(f"{k}={fields[k]}" for k in sorted(fields))
    secret_key = hmac.new(b"WebAppData", bot_token.encode(), hashlib.sha256).digest()
    return hmac.new(secret_key, data_check_string.encode(), hashlib.sha256).hexdigest()


def create_init_data(
    user: Optional[dict] = None,
    auth_date: int = 1700000000,
    bot_token: str = TEST_BOT_TOKEN,
    extra: Optional[dict[str, str]] = None,
) -> str:
    """
    Create signed initData the way Telegram does.

    Args:
        user: User object to embed (defaults to a typical user)
        auth_date: Unix issue time
        bot_token: Token used to sign
        extra: Additional signed fields

    Returns:
        URL-encoded initData string
    """
    if user is None:
        user = {"id": 42, "first_name": "Ivan", "username": "ivan"}

    fields = {
        "query_id": "AAHdF6IQAAAAAN0XohDhrOrc",
        "user": json.dumps(user, separators=(",", ":")),
        "auth_date": str(auth_date),
    }
    fields.update(extra or {})
    fields["hash"] = sign_fields(fields, bot_token)
    return urlencode(fields)


def make_profile(
    profile_id: str = OWNER_PROFILE_ID,
    telegram_id: int = 42,
    tier: SubscriptionTier = SubscriptionTier.PREMIUM,
    **overrides,
) -> Profile:
    """Create a Profile for tests."""
    data = {
        "id": profile_id,
        "telegram_id": telegram_id,
        "subscription_tier": tier,
        "referral_code": "REF42",
        "referral_earnings": Decimal("150.50"),
        "referred_by": None,
    }
    data.update(overrides)
    return Profile(**data)


@pytest.fixture(autouse=True)
def reset_container_singleton():
    """Reset the service container before and after each test."""
    reset_container()
    yield
    reset_container()


@pytest.fixture
def premium_profile() -> Profile:
    return make_profile()


@pytest.fixture
def free_profile() -> Profile:
    return make_profile(tier=SubscriptionTier.FREE)


@pytest.fixture
def other_premium_profile() -> Profile:
    return make_profile(profile_id=OTHER_PROFILE_ID, telegram_id=43)


@pytest.fixture
def init_data() -> str:
    """Valid initData signed with TEST_BOT_TOKEN."""
    return create_init_data()
