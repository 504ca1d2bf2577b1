"""Tests for the action dispatcher."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from modules.auth.exceptions import InvalidSignatureError, ProfileNotFoundError
from modules.gateway.dispatcher import ActionDispatcher, parse_action
from modules.gateway.exceptions import UnsupportedActionError
from modules.gateway.models import GatewayAction, GatewayRequest
from modules.products.exceptions import (
    InvalidProductDataError,
    MissingProductIdError,
    NotEntitledError,
)
from modules.products.gate import EntitlementGate
from modules.products.models import DeleteProductResponse, Product, ProductResponse
from modules.referrals.models import ReferralStats
from shared.exceptions import InternalError
from tests.conftest import OWNER_PROFILE_ID, PRODUCT_ID

PRODUCT_PAYLOAD = {"title": "Course", "price": 990, "link": "https://example.com"}


def make_product() -> Product:
    return Product(
        id=PRODUCT_ID,
        user_profile_id=OWNER_PROFILE_ID,
        title="Course",
        price=Decimal("990"),
        created_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def auth(premium_profile):
    auth = AsyncMock()
    auth.authenticate.return_value = premium_profile
    return auth


@pytest.fixture
def products():
    products = AsyncMock()
    products.create_product.return_value = make_product()
    products.update_product.return_value = make_product()
    return products


@pytest.fixture
def referrals():
    referrals = AsyncMock()
    referrals.get_stats.return_value = ReferralStats(referral_code="REF42")
    return referrals


@pytest.fixture
def dispatcher(auth, products, referrals) -> ActionDispatcher:
    return ActionDispatcher(auth, products, referrals, EntitlementGate())


def request(**kwargs) -> GatewayRequest:
    return GatewayRequest(init_data="signed", **kwargs)


class TestParseAction:
    @pytest.mark.parametrize("value", [a.value for a in GatewayAction])
    def test_known(self, value):
        assert parse_action(value) == GatewayAction(value)

    @pytest.mark.parametrize("value", [None, "", "CREATE", "drop", "list"])
    def test_unknown(self, value):
        with pytest.raises(UnsupportedActionError) as exc_info:
            parse_action(value)
        assert exc_info.value.status_code == 400


class TestDispatch:
    @pytest.mark.asyncio
    async def test_create(self, dispatcher, products, premium_profile):
        result = await dispatcher.dispatch(request(action="create", product=PRODUCT_PAYLOAD))

        assert isinstance(result, ProductResponse)
        assert result.product.id == PRODUCT_ID
        profile, product_input = products.create_product.call_args[0]
        assert profile == premium_profile
        assert product_input.title == "Course"

    @pytest.mark.asyncio
    async def test_update(self, dispatcher, products):
        result = await dispatcher.dispatch(
            request(action="update", product_id=PRODUCT_ID, product=PRODUCT_PAYLOAD)
        )

        assert isinstance(result, ProductResponse)
        assert products.update_product.call_args[0][1] == PRODUCT_ID

    @pytest.mark.asyncio
    async def test_delete(self, dispatcher, products, premium_profile):
        result = await dispatcher.dispatch(request(action="delete", product_id=PRODUCT_ID))

        assert result == DeleteProductResponse(success=True)
        products.delete_product.assert_awaited_once_with(premium_profile, PRODUCT_ID)

    @pytest.mark.asyncio
    async def test_stats(self, dispatcher, referrals, premium_profile):
        result = await dispatcher.dispatch(request(action="stats"))

        assert isinstance(result, ReferralStats)
        referrals.get_stats.assert_awaited_once_with(premium_profile)

    @pytest.mark.asyncio
    async def test_stats_allowed_for_free_profile(self, dispatcher, auth, free_profile):
        auth.authenticate.return_value = free_profile
        result = await dispatcher.dispatch(request(action="stats"))
        assert isinstance(result, ReferralStats)

    @pytest.mark.asyncio
    async def test_unsupported_action(self, dispatcher, products):
        with pytest.raises(UnsupportedActionError):
            await dispatcher.dispatch(request(action="archive"))
        products.create_product.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", ["create", "update", "delete"])
    async def test_free_profile_not_entitled(self, dispatcher, auth, products, free_profile, action):
        """Entitlement is decided before the arguments are validated."""
        auth.authenticate.return_value = free_profile

        with pytest.raises(NotEntitledError):
            await dispatcher.dispatch(request(action=action))

        products.create_product.assert_not_called()
        products.update_product.assert_not_called()
        products.delete_product.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", ["update", "delete"])
    async def test_missing_product_id(self, dispatcher, action):
        with pytest.raises(MissingProductIdError):
            await dispatcher.dispatch(request(action=action, product=PRODUCT_PAYLOAD))

    @pytest.mark.asyncio
    async def test_missing_product(self, dispatcher):
        with pytest.raises(InvalidProductDataError):
            await dispatcher.dispatch(request(action="create"))

    @pytest.mark.asyncio
    async def test_invalid_product(self, dispatcher):
        with pytest.raises(InvalidProductDataError):
            await dispatcher.dispatch(request(action="create", product={"title": ""}))

    @pytest.mark.asyncio
    async def test_auth_failure_stops_pipeline(self, dispatcher, auth, products, referrals):
        auth.authenticate.side_effect = InvalidSignatureError()

        with pytest.raises(InvalidSignatureError):
            await dispatcher.dispatch(request(action="create", product=PRODUCT_PAYLOAD))

        products.create_product.assert_not_called()
        referrals.get_stats.assert_not_called()

    @pytest.mark.asyncio
    async def test_auth_runs_before_action_check(self, dispatcher, auth):
        """A forged call with a bogus action is a 401, not a 400."""
        auth.authenticate.side_effect = InvalidSignatureError()

        with pytest.raises(InvalidSignatureError):
            await dispatcher.dispatch(request(action="bogus"))

    @pytest.mark.asyncio
    async def test_profile_not_found(self, dispatcher, auth):
        auth.authenticate.side_effect = ProfileNotFoundError(42)

        with pytest.raises(ProfileNotFoundError):
            await dispatcher.dispatch(request(action="stats"))

    @pytest.mark.asyncio
    async def test_missing_init_data_passed_as_empty(self, dispatcher, auth):
        await dispatcher.dispatch(GatewayRequest(action="stats"))
        auth.authenticate.assert_awaited_once_with("")

    @pytest.mark.asyncio
    async def test_unexpected_error_becomes_internal(self, dispatcher, products):
        products.create_product.side_effect = RuntimeError("connection reset")

        with pytest.raises(InternalError) as exc_info:
            await dispatcher.dispatch(request(action="create", product=PRODUCT_PAYLOAD))

        assert exc_info.value.public_message == "Internal server error"
        assert "connection reset" not in exc_info.value.public_message


class TestStats:
    @pytest.mark.asyncio
    async def test_stats(self, dispatcher, referrals, premium_profile):
        result = await dispatcher.stats("signed")

        assert result.referral_code == "REF42"
        referrals.get_stats.assert_awaited_once_with(premium_profile)

    @pytest.mark.asyncio
    async def test_stats_internal_error(self, dispatcher, referrals):
        referrals.get_stats.side_effect = ConnectionError("db down")

        with pytest.raises(InternalError):
            await dispatcher.stats("signed")
