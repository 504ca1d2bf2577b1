"""
Action dispatcher.

Every call runs the same pipeline and stops at the first failure:
verify initData -> resolve profile -> pick action -> gate -> execute.
"""

import logging
from typing import Optional, Union, assert_never

from pydantic import ValidationError as PydanticValidationError

from modules.auth.interfaces import IAuthService
from modules.auth.models import Profile
from modules.products.exceptions import InvalidProductDataError, MissingProductIdError
from modules.products.gate import EntitlementGate
from modules.products.interfaces import IProductService
from modules.products.models import (
    DeleteProductResponse,
    ProductAction,
    ProductInput,
    ProductResponse,
)
from modules.referrals.interfaces import IReferralService
from modules.referrals.models import ReferralStats
from shared.exceptions import GatewayError, InternalError

from .exceptions import UnsupportedActionError
from .models import GatewayAction, GatewayRequest

logger = logging.getLogger(__name__)

GatewayResponse = Union[ProductResponse, DeleteProductResponse, ReferralStats]


def parse_action(action: Optional[str]) -> GatewayAction:
    """Map the wire action string onto GatewayAction."""
    try:
        return GatewayAction(action)
    except ValueError:
        raise UnsupportedActionError(action)


class ActionDispatcher:
    """
    Runs a GatewayRequest through authentication and the matching service.

    Domain errors propagate unchanged; anything else is logged and replaced
    by an opaque InternalError.
    """

    def __init__(
        self,
        auth: IAuthService,
        products: IProductService,
        referrals: IReferralService,
        gate: EntitlementGate,
    ):
        self._auth = auth
        self._products = products
        self._referrals = referrals
        self._gate = gate

    async def dispatch(self, request: GatewayRequest) -> GatewayResponse:
        try:
            profile = await self._auth.authenticate(request.init_data or "")
            action = parse_action(request.action)
            return await self._execute(action, profile, request)
        except GatewayError:
            raise
        except Exception as e:
            logger.exception("Gateway action %r failed", request.action)
            raise InternalError() from e

    async def stats(self, init_data: Optional[str]) -> ReferralStats:
        """Referral statistics without an action descriptor."""
        try:
            profile = await self._auth.authenticate(init_data or "")
            return await self._referrals.get_stats(profile)
        except GatewayError:
            raise
        except Exception as e:
            logger.exception("Referral stats failed")
            raise InternalError() from e

    async def _execute(
        self,
        action: GatewayAction,
        profile: Profile,
        request: GatewayRequest,
    ) -> GatewayResponse:
        # Entitlement is decided before the action's arguments are looked at.
        if action != GatewayAction.STATS:
            self._gate.enforce(profile, ProductAction(action.value))

        match action:
            case GatewayAction.CREATE:
                product = await self._products.create_product(
                    profile, self._product_input(profile, action, request)
                )
                return ProductResponse(product=product)
            case GatewayAction.UPDATE:
                product = await self._products.update_product(
                    profile,
                    self._product_id(action, request),
                    self._product_input(profile, action, request),
                )
                return ProductResponse(product=product)
            case GatewayAction.DELETE:
                await self._products.delete_product(profile, self._product_id(action, request))
                return DeleteProductResponse(success=True)
            case GatewayAction.STATS:
                return await self._referrals.get_stats(profile)
            case _:
                assert_never(action)

    @staticmethod
    def _product_id(action: GatewayAction, request: GatewayRequest) -> str:
        if not request.product_id:
            raise MissingProductIdError(action.value)
        return request.product_id

    @staticmethod
    def _product_input(
        profile: Profile,
        action: GatewayAction,
        request: GatewayRequest,
    ) -> ProductInput:
        if request.product is None:
            raise InvalidProductDataError("product is required")
        try:
            return ProductInput.model_validate(request.product)
        except PydanticValidationError as e:
            logger.info(
                "Invalid product payload from profile %s for %s: %d error(s)",
                profile.id, action.value, e.error_count(),
            )
            raise InvalidProductDataError() from e
