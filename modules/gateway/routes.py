"""
Gateway API endpoints.

Both surfaces share one dispatcher and therefore one initData verifier.
Errors are rendered by the handlers registered in api.errors.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_action_dispatcher

from .dispatcher import ActionDispatcher
from .models import GatewayRequest, InitDataRequest

router = APIRouter()


@router.post("/actions")
async def run_action(
    request: GatewayRequest,
    dispatcher: ActionDispatcher = Depends(get_action_dispatcher),
):
    """
    Run one gateway action.

    Actions:
    - create: {product} -> {product}
    - update: {productId, product} -> {product}
    - delete: {productId} -> {success: true}
    - stats: -> {referralCode, referralCount, totalEarnings, earnings}
    """
    return await dispatcher.dispatch(request)


@router.post("/referrals/stats")
async def referral_stats(
    request: InitDataRequest,
    dispatcher: ActionDispatcher = Depends(get_action_dispatcher),
):
    """
    Get referral statistics for the caller.

    Same result as the stats action.
    """
    return await dispatcher.stats(request.init_data)
