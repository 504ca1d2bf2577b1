"""
Gateway module.

Entry point for Mini App calls: verifies initData, resolves the profile and
dispatches one of a closed set of actions.

Public API:
- ActionDispatcher: Runs a request through the pipeline
- GatewayAction, GatewayRequest: Request models
"""

from .dispatcher import ActionDispatcher, parse_action
from .exceptions import UnsupportedActionError
from .models import GatewayAction, GatewayRequest, InitDataRequest

__all__ = [
    "ActionDispatcher",
    "parse_action",
    "UnsupportedActionError",
    "GatewayAction",
    "GatewayRequest",
    "InitDataRequest",
]
