"""
Gateway request models.

One structured call carries the initData, the action and its arguments.
Field names follow the Mini App client (camelCase).
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class GatewayAction(str, Enum):
    """Closed set of actions the gateway dispatches."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    STATS = "stats"


class GatewayRequest(BaseModel):
    """
    Inbound action call.

    action and product stay loosely typed here so that initData is verified
    before any other part of the body is judged.
    """

    model_config = ConfigDict(populate_by_name=True)

    init_data: Optional[str] = Field(None, alias="initData")
    action: Optional[str] = None
    product_id: Optional[str] = Field(None, alias="productId")
    product: Optional[dict[str, Any]] = None


class InitDataRequest(BaseModel):
    """Body of surfaces that need nothing but initData."""

    model_config = ConfigDict(populate_by_name=True)

    init_data: Optional[str] = Field(None, alias="initData")
