"""
Entitlement gate for product mutations.

Rules, in order:
1. Every mutating action requires a premium subscription.
2. Update and delete require the product to belong to the caller.

Ownership at mutation time is enforced by the repository's owner-scoped
write; the resource check here classifies a rejected write.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from modules.auth.models import Profile

from .exceptions import NotEntitledError, NotOwnerError
from .models import Product, ProductAction


class DenyReason(str, Enum):
    NOT_ENTITLED = "not_entitled"
    NOT_OWNER = "not_owner"


@dataclass(frozen=True)
class Decision:
    """Outcome of an authorization check."""

    allowed: bool
    reason: Optional[DenyReason] = None

    @classmethod
    def allow(cls) -> "Decision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: DenyReason) -> "Decision":
        return cls(allowed=False, reason=reason)


class EntitlementGate:
    """Decides whether a profile may perform a product action."""

    def authorize(
        self,
        profile: Profile,
        action: ProductAction,
        product: Optional[Product] = None,
    ) -> Decision:
        if not profile.is_premium:
            return Decision.deny(DenyReason.NOT_ENTITLED)

        if action in (ProductAction.UPDATE, ProductAction.DELETE) and product is not None:
            if product.user_profile_id != profile.id:
                return Decision.deny(DenyReason.NOT_OWNER)

        return Decision.allow()

    def enforce(
        self,
        profile: Profile,
        action: ProductAction,
        product: Optional[Product] = None,
    ) -> None:
        """
        Raise if authorize() denies.

        Raises:
            NotEntitledError: Profile is not premium.
            NotOwnerError: Product belongs to another profile.
        """
        decision = self.authorize(profile, action, product)
        if decision.allowed:
            return

        if decision.reason == DenyReason.NOT_ENTITLED:
            raise NotEntitledError(profile.id, action.value)
        raise NotOwnerError(product.id if product else "", profile.id)
