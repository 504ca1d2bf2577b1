"""
Products service implementation.

Applies the entitlement gate, derives media_type and issues owner-scoped
writes through the repository.
"""

import logging
import uuid
from typing import Any, NoReturn

from modules.auth.models import Profile

from .exceptions import ProductNotFoundError
from .gate import DenyReason, EntitlementGate
from .interfaces import IProductService
from .media import detect_media_type
from .models import Product, ProductAction, ProductInput
from .repository import ProductRepository

logger = logging.getLogger(__name__)


class ProductService(IProductService):
    """Product mutations with Supabase backend."""

    def __init__(
        self,
        repository: ProductRepository,
        gate: EntitlementGate,
        default_currency: str = "RUB",
    ):
        self._repository = repository
        self._gate = gate
        self._default_currency = default_currency

    async def create_product(self, profile: Profile, product: ProductInput) -> Product:
        self._gate.enforce(profile, ProductAction.CREATE)

        data = self._build_row(product)
        data["user_profile_id"] = profile.id
        created = self._repository.create(data)

        logger.info("Profile %s created product %s", profile.id, created.id)
        return created

    async def update_product(
        self,
        profile: Profile,
        product_id: str,
        product: ProductInput,
    ) -> Product:
        self._gate.enforce(profile, ProductAction.UPDATE)
        product_id = self._canonical_id(product_id)

        updated = self._repository.update_owned(product_id, profile.id, self._build_row(product))
        if updated is None:
            self._reject_missing(profile, ProductAction.UPDATE, product_id)

        logger.info("Profile %s updated product %s", profile.id, product_id)
        return updated

    async def delete_product(self, profile: Profile, product_id: str) -> None:
        self._gate.enforce(profile, ProductAction.DELETE)
        product_id = self._canonical_id(product_id)

        if not self._repository.delete_owned(product_id, profile.id):
            self._reject_missing(profile, ProductAction.DELETE, product_id)

        logger.info("Profile %s deleted product %s", profile.id, product_id)

    def _build_row(self, product: ProductInput) -> dict[str, Any]:
        """Column values shared by create and update."""
        media_type = detect_media_type(product.media_url)
        return {
            "title": product.title,
            "description": product.description,
            "price": str(product.price),
            "currency": product.currency or self._default_currency,
            "media_url": product.media_url or None,
            "media_type": media_type.value if media_type else None,
            "link": product.link,
        }

    @staticmethod
    def _canonical_id(product_id: str) -> str:
        # Product IDs are UUIDs; anything else cannot match a row. Brace and
        # urn: spellings are normalised to the hyphenated form Postgres accepts.
        try:
            return str(uuid.UUID(product_id))
        except ValueError:
            raise ProductNotFoundError(product_id)

    def _reject_missing(self, profile: Profile, action: ProductAction, product_id: str) -> NoReturn:
        """
        Raise for an owner-scoped write that matched no row.

        The follow-up read only classifies the rejection for the log; the
        write already failed atomically and both outcomes render as 404.
        """
        existing = self._repository.get_by_id(product_id)
        decision = self._gate.authorize(profile, action, existing)
        if existing is not None and decision.reason == DenyReason.NOT_OWNER:
            logger.warning(
                "Profile %s attempted to %s product %s owned by %s",
                profile.id, action.value, product_id, existing.user_profile_id,
            )
            self._gate.enforce(profile, action, existing)
        raise ProductNotFoundError(product_id)
