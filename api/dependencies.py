"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

Process-wide secrets (bot token, service role key) are read from settings
here and handed to the components that need them.
"""

import logging
from typing import TYPE_CHECKING

from shared.exceptions import InternalError

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.products.gate import EntitlementGate
    from modules.products.interfaces import IProductService
    from modules.referrals.interfaces import IReferralService
    from modules.gateway.dispatcher import ActionDispatcher

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._gate: "EntitlementGate | None" = None
        self._product_service: "IProductService | None" = None
        self._referral_service: "IReferralService | None" = None
        self._dispatcher: "ActionDispatcher | None" = None

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.repository import ProfileRepository
            from modules.auth.service import AuthService
            from modules.auth.verifier import InitDataVerifier
            from shared.config import get_settings
            from shared.database import get_supabase_client

            settings = get_settings()
            self._auth_service = AuthService(
                verifier=InitDataVerifier(
                    settings.telegram_bot_token,
                    max_age_seconds=settings.init_data_max_age,
                ),
                profiles=ProfileRepository(get_supabase_client()),
            )
        return self._auth_service

    @property
    def gate(self) -> "EntitlementGate":
        """Get the entitlement gate instance."""
        if self._gate is None:
            from modules.products.gate import EntitlementGate
            self._gate = EntitlementGate()
        return self._gate

    @property
    def products(self) -> "IProductService":
        """Get the product service instance."""
        if self._product_service is None:
            from modules.products.repository import ProductRepository
            from modules.products.service import ProductService
            from shared.config import get_settings
            from shared.database import get_supabase_client

            self._product_service = ProductService(
                repository=ProductRepository(get_supabase_client()),
                gate=self.gate,
                default_currency=get_settings().default_currency,
            )
        return self._product_service

    @property
    def referrals(self) -> "IReferralService":
        """Get the referral service instance."""
        if self._referral_service is None:
            from modules.referrals.repository import ReferralRepository
            from modules.referrals.service import ReferralService
            from shared.config import get_settings
            from shared.database import get_supabase_client

            settings = get_settings()
            self._referral_service = ReferralService(
                repository=ReferralRepository(get_supabase_client()),
                history_limit=settings.referral_history_limit,
                totals_from_ledger=settings.referral_totals_from_ledger,
            )
        return self._referral_service

    @property
    def dispatcher(self) -> "ActionDispatcher":
        """Get the action dispatcher instance."""
        if self._dispatcher is None:
            from modules.gateway.dispatcher import ActionDispatcher
            self._dispatcher = ActionDispatcher(
                auth=self.auth,
                products=self.products,
                referrals=self.referrals,
                gate=self.gate,
            )
        return self._dispatcher

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._auth_service = None
        self._gate = None
        self._product_service = None
        self._referral_service = None
        self._dispatcher = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_action_dispatcher() -> "ActionDispatcher":
    """
    FastAPI dependency for the action dispatcher.

    Wiring failures (missing bot token or Supabase config) are raised as
    InternalError so they render through the gateway handler, inside CORS.
    """
    try:
        return get_container().dispatcher
    except (RuntimeError, ValueError) as e:
        logger.error("Service container could not be built: %s", type(e).__name__)
        raise InternalError() from e
