"""
Authentication service implementation.

Verifies Telegram initData and resolves the user to a profile.
"""

import logging

from shared.exceptions import AuthenticationError

from .exceptions import ProfileNotFoundError
from .interfaces import IAuthService
from .models import Profile, VerifiedInitData
from .repository import ProfileRepository
from .verifier import InitDataVerifier

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    The verifier holds the bot-derived key; the repository reads profiles.
    Both are injected so tests can supply fakes.
    """

    def __init__(self, verifier: InitDataVerifier, profiles: ProfileRepository):
        self._verifier = verifier
        self._profiles = profiles

    async def verify_init_data(self, init_data: str) -> VerifiedInitData:
        try:
            return self._verifier.verify(init_data)
        except AuthenticationError as e:
            logger.info("Rejected initData: %s", e.code)
            raise

    async def resolve_profile(self, telegram_id: int) -> Profile:
        profile = self._profiles.get_by_telegram_id(telegram_id)
        if profile is None:
            logger.info("No profile for telegram user %s", telegram_id)
            raise ProfileNotFoundError(telegram_id)
        return profile

    async def authenticate(self, init_data: str) -> Profile:
        verified = await self.verify_init_data(init_data)
        return await self.resolve_profile(verified.user.id)
