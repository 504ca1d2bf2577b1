"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from .models import Profile, VerifiedInitData


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def verify_init_data(self, init_data: str) -> VerifiedInitData:
        """
        Verify the signature of raw initData.

        Args:
            init_data: initData string from the Telegram Mini App

        Returns:
            VerifiedInitData with the embedded Telegram user

        Raises:
            AuthenticationError: If initData is missing, malformed or forged
        """
        ...

    async def resolve_profile(self, telegram_id: int) -> Profile:
        """
        Resolve a verified Telegram user to a profile.

        Args:
            telegram_id: Telegram user ID

        Returns:
            The profile bound to that user

        Raises:
            ProfileNotFoundError: If no profile exists
        """
        ...

    async def authenticate(self, init_data: str) -> Profile:
        """
        Verify initData and resolve its user in one step.

        Raises:
            AuthenticationError: If initData is rejected
            ProfileNotFoundError: If the user has no profile
        """
        ...
