"""
Authentication module.

Handles Telegram initData parsing, signature verification and profile
resolution.

Public API:
- IAuthService: Interface for auth operations
- InitDataVerifier: HMAC verifier bound to one bot token
- TelegramUser, VerifiedInitData, Profile: Models
- Auth exceptions: InvalidSignatureError, ProfileNotFoundError, etc.
"""

from .interfaces import IAuthService
from .models import Profile, SubscriptionTier, TelegramUser, VerifiedInitData
from .verifier import InitDataVerifier
from .exceptions import (
    MissingInitDataError,
    MalformedInitDataError,
    MissingSignatureError,
    InvalidSignatureError,
    InvalidUserPayloadError,
    ExpiredInitDataError,
    ProfileNotFoundError,
)

__all__ = [
    # Interface
    "IAuthService",
    "InitDataVerifier",
    # Models
    "Profile",
    "SubscriptionTier",
    "TelegramUser",
    "VerifiedInitData",
    # Exceptions
    "MissingInitDataError",
    "MalformedInitDataError",
    "MissingSignatureError",
    "InvalidSignatureError",
    "InvalidUserPayloadError",
    "ExpiredInitDataError",
    "ProfileNotFoundError",
]
