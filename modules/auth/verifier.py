"""
Telegram Mini App initData signature verification.

secret_key = HMAC_SHA256(key="WebAppData", msg=bot_token)
hash       = hex(HMAC_SHA256(key=secret_key, msg=data_check_string))
"""

import hashlib
import hmac
import json
import logging
import time
from typing import Callable, Optional

from pydantic import SecretStr, ValidationError as PydanticValidationError

from .exceptions import (
    ExpiredInitDataError,
    InvalidSignatureError,
    InvalidUserPayloadError,
    MalformedInitDataError,
    MissingSignatureError,
)
from .init_data import build_data_check_string, parse_init_data
from .models import TelegramUser, VerifiedInitData

logger = logging.getLogger(__name__)

WEB_APP_DATA_KEY = b"WebAppData"


def derive_secret_key(bot_token: str) -> bytes:
    """Derive the per-bot key used to sign Mini App payloads."""
    return hmac.new(WEB_APP_DATA_KEY, bot_token.encode(), hashlib.sha256).digest()


def compute_signature(secret_key: bytes, data_check_string: str) -> str:
    """Lowercase hex HMAC-SHA256 of the data-check-string."""
    return hmac.new(secret_key, data_check_string.encode(), hashlib.sha256).hexdigest()


class InitDataVerifier:
    """
    Verifies initData against one bot token.

    The token is supplied at construction and only the derived key is kept.
    One verifier instance is shared by every action surface.
    """

    def __init__(
        self,
        bot_token: SecretStr | str,
        max_age_seconds: int = 0,
        clock: Callable[[], float] = time.time,
    ):
        token = bot_token.get_secret_value() if isinstance(bot_token, SecretStr) else bot_token
        if not token:
            raise ValueError("Telegram bot token is not configured")

        self._secret_key = derive_secret_key(token)
        self._max_age_seconds = max_age_seconds
        self._clock = clock

    def verify(self, raw: str) -> VerifiedInitData:
        """
        Parse and verify raw initData.

        Args:
            raw: initData string from the client.

        Returns:
            VerifiedInitData with the embedded Telegram user.

        Raises:
            AuthenticationError: Any of the initData failure subclasses.
        """
        fields = parse_init_data(raw)

        received_hash = fields.pop("hash", None)
        if not received_hash:
            raise MissingSignatureError()

        expected_hash = compute_signature(self._secret_key, build_data_check_string(fields))
        if not hmac.compare_digest(expected_hash.encode(), received_hash.encode()):
            raise InvalidSignatureError()

        auth_date = self._parse_auth_date(fields.get("auth_date"))
        self._check_freshness(auth_date)

        user = self._parse_user(fields.get("user"))
        logger.debug("Verified initData for telegram user %s", user.id)

        return VerifiedInitData(user=user, auth_date=auth_date, fields=fields)

    def _parse_auth_date(self, value: Optional[str]) -> Optional[int]:
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            if self._max_age_seconds > 0:
                raise MalformedInitDataError("auth_date is not an integer")
            return None

    def _check_freshness(self, auth_date: Optional[int]) -> None:
        if self._max_age_seconds <= 0:
            return
        if auth_date is None:
            raise MalformedInitDataError("auth_date is required")

        age = int(self._clock()) - auth_date
        if age > self._max_age_seconds:
            raise ExpiredInitDataError(age, self._max_age_seconds)

    @staticmethod
    def _parse_user(value: Optional[str]) -> TelegramUser:
        if not value:
            raise InvalidUserPayloadError("user field is missing")

        try:
            data = json.loads(value)
        except ValueError as e:
            raise InvalidUserPayloadError("user field is not valid JSON") from e

        if not isinstance(data, dict):
            raise InvalidUserPayloadError("user field is not an object")

        try:
            return TelegramUser(**data)
        except PydanticValidationError as e:
            raise InvalidUserPayloadError("user field has no valid id") from e
