"""
Gateway module exceptions.
"""

from typing import Optional

from shared.exceptions import ValidationError


class UnsupportedActionError(ValidationError):
    """Raised when the action string is not one the gateway dispatches."""

    def __init__(self, action: Optional[str]):
        super().__init__(
            "Invalid action",
            code="UNSUPPORTED_ACTION",
            details={"action": action},
        )
