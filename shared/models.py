"""
Shared data types used across modules.

These are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Monetary amounts are Decimal in memory and plain JSON numbers on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
