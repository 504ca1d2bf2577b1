"""
Gateway API package.

Provides the FastAPI application for the Telegram Mini App gateway.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
