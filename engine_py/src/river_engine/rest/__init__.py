"""
HTTP transport for the game engine.
"""

from .server import app, create_app

__all__ = ["app", "create_app"]
