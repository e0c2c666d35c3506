"""
HTTP API for the browser UI.
"""

from .server import app, get_service

__all__ = ["app", "get_service"]
