"""API route handlers."""

from api.routes import health, history, request

__all__ = ["health", "history", "request"]
