"""HTTP middleware for the URL shortener application."""

from shortlink.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
