"""Core module for the URL shortener application."""

from shortlink.core.config import settings

__all__ = ["settings"]
