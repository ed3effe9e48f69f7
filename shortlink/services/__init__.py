"""Service layer for the URL shortener application.

This package contains service classes implementing the business logic of the application.
Services orchestrate calls to the record store and provide domain-specific operations.
"""

from shortlink.services.shortener import ShortenerService
from shortlink.services.stats import StatsService

__all__ = ["ShortenerService", "StatsService"]
