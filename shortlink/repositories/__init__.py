"""Repository layer for the URL shortener application.

This module provides the record store that abstracts persistence
of short links.
"""

from shortlink.repositories.base import (
    CorruptStoreError,
    RepositoryError,
    StoreWriteError,
)
from shortlink.repositories.link_repository import LinkRepository

__all__ = [
    # Exceptions
    "RepositoryError",
    "CorruptStoreError",
    "StoreWriteError",

    # Concrete repositories
    "LinkRepository",
]
