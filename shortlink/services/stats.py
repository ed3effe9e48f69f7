"""Stats service for the URL shortener application.

This module contains the StatsService class which exposes the visit
statistics recorded for each short link.
"""

import logging

from shortlink.models.link import ShortLinkRecord
from shortlink.repositories.base import RepositoryError
from shortlink.repositories.link_repository import LinkRepository
from shortlink.services.exceptions import NotFoundError, StorageError

logger = logging.getLogger(__name__)


class StatsService:
    """Read-only access to short link statistics."""

    def __init__(self, link_repository: LinkRepository):
        self.link_repository = link_repository

    async def get_link_stats(self, name: str) -> ShortLinkRecord:
        """
        Get the full record of a short link, visits included.

        Raises:
            NotFoundError: If no link with this name exists
            StorageError: If the store cannot be read
        """
        try:
            record = await self.link_repository.get(name)
        except RepositoryError as e:
            logger.exception(f"Error retrieving stats for '{name}': {e}")
            raise StorageError() from e

        if record is None:
            raise NotFoundError()

        return record
