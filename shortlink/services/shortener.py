"""URL shortening service for the URL shortener application.

This module contains the ShortenerService class which implements business logic
for creating short links and resolving them for redirection.
"""

import logging
import re
from typing import Optional
from urllib.parse import urlparse

from shortlink.core.visit_logger import log_visit
from shortlink.models.link import ShortLinkRecord
from shortlink.repositories.base import RepositoryError
from shortlink.repositories.link_repository import LinkRepository
from shortlink.services.exceptions import (
    ConflictError,
    InvalidNameError,
    InvalidURLError,
    MissingFieldError,
    NotFoundError,
    StorageError,
)

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"[a-zA-Z0-9-]+")
SCHEME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*")

# Schemes that are meaningless without a host
AUTHORITY_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


class ShortenerService:
    """
    Service for short link business logic.

    Handles validation and creation of short links and the visit
    bookkeeping done on every redirect.
    """

    def __init__(self, link_repository: LinkRepository, base_domain: str):
        """
        Initialize the URL shortening service.

        Args:
            link_repository: Record store for short links
            base_domain: Domain prepended to the name to build ``short_url``
        """
        self.link_repository = link_repository
        self.base_domain = base_domain

    async def create_link(
        self,
        target_url: str,
        name: str,
        client_ip: Optional[str] = None,
    ) -> ShortLinkRecord:
        """
        Create a short link under a user-chosen name.

        Validation runs in order and stops at the first failure.

        Args:
            target_url: The URL to redirect to
            name: The requested short name
            client_ip: IP address of the requesting client

        Returns:
            ShortLinkRecord: The created record

        Raises:
            MissingFieldError: If the URL or the name is empty
            InvalidURLError: If the URL is not a well-formed absolute URL
            InvalidNameError: If the name has characters other than letters, digits and dashes
            ConflictError: If the name is already in use
            StorageError: If the store cannot be read or written
        """
        if not target_url or not name:
            raise MissingFieldError()

        if not self._is_valid_url(target_url):
            raise InvalidURLError()

        if not self._is_valid_name(name):
            raise InvalidNameError()

        try:
            async with self.link_repository.transaction() as store:
                if name in store:
                    logger.info(f"Short name '{name}' is already taken")
                    raise ConflictError()

                record = ShortLinkRecord.create(
                    name=name,
                    target_url=target_url,
                    base_domain=self.base_domain,
                    client_ip=client_ip,
                )
                store[name] = record
        except RepositoryError as e:
            logger.exception(f"Error creating short link '{name}': {e}")
            raise StorageError() from e

        logger.info(f"Created short link '{name}' -> {target_url}")
        return record

    async def resolve_link(self, name: str, client_ip: Optional[str] = None) -> ShortLinkRecord:
        """
        Resolve a short name and record the visit.

        The counter increment, the history append and the write happen in
        one store transaction.

        Args:
            name: The short name being visited
            client_ip: IP address of the visitor

        Returns:
            ShortLinkRecord: The updated record

        Raises:
            NotFoundError: If no link with this name exists
            StorageError: If the store cannot be read or written
        """
        try:
            async with self.link_repository.transaction() as store:
                record = store.get(name)
                if record is None:
                    raise NotFoundError()
                record.record_visit(client_ip)
        except RepositoryError as e:
            logger.exception(f"Error resolving short link '{name}': {e}")
            raise StorageError() from e

        log_visit(name, client_ip, record.target_url)
        return record

    def _is_valid_url(self, url: str) -> bool:
        """
        Check that a URL is well-formed and absolute.

        Args:
            url: URL to validate

        Returns:
            bool: True if the URL is valid, False otherwise
        """
        if url != url.strip():
            return False

        try:
            parsed = urlparse(url)
            # Accessing the port validates it
            parsed.port
        except ValueError:
            return False

        scheme = parsed.scheme
        if not scheme or not SCHEME_PATTERN.fullmatch(scheme):
            return False

        if not url[len(scheme) + 1:]:
            return False

        if scheme.lower() in AUTHORITY_SCHEMES:
            if not parsed.hostname or any(ch.isspace() for ch in parsed.netloc):
                return False

        return True

    def _is_valid_name(self, name: str) -> bool:
        """Letters, digits and dashes only."""
        return bool(NAME_PATTERN.fullmatch(name))
