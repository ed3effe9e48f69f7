"""Short link repository backed by a single JSON file.

The whole store is read on every operation and rewritten as a whole on
every mutation. Writes go to a temporary file that replaces the store
atomically, and every read-modify-write cycle runs under one lock so
concurrent requests never lose an update.
"""

import asyncio
import json
import logging
import os
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Optional, Union

from pydantic import ValidationError

from shortlink.models.link import LinkStore, ShortLinkRecord, link_store_adapter
from shortlink.repositories.base import CorruptStoreError, RepositoryError, StoreWriteError

logger = logging.getLogger(__name__)

STORE_FILE_MODE = 0o644


class LinkRepository:
    """
    Record store for short links.

    One instance should exist per store file: the write lock only
    serializes writers that share the instance.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize the repository.

        Args:
            path: Location of the JSON store file
        """
        self.path = Path(path)
        self._write_lock = asyncio.Lock()

    async def load(self) -> LinkStore:
        """
        Read the full store from disk.

        A missing file is created as an empty store.

        Returns:
            LinkStore: Mapping of short name to record

        Raises:
            CorruptStoreError: If the file is not a valid store
            RepositoryError: If the file cannot be read
        """
        return await asyncio.to_thread(self._load_sync)

    async def save(self, store: LinkStore) -> None:
        """
        Replace the persisted store with ``store``.

        Raises:
            StoreWriteError: If the store cannot be written
        """
        await asyncio.to_thread(self._save_sync, store)

    async def get(self, name: str) -> Optional[ShortLinkRecord]:
        """Look up one record without taking the write lock."""
        store = await self.load()
        return store.get(name)

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[LinkStore]:
        """
        Serialized read-modify-write over the whole store.

        Yields the freshly loaded store and saves it when the block exits
        normally. Nothing is written if the block raises.

        Example:
            ```python
            async with repository.transaction() as store:
                store[record.name] = record
            ```
        """
        async with self._write_lock:
            store = await self.load()
            yield store
            # The lock stays held until the write thread finishes, even if cancelled
            save_task = asyncio.ensure_future(self.save(store))
            try:
                await asyncio.shield(save_task)
            except asyncio.CancelledError:
                await asyncio.wait({save_task})
                raise

    def _load_sync(self) -> LinkStore:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info(f"Store file {self.path} not found, creating an empty store")
            self._create_empty_sync()
            return {}
        except OSError as e:
            logger.error(f"Error reading store file {self.path}: {e}")
            raise RepositoryError(f"Failed to read store file {self.path}: {e}") from e

        if not raw.strip():
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptStoreError(self.path, f"invalid JSON ({e})") from e

        if not isinstance(data, dict):
            raise CorruptStoreError(self.path, "top-level value is not an object")

        try:
            store = link_store_adapter.validate_python(data)
        except ValidationError as e:
            raise CorruptStoreError(self.path, f"invalid record ({e.error_count()} errors)") from e

        for key, record in store.items():
            if key != record.name:
                raise CorruptStoreError(
                    self.path, f"key '{key}' does not match record name '{record.name}'"
                )

        return store

    def _create_empty_sync(self) -> None:
        """Create the store as an empty object unless the file appeared meanwhile."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, STORE_FILE_MODE)
        except FileExistsError:
            return
        except OSError as e:
            logger.error(f"Error creating store file {self.path}: {e}")
            raise StoreWriteError(self.path, str(e)) from e

        with os.fdopen(fd, "w", encoding="utf-8") as store_file:
            store_file.write("{}")

    def _save_sync(self, store: LinkStore) -> None:
        payload = json.dumps(
            {name: record.to_json_dict() for name, record in store.items()},
            indent=2,
            ensure_ascii=False,
        )
        directory = self.path.parent
        tmp_path = None
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=directory, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as tmp_file:
                tmp_file.write(payload)
                tmp_file.flush()
                os.fsync(tmp_file.fileno())
            # mkstemp creates owner-only files; keep the store's mode instead
            try:
                mode = os.stat(self.path).st_mode & 0o777
            except FileNotFoundError:
                mode = STORE_FILE_MODE
            os.chmod(tmp_path, mode)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Error writing store file {self.path}: {e}")
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StoreWriteError(self.path, str(e)) from e
