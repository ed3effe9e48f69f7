"""Tests for record store error handling."""

from pathlib import Path
from unittest.mock import patch

import pytest

from shortlink.repositories.base import RepositoryError, StoreWriteError
from tests.utils import create_test_record


@pytest.mark.repository
class TestStoreErrorHandling:
    """Tests for I/O failures in the record store."""

    @pytest.mark.asyncio
    async def test_failed_write_keeps_previous_file(self, link_repository, store_path):
        """A write that fails before the replace leaves the old store intact."""
        original = create_test_record(name="original")
        await link_repository.save({original.name: original})
        before = store_path.read_text(encoding="utf-8")

        with patch(
            "shortlink.repositories.link_repository.os.replace",
            side_effect=OSError("disk full"),
        ):
            with pytest.raises(StoreWriteError) as excinfo:
                await link_repository.save({})

        assert "disk full" in str(excinfo.value)
        assert store_path.read_text(encoding="utf-8") == before
        assert list(store_path.parent.glob("*.tmp")) == []

    @pytest.mark.asyncio
    async def test_failed_write_inside_transaction(self, link_repository, store_path):
        """A transaction whose save fails surfaces a repository error."""
        original = create_test_record(name="original")
        await link_repository.save({original.name: original})

        with patch(
            "shortlink.repositories.link_repository.os.replace",
            side_effect=OSError("read-only file system"),
        ):
            with pytest.raises(RepositoryError):
                async with link_repository.transaction() as store:
                    store["extra"] = create_test_record(name="extra")

        stored = await link_repository.load()
        assert set(stored) == {"original"}

    @pytest.mark.asyncio
    async def test_unreadable_file(self, link_repository, store_path):
        """Read errors other than a missing file are repository errors."""
        store_path.write_text("{}", encoding="utf-8")

        with patch.object(Path, "read_text", side_effect=PermissionError("denied")):
            with pytest.raises(RepositoryError) as excinfo:
                await link_repository.load()

        assert "denied" in str(excinfo.value)
