"""Base repository definitions for the URL shortener application.

This module provides the repository error hierarchy shared by the
storage layer.
"""

from pathlib import Path
from typing import Union


class RepositoryError(Exception):
    """Base exception for repository errors."""
    pass


class CorruptStoreError(RepositoryError):
    """Exception raised when the persisted store cannot be parsed."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Store file {self.path} is corrupt: {reason}")


class StoreWriteError(RepositoryError):
    """Exception raised when the store cannot be written."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to write store file {self.path}: {reason}")
