"""
Abstract base class for key-value storage backends.

The journal persists each collection as one opaque blob under a fixed key,
so backends only need whole-value reads and writes.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator


class KeyValueStore(ABC):
    """Abstract base class for byte-valued key-value backends."""

    def __init__(self, **config):
        self.config = config

    @abstractmethod
    async def get(self, key: str) -> bytes:
        """Load the value stored under ``key``. Raises StorageKeyError if not found."""

    @abstractmethod
    async def set(self, key: str, data: bytes) -> None:
        """Store ``data`` under ``key``, replacing any previous value."""

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check if a key exists in storage."""

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key. Returns True if deleted, False if it didn't exist."""

    @abstractmethod
    async def list_keys(self, prefix: str = "") -> AsyncIterator[str]:
        """List keys with optional prefix filter."""

    async def get_or_none(self, key: str) -> bytes | None:
        """Like ``get`` but returns None for a missing key."""
        try:
            return await self.get(key)
        except StorageKeyError:
            return None


class StorageError(Exception):
    """Base exception for storage errors."""


class StorageKeyError(StorageError, KeyError):
    """Raised when a storage key doesn't exist."""


class StoragePermissionError(StorageError):
    """Raised when storage operation is not permitted."""
