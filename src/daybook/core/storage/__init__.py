"""
Storage backends for daybook.

Provides an async key-value interface with a local filesystem backend
(the default) and an in-memory backend.
"""

from .base import (
    KeyValueStore,
    StorageError,
    StorageKeyError,
    StoragePermissionError,
)
from .local import LocalStorage
from .memory import MemoryStorage

__all__ = [
    "KeyValueStore",
    "LocalStorage",
    "MemoryStorage",
    "StorageError",
    "StorageKeyError",
    "StoragePermissionError",
]
