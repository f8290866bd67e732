"""JSON codec for persisted journal collections.

Each collection is stored as a UTF-8 JSON array of record dicts under a fixed
key. The schema version sits under its own key as a bare JSON integer.
"""

from __future__ import annotations

import json
from typing import Any

from daybook.core.exceptions import DataProcessingError

ENTRIES_KEY = "journalEntries"
FOLDERS_KEY = "journalFolders"
CATEGORIES_KEY = "journalCategories"
SCHEMA_VERSION_KEY = "journalSchemaVersion"

COLLECTION_KEYS = (ENTRIES_KEY, FOLDERS_KEY, CATEGORIES_KEY)


def encode_collection(records: list[dict[str, Any]]) -> bytes:
    return json.dumps(records, ensure_ascii=False).encode("utf-8")


def decode_collection(data: bytes) -> list[dict[str, Any]]:
    """Parse a persisted collection.

    Raises:
        DataProcessingError: If the blob is not a JSON array of objects.
    """
    try:
        parsed = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DataProcessingError(f"Invalid JSON: {e}") from e

    if not isinstance(parsed, list):
        raise DataProcessingError(f"Expected a JSON array, got {type(parsed).__name__}")
    if not all(isinstance(item, dict) for item in parsed):
        raise DataProcessingError("Collection contains non-object items")
    return parsed


def encode_version(version: int) -> bytes:
    return str(int(version)).encode("ascii")


def decode_version(data: bytes | None) -> int:
    """Stored schema version. Missing data means legacy (version 0)."""
    if data is None:
        return 0
    try:
        version = json.loads(data.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DataProcessingError(f"Invalid schema version: {e}") from e
    if not isinstance(version, int) or isinstance(version, bool) or version < 0:
        raise DataProcessingError(f"Invalid schema version: {version!r}")
    return version
