"""Schema migrations for persisted journal collections.

Data written by earlier versions of the journal has no version marker and
varies in which optional fields are present. Each migration lifts raw record
dicts one version forward; they run once at load time so the rest of the code
can rely on every field existing.

Versions:
    0: plain entries (id, title, content, timestamps)
    1: entries may be filed into folders (``folderId``)
    2: entries carry a sentiment score (``sentiment``)
    3: entries carry tags and a category; categories carry a colour
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from .config import CATEGORY_PALETTE
from .models import normalize_tags

Record = dict[str, Any]


@dataclass
class Collections:
    """Raw record dicts for the three persisted collections."""

    entries: list[Record] = field(default_factory=list)
    folders: list[Record] = field(default_factory=list)
    categories: list[Record] = field(default_factory=list)


def _add_folders(data: Collections, palette: Sequence[str]) -> None:
    for entry in data.entries:
        entry.setdefault("folderId", None)


def _add_sentiment(data: Collections, palette: Sequence[str]) -> None:
    for entry in data.entries:
        entry.setdefault("sentiment", None)


def _add_tags_and_categories(data: Collections, palette: Sequence[str]) -> None:
    for entry in data.entries:
        raw_tags = entry.get("tags")
        entry["tags"] = normalize_tags(raw_tags if isinstance(raw_tags, list) else [])
        entry.setdefault("category", None)

    for index, category in enumerate(data.categories):
        if not category.get("color"):
            category["color"] = palette[index % len(palette)]


MIGRATIONS: list[tuple[int, Callable[[Collections, Sequence[str]], None]]] = [
    (1, _add_folders),
    (2, _add_sentiment),
    (3, _add_tags_and_categories),
]

CURRENT_SCHEMA_VERSION = MIGRATIONS[-1][0]


def migrate(
    data: Collections,
    from_version: int,
    palette: Sequence[str] = CATEGORY_PALETTE,
) -> tuple[Collections, int]:
    """Apply every migration newer than ``from_version``, in order.

    Mutates and returns ``data`` along with the resulting version. Data from a
    newer schema than this code knows is left alone.
    """
    version = from_version
    for target, step in MIGRATIONS:
        if target <= version:
            continue
        step(data, palette)
        logger.info(f"Migrated journal data from schema v{version} to v{target}")
        version = target
    return data, version
