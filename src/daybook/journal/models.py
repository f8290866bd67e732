"""Core data models for the journal: entries, folders and categories.

Records serialize to the camelCase dicts the journal has always persisted
(``createdAt``, ``folderId`` ...). Optional fields that are unset are left out
of the serialized dict rather than written as null.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

DEFAULT_TITLE = "Untitled"


def new_id() -> str:
    """Generate an opaque record id."""
    return uuid.uuid4().hex


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def normalize_tag(tag: str) -> str:
    """Tags are compared and stored trimmed and lowercased."""
    return tag.strip().lower()


def normalize_tags(tags) -> list[str]:
    """Normalise a tag list: trimmed, lowercase, no blanks, first occurrence kept."""
    seen: list[str] = []
    for tag in tags or []:
        if not isinstance(tag, str):
            continue
        norm = normalize_tag(tag)
        if norm and norm not in seen:
            seen.append(norm)
    return seen


def _parse_datetime(value: str | datetime | None) -> datetime:
    if isinstance(value, datetime):
        return value
    if not value:
        return utcnow()
    return datetime.fromisoformat(str(value))


def _format_datetime(dt: datetime) -> str:
    return dt.isoformat()


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_id(value: Any) -> str | None:
    return str(value) if value not in (None, "") else None


@dataclass
class Entry:
    """A single journal record.

    Attributes:
        id: Opaque unique id.
        title: Entry title.
        content: Free text body (plain, markdown or HTML).
        created_at: Creation timestamp.
        updated_at: Last save timestamp.
        folder_id: Folder the entry is filed in. None = root (unfiled).
        tags: Lowercase labels, no duplicates, no blanks.
        category: Id of the single category assigned, if any.
        sentiment: Lexicon score in [-1, 1], recomputed on save.
    """

    id: str
    title: str = DEFAULT_TITLE
    content: str = ""
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    folder_id: str | None = None
    tags: list[str] = field(default_factory=list)
    category: str | None = None
    sentiment: float | None = None

    def __post_init__(self):
        if not self.id or not isinstance(self.id, str):
            raise ValueError("Entry id must be a non-empty string")
        self.tags = normalize_tags(self.tags)

    @classmethod
    def new(cls, title: str = DEFAULT_TITLE, content: str = "", folder_id: str | None = None) -> Entry:
        """Create a fresh entry stamped with the current time."""
        now = utcnow()
        return cls(id=new_id(), title=title, content=content, created_at=now, updated_at=now, folder_id=folder_id)

    @property
    def text(self) -> str:
        """Title and body joined the way sentiment scoring reads them."""
        return f"{self.title} {self.content}"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "createdAt": _format_datetime(self.created_at),
            "updatedAt": _format_datetime(self.updated_at),
            "tags": list(self.tags),
        }
        if self.folder_id is not None:
            data["folderId"] = self.folder_id
        if self.category is not None:
            data["category"] = self.category
        if self.sentiment is not None:
            data["sentiment"] = self.sentiment
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entry:
        sentiment = data.get("sentiment")
        tags = data.get("tags")
        return cls(
            id=str(data.get("id") or ""),
            title=_text(data.get("title")),
            content=_text(data.get("content")),
            created_at=_parse_datetime(data.get("createdAt")),
            updated_at=_parse_datetime(data.get("updatedAt") or data.get("createdAt")),
            folder_id=_optional_id(data.get("folderId")),
            tags=tags if isinstance(tags, list) else [],
            category=_optional_id(data.get("category")),
            sentiment=float(sentiment) if sentiment is not None else None,
        )

    def __repr__(self) -> str:
        preview = self.title[:40] + "..." if len(self.title) > 40 else self.title
        return f"Entry(id='{self.id}', title='{preview}', folder={self.folder_id!r})"


@dataclass
class Folder:
    """A named bucket entries can be filed into."""

    id: str
    name: str
    created_at: datetime = field(default_factory=utcnow)

    @classmethod
    def new(cls, name: str) -> Folder:
        return cls(id=new_id(), name=name)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "createdAt": _format_datetime(self.created_at)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Folder:
        folder_id = str(data.get("id") or "")
        if not folder_id:
            raise ValueError("Folder id must be a non-empty string")
        return cls(id=folder_id, name=_text(data.get("name")), created_at=_parse_datetime(data.get("createdAt")))


@dataclass
class Category:
    """A named, coloured classification. Single-valued per entry, unlike tags."""

    id: str
    name: str
    color: str
    created_at: datetime = field(default_factory=utcnow)

    @classmethod
    def new(cls, name: str, color: str) -> Category:
        return cls(id=new_id(), name=name, color=color)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "color": self.color,
            "createdAt": _format_datetime(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Category:
        category_id = str(data.get("id") or "")
        if not category_id:
            raise ValueError("Category id must be a non-empty string")
        return cls(
            id=category_id,
            name=_text(data.get("name")),
            color=_text(data.get("color")),
            created_at=_parse_datetime(data.get("createdAt")),
        )
