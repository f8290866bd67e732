"""Filtered views over journal entries.

The sidebar narrows the entry list by folder, free-text query and a date
range. All predicates are AND-combined; an unset filter lets everything
through, except the folder predicate, where ``None`` selects the root bucket
unless ``all_folders`` is set.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time

from .models import Entry


def parse_date(value: date | str | None) -> date | None:
    """Accept a ``date``, a ``datetime`` or an ISO ``YYYY-MM-DD`` string."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip())


@dataclass
class EntryFilter:
    """Criteria for :func:`filter_entries`.

    Attributes:
        search_query: Case-insensitive substring matched against title or content.
        start_date: Earliest creation day (inclusive). None = no lower bound.
        end_date: Latest creation day (inclusive). None = no upper bound.
        folder_id: Folder to show. None = root (unfiled entries).
        all_folders: Ignore ``folder_id`` and search every folder.
    """

    search_query: str = ""
    start_date: date | str | None = None
    end_date: date | str | None = None
    folder_id: str | None = None
    all_folders: bool = False

    def __post_init__(self):
        self.start_date = parse_date(self.start_date)
        self.end_date = parse_date(self.end_date)

    @property
    def is_active(self) -> bool:
        """Whether any query or date filter is set."""
        return bool(self.search_query.strip() or self.start_date or self.end_date)


def _day_start(day: date, like: datetime) -> datetime:
    return datetime.combine(day, time.min, tzinfo=like.tzinfo)


def _day_end(day: date, like: datetime) -> datetime:
    return datetime.combine(day, time.max, tzinfo=like.tzinfo)


def filter_entries(entries: Iterable[Entry], criteria: EntryFilter) -> list[Entry]:
    """Return the entries matching every predicate in ``criteria``, in input order.

    Date bounds are compared in each entry's own timezone, so "2024-02-01"
    means that calendar day wherever the entry was written.
    """
    result = list(entries)

    if not criteria.all_folders:
        result = [e for e in result if e.folder_id == criteria.folder_id]

    query = criteria.search_query.strip().lower()
    if query:
        result = [e for e in result if query in e.title.lower() or query in e.content.lower()]

    if criteria.start_date:
        start = criteria.start_date
        result = [e for e in result if e.created_at >= _day_start(start, e.created_at)]

    if criteria.end_date:
        end = criteria.end_date
        result = [e for e in result if e.created_at <= _day_end(end, e.created_at)]

    return result
