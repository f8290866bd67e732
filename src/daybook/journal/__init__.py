"""Journal store and its derived views.

Provides entry/folder/category models, the JournalStore with write-through
persistence to a key-value backend, lexicon sentiment scoring, entry
filtering, a debounced editor session and share helpers.
"""

from .config import CATEGORY_PALETTE, JournalConfig
from .editor import EntrySession
from .filters import EntryFilter, filter_entries
from .models import Category, Entry, Folder
from .sentiment import analyze_sentiment, sentiment_color
from .store import JournalStore

__all__ = [
    "CATEGORY_PALETTE",
    "Category",
    "Entry",
    "EntryFilter",
    "EntrySession",
    "Folder",
    "JournalConfig",
    "JournalStore",
    "analyze_sentiment",
    "filter_entries",
    "sentiment_color",
]
