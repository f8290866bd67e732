"""daybook: a personal journal store with folders, tags, categories and sentiment."""

__version__ = "0.1.0"
