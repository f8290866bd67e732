"""Share helpers: plain-text export, social share links and clipboard copy."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from urllib.parse import quote

from loguru import logger

from .models import Entry


def _encode(value: str) -> str:
    # Same character set as JavaScript's encodeURIComponent
    return quote(value, safe="-_.!~*'()")


@dataclass(frozen=True)
class ShareLinks:
    twitter: str
    facebook: str
    linkedin: str
    email: str


def share_text(entry: Entry) -> str:
    """Title and content separated by a blank line."""
    return f"{entry.title}\n\n{entry.content}"


def share_links(entry: Entry, page_url: str = "") -> ShareLinks:
    """Build share URLs for an entry.

    Args:
        entry: The entry being shared.
        page_url: Public URL of the page hosting the entry, for networks
            that share links rather than text.
    """
    tweet = _encode(f'Check out my journal entry: "{entry.title}"')
    subject = _encode(f"Check out my journal entry: {entry.title}")
    return ShareLinks(
        twitter=f"https://twitter.com/intent/tweet?text={tweet}",
        facebook=f"https://www.facebook.com/sharer/sharer.php?u={_encode(page_url)}",
        linkedin=f"https://www.linkedin.com/sharing/share-offsite/?url={_encode(page_url)}",
        email=f"mailto:?subject={subject}&body={_encode(share_text(entry))}",
    )


def copy_to_clipboard(entry: Entry, writer: Callable[[str], object]) -> bool:
    """Hand the entry's share text to ``writer`` (a clipboard setter).

    Returns True on success. Clipboard failures are logged and swallowed.
    """
    try:
        writer(share_text(entry))
    except Exception as e:
        logger.error(f"Failed to copy entry {entry.id} to clipboard: {e}")
        return False
    return True
