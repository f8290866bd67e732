"""Tests for daybook.journal.share."""

from daybook.journal.models import Entry
from daybook.journal.share import copy_to_clipboard, share_links, share_text


def _entry():
    return Entry.new(title="Good day & more", content="Walked 5km.")


class TestShareText:
    def test_title_blank_line_content(self):
        assert share_text(_entry()) == "Good day & more\n\nWalked 5km."


class TestShareLinks:
    def test_twitter_encodes_title(self):
        links = share_links(_entry())
        assert links.twitter == (
            "https://twitter.com/intent/tweet?text="
            "Check%20out%20my%20journal%20entry%3A%20%22Good%20day%20%26%20more%22"
        )

    def test_link_networks_use_page_url(self):
        links = share_links(_entry(), page_url="https://example.com/j?id=1")
        assert links.facebook == "https://www.facebook.com/sharer/sharer.php?u=https%3A%2F%2Fexample.com%2Fj%3Fid%3D1"
        assert links.linkedin.endswith("?url=https%3A%2F%2Fexample.com%2Fj%3Fid%3D1")

    def test_email_subject_and_body(self):
        links = share_links(_entry())
        assert links.email.startswith("mailto:?subject=Check%20out%20my%20journal%20entry%3A%20Good%20day")
        assert links.email.endswith("&body=Good%20day%20%26%20more%0A%0AWalked%205km.")


class TestCopyToClipboard:
    def test_success(self):
        copied = []
        assert copy_to_clipboard(_entry(), copied.append) is True
        assert copied == ["Good day & more\n\nWalked 5km."]

    def test_failure_is_logged_not_raised(self, log_messages):
        def broken(_text):
            raise OSError("no clipboard")

        entry = _entry()
        assert copy_to_clipboard(entry, broken) is False
        assert any(f"Failed to copy entry {entry.id}" in m for m in log_messages)
