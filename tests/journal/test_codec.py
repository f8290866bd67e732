"""Tests for daybook.journal.codec."""

import pytest

from daybook.core.exceptions import DataProcessingError
from daybook.journal.codec import decode_collection, decode_version, encode_collection, encode_version


class TestCollections:
    def test_encode_is_json_array(self):
        assert encode_collection([{"id": "1", "title": "Café"}]) == '[{"id": "1", "title": "Café"}]'.encode()

    def test_decode(self):
        assert decode_collection(b'[{"id": "1"}]') == [{"id": "1"}]

    def test_decode_empty_array(self):
        assert decode_collection(b"[]") == []

    @pytest.mark.parametrize(
        "blob",
        [b"{not json", b'{"id": "1"}', b"[1, 2]", b'"text"', b"\xff\xfe"],
    )
    def test_decode_rejects_malformed(self, blob):
        with pytest.raises(DataProcessingError):
            decode_collection(blob)


class TestVersion:
    def test_missing_is_legacy(self):
        assert decode_version(None) == 0

    def test_roundtrip(self):
        assert decode_version(encode_version(3)) == 3

    @pytest.mark.parametrize("blob", [b"three", b"-1", b"true", b"1.5"])
    def test_invalid(self, blob):
        with pytest.raises(DataProcessingError):
            decode_version(blob)
