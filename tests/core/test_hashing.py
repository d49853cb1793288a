"""Tests for core.utils.hashing."""

import hashlib
from pathlib import Path

from hyuga_toolkit.core.utils import digest_bytes, digest_from_reference

DIGEST = "0123456789abcdef" * 4


def test_digest_bytes_is_sha256_hex():
    assert digest_bytes(b"hyuga") == hashlib.sha256(b"hyuga").hexdigest()


class TestDigestFromReference:

    def test_when_stem_is_digest_then_returned(self):
        assert digest_from_reference(f"/m/images/{DIGEST}.png") == DIGEST

    def test_when_stem_has_suffix_after_dash_then_prefix_returned(self):
        assert digest_from_reference(f"/m/images/{DIGEST}-copy.jpg") == DIGEST

    def test_when_no_extension_then_returned(self):
        assert digest_from_reference(Path("/m/images") / DIGEST) == DIGEST

    def test_when_uppercase_then_lowercased(self):
        assert digest_from_reference(f"{DIGEST.upper()}.png") == DIGEST

    def test_when_not_hex_then_none(self):
        assert digest_from_reference("z" * 64 + ".png") is None

    def test_when_wrong_length_then_none(self):
        assert digest_from_reference("abc.png") is None

    def test_when_sentinel_then_none(self):
        assert digest_from_reference("empty") is None
