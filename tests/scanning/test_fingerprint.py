"""Tests for content fingerprints."""

import hashlib

from ts_analyzer.scanning.fingerprint import content_hash


def test_known_digest():
    assert content_hash(b"") == hashlib.sha256(b"").hexdigest()
    assert len(content_hash(b"export const x = 1;\n")) == 64


def test_identical_bytes_share_digest():
    assert content_hash(b"const a = 1;") == content_hash(b"const a = 1;")


def test_whitespace_difference_changes_digest():
    assert content_hash(b"const a = 1;") != content_hash(b"const a = 1; ")


def test_line_ending_difference_changes_digest():
    assert content_hash(b"a\nb\n") != content_hash(b"a\r\nb\r\n")
