"""Content fingerprints for exact-duplicate detection."""

import hashlib

HASH_ALGORITHM = "sha256"


def content_hash(data: bytes) -> str:
    """Hex SHA-256 digest of raw file bytes.

    Always computed on the bytes as read, never on normalized text, so that
    two files share a digest only if they are byte-identical.
    """
    return hashlib.new(HASH_ALGORITHM, data).hexdigest()
