"""SHA-256 integrity check for downloaded artifacts."""

import hashlib

from codexskill.core.exceptions import IntegrityError


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def verify(data: bytes, expected: str | None = None) -> str:
    """
    Check ``data`` against an expected SHA-256 hex digest.

    No expected digest means nothing to check.

    Args:
        data: Artifact bytes
        expected: Declared hex digest, if any

    Returns:
        The actual lowercase hex digest

    Raises:
        IntegrityError: If the digests differ
    """
    actual = sha256_hex(data)
    if expected and actual != expected.strip().lower():
        raise IntegrityError(expected, actual)
    return actual
