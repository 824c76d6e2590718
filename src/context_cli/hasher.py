"""Content hashing for loaded files and prose.

Digests are 64-bit BLAKE2b values returned as unsigned ints. They identify
content, they do not protect it.
"""

from __future__ import annotations

import hashlib

DIGEST_SIZE = 8

# Recommended secret length for ``secret_hash``; shorter secrets still work.
MIN_SECRET_LENGTH = 256


def _to_int(digest: bytes) -> int:
    return int.from_bytes(digest, "big")


def hash_content(content: str) -> int:
    """Return a deterministic 64-bit digest of *content*."""
    return _to_int(hashlib.blake2b(content.encode("utf-8"), digest_size=DIGEST_SIZE).digest())


def secret_hash(content: str, secret: str | bytes) -> int:
    """Return a 64-bit digest of *content* keyed with *secret*.

    Useful to obfuscate which document a hash belongs to. BLAKE2b is used
    here as a keyed hash, so this is not a substitute for encryption.
    """
    key = secret.encode("utf-8") if isinstance(secret, str) else bytes(secret)
    if len(key) > hashlib.blake2b.MAX_KEY_SIZE:
        key = hashlib.blake2b(key, digest_size=hashlib.blake2b.MAX_KEY_SIZE).digest()
    return _to_int(
        hashlib.blake2b(content.encode("utf-8"), digest_size=DIGEST_SIZE, key=key).digest()
    )
