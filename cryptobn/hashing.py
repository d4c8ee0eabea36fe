# File: cryptobn/hashing.py
"""
Hash-to-integer helpers on top of the cryptography package.
"""
from __future__ import annotations

from typing import Optional

from cryptography.hazmat.primitives import hashes

from .bn import Bn


def new_hasher(algorithm: Optional[hashes.HashAlgorithm] = None) -> hashes.Hash:
    return hashes.Hash(algorithm or hashes.SHA256())


def digest_to_bn(*chunks: bytes, algorithm: Optional[hashes.HashAlgorithm] = None, cls: type = Bn) -> Bn:
    """
    Hash the concatenation of ``chunks`` and read the digest as an unsigned
    big-endian integer (SHA-256 unless ``algorithm`` is given).
    """
    h = new_hasher(algorithm)
    for chunk in chunks:
        h.update(chunk)
    return cls.from_digest(h)
