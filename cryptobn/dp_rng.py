# -*- coding: utf-8 -*-
"""
Process-wide cryptographic RNG for cryptobn.

The generator is created lazily on first use and shared by every caller;
creation is guarded by a lock and SystemRandom itself reads from the OS
CSPRNG, so concurrent use needs no coordination.
"""

from __future__ import annotations

import secrets
import threading
from typing import Callable, Optional

__all__ = [
    'crypto_random_bytes',
    'crypto_random_bits',
    'crypto_random_below',
    'set_byte_source',
    'get_rng_source_info',
]

_lock = threading.Lock()
_system_rng: Optional[secrets.SystemRandom] = None
# Deterministic byte source injected by tests only (do not use in prod)
_byte_source: Optional[Callable[[int], bytes]] = None


def _get_system_rng() -> secrets.SystemRandom:
    global _system_rng
    if _system_rng is None:
        with _lock:
            if _system_rng is None:
                _system_rng = secrets.SystemRandom()
    return _system_rng


def set_byte_source(source: Optional[Callable[[int], bytes]]) -> None:
    """
    Replace the random byte source. Pass None to restore the OS CSPRNG.

    Args:
        source: callable returning exactly n bytes for an argument n
    """
    global _byte_source
    _byte_source = source


def crypto_random_bytes(nbytes: int) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Args:
        nbytes: Number of bytes to generate (zero yields b"")

    Returns:
        Random bytes

    Raises:
        ValueError: If nbytes is not a non-negative integer
    """
    if not isinstance(nbytes, int) or nbytes < 0:
        raise ValueError("nbytes must be a non-negative integer")
    if nbytes == 0:
        return b""
    if _byte_source is not None:
        out = _byte_source(nbytes)
        if len(out) != nbytes:
            raise ValueError("byte source returned the wrong number of bytes")
        return bytes(out)
    return _get_system_rng().randbytes(nbytes)


def crypto_random_bits(bits: int) -> int:
    """
    Random non-negative integer below 2**bits, drawn from crypto_random_bytes.
    """
    if bits <= 0:
        return 0
    nbytes = (bits + 7) // 8
    value = int.from_bytes(crypto_random_bytes(nbytes), "big")
    return value >> (nbytes * 8 - bits)


def crypto_random_below(bound: int) -> int:
    """
    Uniform integer in [0, bound) by rejection sampling over bit-masked draws.

    Raises:
        ValueError: If bound is not positive
    """
    if bound <= 0:
        raise ValueError("bound must be positive")
    bits = bound.bit_length()
    while True:
        value = crypto_random_bits(bits)
        if value < bound:
            return value


def get_rng_source_info() -> dict:
    return {
        'initialized': _system_rng is not None,
        'injected_source': _byte_source is not None,
    }
