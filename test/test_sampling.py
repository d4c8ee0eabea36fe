# tests/test_sampling.py
import hashlib
import itertools

import pytest
from cryptography.hazmat.primitives import hashes

from cryptobn import digest_to_bn, dp_rng


@pytest.mark.parametrize("n", [1, 2, 3, 255, 256, 257, 2**64 + 1, 3**100])
def test_random_below_bound(B, n):
    for _ in range(200):
        r = B.random(n)
        assert 0 <= r < n


def test_random_small_bound_covers_range(B):
    seen = {int(B.random(5)) for _ in range(500)}
    assert seen == {0, 1, 2, 3, 4}


def test_random_rejects_out_of_range_draws(B):
    # bound 5 needs 3 bits: 0xff -> 7 and 0xc0 -> 6 are rejected, 0x40 -> 2 is kept
    draws = itertools.cycle([b"\xff", b"\xc0", b"\x40"])
    dp_rng.set_byte_source(lambda n: next(draws))
    assert B.random(5) == 2


def test_random_bad_bound(B):
    with pytest.raises(ValueError):
        B.random(0)
    with pytest.raises(ValueError):
        B.random(-5)


def test_from_slice(B):
    assert B.from_slice(b"\x01\x02\x03") == 66051
    assert B.from_slice(b"") == 0
    assert B.from_slice(bytearray(b"\x00\xff")) == 255


def test_from_digest_cryptography(B):
    h = hashes.Hash(hashes.SHA256())
    h.update(b"hello")
    expected = int.from_bytes(hashlib.sha256(b"hello").digest(), "big")
    assert B.from_digest(h) == expected


def test_from_digest_hashlib(B):
    h = hashlib.sha512(b"hello")
    assert B.from_digest(h) == int.from_bytes(h.digest(), "big")


def test_from_digest_rejects_non_hash(B):
    with pytest.raises(TypeError):
        B.from_digest(b"not a hasher")


def test_digest_to_bn(B):
    v = digest_to_bn(b"he", b"llo", cls=B)
    assert v == int.from_bytes(hashlib.sha256(b"hello").digest(), "big")
    assert v.bit_length() <= 256
