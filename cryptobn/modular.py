# File: cryptobn/modular.py
"""
Modular arithmetic on Bn values.

All results are brought into a canonical residue with one correction step:
the truncating remainder is computed and, if negative, n is added once. For
n > 0 that lands in [0, n); non-positive moduli get no further treatment.

invert() signals "no inverse" with None. modpow() with a negative exponent
turns that absence into zero, while moddiv() raises NotInvertibleError.
Callers rely on that difference, keep it.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .errors import NotInvertibleError
from .logger import get_logger

if TYPE_CHECKING:
    from .bn import Bn

logger = get_logger("modular")


def _canonical(t: "Bn", n: "Bn") -> "Bn":
    if t.is_negative():
        t = t + n
    return t


def modadd(a: "Bn", b: "Bn", n: "Bn") -> "Bn":
    return _canonical((a + b) % n, n)


def modsub(a: "Bn", b: "Bn", n: "Bn") -> "Bn":
    return _canonical((a - b) % n, n)


def modmul(a: "Bn", b: "Bn", n: "Bn") -> "Bn":
    return _canonical((a * b) % n, n)


def moddiv(a: "Bn", b: "Bn", n: "Bn") -> "Bn":
    """
    (a * b^-1) mod n.

    Raises:
        NotInvertibleError: b has no inverse modulo n
    """
    inv = invert(b, n)
    if inv is None:
        logger.warning("moddiv divisor not invertible", extra={"modulus_bits": n.bit_length()})
        raise NotInvertibleError("moddiv: divisor has no inverse modulo n")
    return _canonical((a * inv) % n, n)


def invert(a: "Bn", n: "Bn") -> Optional["Bn"]:
    """
    Multiplicative inverse of a modulo n by the iterative extended Euclid
    algorithm. Only the Bezout coefficient of a is tracked.

    Returns None when a == 0, n == 0, n == 1, or gcd(a, n) > 1.
    """
    if a.is_zero() or n.is_zero() or n.is_one():
        return None

    t, new_t = a.zero(), a.one()
    r, new_r = n.clone(), a.clone()
    while not new_r.is_zero():
        quotient = r / new_r
        t, new_t = new_t, t - quotient * new_t
        r, new_r = new_r, r - quotient * new_r

    if r > 1:
        return None
    if t.is_negative():
        t += n
    return t


def modpow(a: "Bn", exponent: "Bn", n: "Bn") -> "Bn":
    """
    a^exponent mod |n|, in [0, |n|).

    A negative exponent inverts a first; when a has no inverse the result
    is zero rather than an error.

    Raises:
        ZeroDivisionError: n is zero
    """
    modulus = -n if n.is_negative() else n.clone()
    if modulus.is_zero():
        raise ZeroDivisionError("modpow: modulus is zero")
    backend = a.backend
    if exponent.is_negative():
        inv = invert(a, modulus)
        if inv is None:
            return a.zero()
        return a._new(backend.modpow(inv._value, (-exponent)._value, modulus._value))
    return a._new(backend.modpow(a._value, exponent._value, modulus._value))
