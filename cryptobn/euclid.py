# File: cryptobn/euclid.py
"""
Extended Euclidean algorithm and gcd/lcm wrappers.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from .bn import Bn


@dataclass
class GcdResult:
    """gcd together with Bezout coefficients: x * a + y * b == gcd."""
    gcd: "Bn"
    x: "Bn"
    y: "Bn"


def _step(pair, q):
    return pair[1] - q * pair[0], pair[0]


def extended_gcd(a: "Bn", b: "Bn") -> GcdResult:
    """
    Iterative extended Euclid over the coupled pairs r, s, t.

    Each step maps (first, second) -> (second - q * first, first) with
    q = r.second / r.first (truncating). The returned gcd is non-negative.

    Example:
        extended_gcd(240, 46) -> gcd=2, x=-9, y=47
    """
    r: Tuple["Bn", "Bn"] = (b.clone(), a.clone())
    s: Tuple["Bn", "Bn"] = (a.zero(), a.one())
    t: Tuple["Bn", "Bn"] = (a.one(), a.zero())

    while not r[0].is_zero():
        q = r[1] / r[0]
        r, s, t = _step(r, q), _step(s, q), _step(t, q)

    if r[1].is_negative():
        return GcdResult(gcd=-r[1], x=-s[1], y=-t[1])
    return GcdResult(gcd=r[1], x=s[1], y=t[1])


def gcd(a: "Bn", b: "Bn") -> "Bn":
    return a._new(a.backend.gcd(a._value, b._value))


def lcm(a: "Bn", b: "Bn") -> "Bn":
    return a._new(a.backend.lcm(a._value, b._value))
