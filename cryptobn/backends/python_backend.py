"""
Pure-Python backend: builtin int does the arithmetic, cryptobn.primes does
the primality checks.
"""
import math
from typing import Tuple

from .base import BnBackend, int_to_radix
from ..primes import is_strong_probable_prime


class PythonBackend(BnBackend):
    name = "python"

    def from_int(self, value: int) -> int:
        return int(value)

    def to_int(self, value: int) -> int:
        return value

    def add(self, a: int, b: int) -> int:
        return a + b

    def sub(self, a: int, b: int) -> int:
        return a - b

    def mul(self, a: int, b: int) -> int:
        return a * b

    def div(self, a: int, b: int) -> int:
        # // floors; flip back toward zero when the signs differ
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q

    def rem(self, a: int, b: int) -> int:
        r = abs(a) % abs(b)
        return -r if a < 0 else r

    def neg(self, a: int) -> int:
        return -a

    def shl(self, a: int, count: int) -> int:
        return a << count

    def shr(self, a: int, count: int) -> int:
        return a >> count

    def cmp(self, a: int, b: int) -> int:
        return (a > b) - (a < b)

    def bit_length(self, a: int) -> int:
        return a.bit_length()

    def from_bytes_be(self, data: bytes, negative: bool = False) -> int:
        value = int.from_bytes(data, "big")
        return -value if negative else value

    def to_bytes_be(self, a: int) -> Tuple[int, bytes]:
        if a == 0:
            return 0, b"\x00"
        mag = abs(a)
        return (1 if a > 0 else -1), mag.to_bytes((mag.bit_length() + 7) // 8, "big")

    def from_str_radix(self, text: str, radix: int) -> int:
        return int(text, radix)

    def to_str_radix(self, a: int, radix: int) -> str:
        return int_to_radix(a, radix)

    def modpow(self, base: int, exponent: int, modulus: int) -> int:
        return pow(base, exponent, modulus)

    def gcd(self, a: int, b: int) -> int:
        return math.gcd(a, b)

    def lcm(self, a: int, b: int) -> int:
        return math.lcm(a, b)

    def is_probable_prime(self, a: int) -> bool:
        return is_strong_probable_prime(a)
