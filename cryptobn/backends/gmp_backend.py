"""
GMP backend via gmpy2. Arithmetic, modpow, gcd/lcm and primality run in
libgmp; prime candidate loops are the shared ones from cryptobn.primes.
"""
from typing import Tuple

import gmpy2

from .base import BnBackend, int_to_radix
from ..config import load_config


class GmpBackend(BnBackend):
    name = "gmp"

    def from_int(self, value: int) -> gmpy2.mpz:
        return gmpy2.mpz(value)

    def to_int(self, value: gmpy2.mpz) -> int:
        return int(value)

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b

    def mul(self, a, b):
        return a * b

    def div(self, a, b):
        return gmpy2.t_div(a, b)

    def rem(self, a, b):
        return gmpy2.t_mod(a, b)

    def neg(self, a):
        return -a

    def shl(self, a, count: int):
        return a << count

    def shr(self, a, count: int):
        return a >> count

    def cmp(self, a, b) -> int:
        return (a > b) - (a < b)

    def bit_length(self, a) -> int:
        return a.bit_length()

    def from_bytes_be(self, data: bytes, negative: bool = False):
        value = gmpy2.mpz(int.from_bytes(data, "big"))
        return -value if negative else value

    def to_bytes_be(self, a) -> Tuple[int, bytes]:
        sign = gmpy2.sign(a)
        if sign == 0:
            return 0, b"\x00"
        mag = int(abs(a))
        return sign, mag.to_bytes((mag.bit_length() + 7) // 8, "big")

    def from_str_radix(self, text: str, radix: int):
        return gmpy2.mpz(text, radix)

    def to_str_radix(self, a, radix: int) -> str:
        if radix == 10:
            return str(a)
        return int_to_radix(int(a), radix)

    def modpow(self, base, exponent, modulus):
        return gmpy2.powmod(base, exponent, modulus)

    def gcd(self, a, b):
        return gmpy2.gcd(a, b)

    def lcm(self, a, b):
        return gmpy2.lcm(a, b)

    def is_probable_prime(self, a) -> bool:
        if a < 2:
            return False
        if a < 4:
            return True
        if gmpy2.is_even(a):
            return False
        if not gmpy2.is_strong_bpsw_prp(a):
            return False
        return bool(gmpy2.is_prime(a, load_config().primality_rounds))
