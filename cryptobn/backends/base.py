from abc import ABC, abstractmethod
from typing import Any, Tuple

from ..primes import generate_prime, generate_safe_prime

_STR_SAFE_BITS = 10_000


def _decimal(value: int) -> str:
    # str() refuses very long ints (sys.int_info.str_digits_check_threshold);
    # split by a power of ten until each half is short enough
    if value < 0:
        return "-" + _decimal(-value)
    if value.bit_length() <= _STR_SAFE_BITS:
        return str(value)
    k = value.bit_length() * 3 // 20
    high, low = divmod(value, 10 ** k)
    return _decimal(high) + _decimal(low).zfill(k)


def int_to_radix(value: int, radix: int) -> str:
    """Render a builtin int in radix 10 or 16 with lowercase digits and a leading '-' when negative."""
    if radix == 10:
        return _decimal(value)
    if radix == 16:
        return format(value, "x")
    raise ValueError(f"radix must be 10 or 16, got {radix}")


class BnBackend(ABC):
    """Abstract base class defining the arbitrary-precision integer contract Bn is written against.

    Native values are whatever the backend uses (builtin int, gmpy2.mpz) and
    must be immutable, so rebinding a Bn never aliases another one.
    """

    name: str = "abstract"

    @abstractmethod
    def from_int(self, value: int) -> Any:
        """Convert a Python integer to a native value."""

    @abstractmethod
    def to_int(self, value: Any) -> int:
        """Convert a native value to a Python integer."""

    def zero(self) -> Any:
        return self.from_int(0)

    def one(self) -> Any:
        return self.from_int(1)

    def is_zero(self, value: Any) -> bool:
        return value == 0

    def is_one(self, value: Any) -> bool:
        return value == 1

    @abstractmethod
    def add(self, a: Any, b: Any) -> Any:
        """a + b"""

    @abstractmethod
    def sub(self, a: Any, b: Any) -> Any:
        """a - b"""

    @abstractmethod
    def mul(self, a: Any, b: Any) -> Any:
        """a * b"""

    @abstractmethod
    def div(self, a: Any, b: Any) -> Any:
        """Quotient rounded toward zero.

        Raises:
            ZeroDivisionError: b is zero
        """

    @abstractmethod
    def rem(self, a: Any, b: Any) -> Any:
        """Remainder of the truncating division; takes the sign of a.

        Raises:
            ZeroDivisionError: b is zero
        """

    @abstractmethod
    def neg(self, a: Any) -> Any:
        """-a"""

    @abstractmethod
    def shl(self, a: Any, count: int) -> Any:
        """a * 2**count, count >= 0"""

    @abstractmethod
    def shr(self, a: Any, count: int) -> Any:
        """floor(a / 2**count), count >= 0"""

    @abstractmethod
    def cmp(self, a: Any, b: Any) -> int:
        """-1, 0 or 1 following signed numeric order."""

    @abstractmethod
    def bit_length(self, a: Any) -> int:
        """Bits in the magnitude of a; zero has length 0."""

    @abstractmethod
    def from_bytes_be(self, data: bytes, negative: bool = False) -> Any:
        """Big-endian magnitude plus an explicit sign."""

    @abstractmethod
    def to_bytes_be(self, a: Any) -> Tuple[int, bytes]:
        """(sign, minimal big-endian magnitude); sign is -1, 0 or 1 and zero encodes as b"\\x00"."""

    @abstractmethod
    def from_str_radix(self, text: str, radix: int) -> Any:
        """Parse an already validated digit string with an optional leading '-'."""

    @abstractmethod
    def to_str_radix(self, a: Any, radix: int) -> str:
        """Lowercase digits with a leading '-' for negative values."""

    def to_decimal(self, a: Any) -> str:
        return self.to_str_radix(a, 10)

    def debug(self, a: Any) -> str:
        return self.to_decimal(a)

    @abstractmethod
    def modpow(self, base: Any, exponent: Any, modulus: Any) -> Any:
        """base**exponent mod modulus for exponent >= 0 and modulus > 0, result in [0, modulus)."""

    @abstractmethod
    def gcd(self, a: Any, b: Any) -> Any:
        """Non-negative greatest common divisor."""

    @abstractmethod
    def lcm(self, a: Any, b: Any) -> Any:
        """Non-negative least common multiple."""

    @abstractmethod
    def is_probable_prime(self, a: Any) -> bool:
        """Strong probabilistic primality predicate; False for a <= 1."""

    def prime(self, bits: int) -> Any:
        return generate_prime(self, bits)

    def safe_prime(self, bits: int) -> Any:
        return generate_safe_prime(self, bits)

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"
