# File: cryptobn/bn.py
"""
Bn: arbitrary-precision signed integer for cryptographic protocols.

A Bn wraps exactly one backend-native value. Sign, magnitude and bit length
are always asked of the backend, never cached. The backend is bound to the
concrete Bn type: plain ``Bn`` uses the configured backend (pinned on first
use), ``bn_type("gmp")`` returns the type bound to gmpy2.

Operators ``+ - * / % << >>`` and unary ``-`` return new values; the
compound forms (``+=`` ...) replace the receiver's value in place. ``/`` and
``%`` truncate toward zero. The right operand may be a Bn of the same
backend or a Python int.

Example:
    >>> Bn(17).invert(43)
    Bn(38)
    >>> Bn(2).modpow(-1, 5)
    Bn(3)
"""
from __future__ import annotations

import operator
import re
import threading
from typing import Any, Dict, Optional, Union

from pydantic_core import core_schema

from . import euclid, modular
from .backends import BnBackend, get_backend
from .dp_rng import crypto_random_bytes
from .errors import BackendMismatchError, InvalidValueError
from .euclid import GcdResult
from .logger import get_logger
from .metrics import SAMPLING_REJECTIONS

logger = get_logger("bn")

_HEX_RE = re.compile(r"-?[0-9a-fA-F]+")

BnLike = Union["Bn", int]


def _binary(op_name: str):
    """Build the forward, reflected and in-place methods for one backend operation."""

    def forward(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self._new(getattr(self.backend, op_name)(self._value, rhs._value))

    def reflected(self, other):
        lhs = self._coerce(other)
        if lhs is NotImplemented:
            return NotImplemented
        return self._new(getattr(self.backend, op_name)(lhs._value, self._value))

    def inplace(self, other):
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        self._value = getattr(self.backend, op_name)(self._value, rhs._value)
        return self

    return forward, reflected, inplace


def _shift(op_name: str):
    """Shift methods; the amount is any int-like value, never negative."""

    def count_of(amount) -> int:
        count = operator.index(amount)
        if count < 0:
            raise ValueError("negative shift count")
        return count

    def forward(self, amount):
        if isinstance(amount, Bn):
            return NotImplemented
        return self._new(getattr(self.backend, op_name)(self._value, count_of(amount)))

    def inplace(self, amount):
        if isinstance(amount, Bn):
            return NotImplemented
        self._value = getattr(self.backend, op_name)(self._value, count_of(amount))
        return self

    return forward, inplace


class Bn:
    """The core big number type. Unhashable since compound assignment mutates it."""

    __slots__ = ("_value",)

    _backend: Optional[BnBackend] = None

    def __init__(self, value: BnLike = 0):
        if isinstance(value, Bn):
            self._value = self._coerce(value)._value
        elif isinstance(value, int):
            self._value = self.backend.from_int(value)
        else:
            raise TypeError(f"cannot build Bn from {type(value).__name__}")

    # -- backend plumbing

    @classmethod
    def get_backend(cls) -> BnBackend:
        if cls._backend is None:
            cls._backend = get_backend()
        return cls._backend

    @property
    def backend(self) -> BnBackend:
        return type(self).get_backend()

    @classmethod
    def _wrap(cls, native: Any) -> "Bn":
        obj = object.__new__(cls)
        obj._value = native
        return obj

    def _new(self, native: Any) -> "Bn":
        return type(self)._wrap(native)

    @classmethod
    def _from_any(cls, value: BnLike) -> "Bn":
        if isinstance(value, Bn):
            if value.backend is not cls.get_backend():
                raise BackendMismatchError(
                    f"operand uses backend {value.backend.name!r}, expected {cls.get_backend().name!r}"
                )
            return value
        if isinstance(value, int):
            return cls._wrap(cls.get_backend().from_int(value))
        raise TypeError(f"expected Bn or int, got {type(value).__name__}")

    def _coerce(self, other):
        if not isinstance(other, (Bn, int)):
            return NotImplemented
        return type(self)._from_any(other)

    # -- constructors

    @classmethod
    def zero(cls) -> "Bn":
        return cls._wrap(cls.get_backend().zero())

    @classmethod
    def one(cls) -> "Bn":
        return cls._wrap(cls.get_backend().one())

    @classmethod
    def from_int(cls, value: int) -> "Bn":
        return cls._wrap(cls.get_backend().from_int(operator.index(value)))

    @classmethod
    def from_slice(cls, data: Union[bytes, bytearray, memoryview]) -> "Bn":
        """Interpret bytes as an unsigned big-endian integer."""
        return cls._wrap(cls.get_backend().from_bytes_be(bytes(data)))

    @classmethod
    def from_digest(cls, hasher) -> "Bn":
        """
        Finalize a hash object and interpret its output as an unsigned
        big-endian integer.

        Accepts cryptography's ``hashes.Hash`` (finalize) and hashlib
        objects (digest).
        """
        if hasattr(hasher, "finalize"):
            data = hasher.finalize()
        elif hasattr(hasher, "digest"):
            data = hasher.digest()
        else:
            raise TypeError(f"{type(hasher).__name__} is not a hash object")
        return cls.from_slice(data)

    @classmethod
    def from_hex(cls, text: str) -> "Bn":
        """
        Parse the signed hex form produced by to_hex().

        Raises:
            InvalidValueError: anything other than an optional '-' followed by hex digits
        """
        if not isinstance(text, str) or _HEX_RE.fullmatch(text) is None:
            logger.warning("rejected hex input", extra={"input_type": type(text).__name__})
            raise InvalidValueError(text)
        return cls._wrap(cls.get_backend().from_str_radix(text, 16))

    @classmethod
    def random(cls, n: BnLike) -> "Bn":
        """
        Uniform value in [0, n) from the process-wide CSPRNG.

        Draws as many bytes as n needs, drops the bits above n's length and
        retries while the draw is >= n, so no modulo bias is introduced.

        Raises:
            ValueError: n <= 0
        """
        bound = cls._from_any(n)
        if not bound.is_positive():
            raise ValueError("random: bound must be positive")
        backend = cls.get_backend()
        bits = bound.bit_length()
        nbytes = (bits + 7) // 8
        excess = nbytes * 8 - bits
        while True:
            candidate = backend.shr(backend.from_bytes_be(crypto_random_bytes(nbytes)), excess)
            if backend.cmp(candidate, bound._value) < 0:
                return cls._wrap(candidate)
            SAMPLING_REJECTIONS.inc()

    @classmethod
    def prime(cls, bits: int) -> "Bn":
        """Random prime of exactly ``bits`` bits."""
        return cls._wrap(cls.get_backend().prime(bits))

    @classmethod
    def safe_prime(cls, bits: int) -> "Bn":
        """Random safe prime p ((p - 1) / 2 also prime) of exactly ``bits`` bits."""
        return cls._wrap(cls.get_backend().safe_prime(bits))

    # -- predicates and queries

    def is_zero(self) -> bool:
        return self.backend.is_zero(self._value)

    def is_one(self) -> bool:
        return self.backend.is_one(self._value)

    def is_negative(self) -> bool:
        return self.backend.cmp(self._value, self.backend.zero()) < 0

    def is_positive(self) -> bool:
        return self.backend.cmp(self._value, self.backend.zero()) > 0

    def bit_length(self) -> int:
        return self.backend.bit_length(self._value)

    def is_prime(self) -> bool:
        return self.backend.is_probable_prime(self._value)

    # -- value semantics

    def clone(self) -> "Bn":
        return self._new(self._value)

    def __copy__(self):
        return self.clone()

    def __deepcopy__(self, memo):
        return self.clone()

    def zeroize(self) -> None:
        """Overwrite the internal value with zero."""
        self._value = self.backend.zero()

    def __bool__(self):
        return not self.is_zero()

    def __int__(self):
        return self.backend.to_int(self._value)

    def __str__(self):
        return self.backend.to_decimal(self._value)

    def __repr__(self):
        return f"Bn({self.backend.debug(self._value)})"

    def __format__(self, spec):
        if not spec:
            return str(self)
        return format(int(self), spec)

    # -- comparison

    def _cmp(self, other):
        # comparisons are numeric across backends; only arithmetic insists on one
        if isinstance(other, Bn) and other.backend is not self.backend:
            other = int(other)
        rhs = self._coerce(other)
        if rhs is NotImplemented:
            return NotImplemented
        return self.backend.cmp(self._value, rhs._value)

    def __eq__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c == 0

    def __ne__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c != 0

    def __lt__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c < 0

    def __le__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c <= 0

    def __gt__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c > 0

    def __ge__(self, other):
        c = self._cmp(other)
        return c if c is NotImplemented else c >= 0

    __hash__ = None

    # -- arithmetic

    __add__, __radd__, __iadd__ = _binary("add")
    __sub__, __rsub__, __isub__ = _binary("sub")
    __mul__, __rmul__, __imul__ = _binary("mul")
    __truediv__, __rtruediv__, __itruediv__ = _binary("div")
    __mod__, __rmod__, __imod__ = _binary("rem")
    __lshift__, __ilshift__ = _shift("shl")
    __rshift__, __irshift__ = _shift("shr")

    def __neg__(self):
        return self._new(self.backend.neg(self._value))

    def __pos__(self):
        return self.clone()

    def __abs__(self):
        return -self if self.is_negative() else self.clone()

    # -- modular arithmetic

    def modpow(self, exponent: BnLike, n: BnLike) -> "Bn":
        return modular.modpow(self, self._from_any(exponent), self._from_any(n))

    def modadd(self, rhs: BnLike, n: BnLike) -> "Bn":
        return modular.modadd(self, self._from_any(rhs), self._from_any(n))

    def modsub(self, rhs: BnLike, n: BnLike) -> "Bn":
        return modular.modsub(self, self._from_any(rhs), self._from_any(n))

    def modmul(self, rhs: BnLike, n: BnLike) -> "Bn":
        return modular.modmul(self, self._from_any(rhs), self._from_any(n))

    def moddiv(self, rhs: BnLike, n: BnLike) -> "Bn":
        return modular.moddiv(self, self._from_any(rhs), self._from_any(n))

    def invert(self, n: BnLike) -> Optional["Bn"]:
        return modular.invert(self, self._from_any(n))

    # -- number theory

    def extended_gcd(self, other: BnLike) -> GcdResult:
        return euclid.extended_gcd(self, self._from_any(other))

    def gcd(self, other: BnLike) -> "Bn":
        return euclid.gcd(self, self._from_any(other))

    def lcm(self, other: BnLike) -> "Bn":
        return euclid.lcm(self, self._from_any(other))

    # -- serialization

    def to_bytes(self) -> bytes:
        """Minimal unsigned big-endian magnitude; the sign is not encoded."""
        _, data = self.backend.to_bytes_be(self._value)
        return data

    def to_hex(self) -> str:
        """Lowercase hex of the signed value, e.g. '-ff'."""
        return self.backend.to_str_radix(self._value, 16)

    @classmethod
    def _validate(cls, value: Any) -> "Bn":
        if isinstance(value, Bn):
            return cls._from_any(value).clone()
        return cls.from_hex(value)

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: v.to_hex(), return_schema=core_schema.str_schema()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema, handler):
        return {"type": "string", "pattern": "^-?[0-9a-fA-F]+$", "description": "signed hexadecimal integer"}


_types: Dict[str, type] = {}
_types_lock = threading.Lock()


def bn_type(name: Optional[str] = None) -> type:
    """
    Return the Bn type bound to backend ``name`` (default: configured backend).

    Raises:
        BackendError: unknown or unavailable backend
    """
    backend = get_backend(name)
    with _types_lock:
        cls = _types.get(backend.name)
        if cls is None:
            cls = type(f"Bn_{backend.name}", (Bn,), {"__slots__": (), "_backend": backend})
            _types[backend.name] = cls
    return cls
