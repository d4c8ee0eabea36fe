# -*- coding: utf-8 -*-
"""
Custom exception types for cryptobn.
"""

from __future__ import annotations


class BnError(Exception):
    """
    Base class for all errors raised by the big number layer.
    """
    pass


class InvalidValueError(BnError, ValueError):
    """
    Raised when a textual big number (hex form) cannot be parsed.

    The offending input is kept on ``value`` so callers can report it.
    """

    def __init__(self, value, expected: str = "a hex encoded string"):
        self.value = value
        self.expected = expected
        super().__init__(f"invalid value: {value!r}, expected {expected}")


class NotInvertibleError(BnError, ArithmeticError):
    """
    Raised by moddiv when the divisor has no multiplicative inverse mod n.

    invert() itself never raises this; it returns None.
    """
    pass


class PrimeGenerationError(BnError):
    """
    Raised when prime or safe-prime generation exhausts its candidate budget.
    """
    pass


class BackendError(BnError):
    """
    Raised for an unknown backend name or a backend whose library is missing.
    """
    pass


class BackendMismatchError(BnError, TypeError):
    """
    Raised when one operation mixes values bound to different backends.
    """
    pass
