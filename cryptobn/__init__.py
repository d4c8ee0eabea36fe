"""
cryptobn: arbitrary-precision signed integers for cryptographic protocols,
over a pluggable backend (builtin int or gmpy2).
"""
from .backends import available_backends, get_backend
from .bn import Bn, bn_type
from .config import BnConfig, load_config
from .errors import (
    BackendError,
    BackendMismatchError,
    BnError,
    InvalidValueError,
    NotInvertibleError,
    PrimeGenerationError,
)
from .euclid import GcdResult
from .hashing import digest_to_bn, new_hasher
from .serialization import SerializationError, dumps_bn, loads_bn

__version__ = "0.1.0"

__all__ = [
    "Bn",
    "bn_type",
    "GcdResult",
    "digest_to_bn",
    "new_hasher",
    "BnConfig",
    "load_config",
    "available_backends",
    "get_backend",
    "dumps_bn",
    "loads_bn",
    "BnError",
    "InvalidValueError",
    "NotInvertibleError",
    "PrimeGenerationError",
    "BackendError",
    "BackendMismatchError",
    "SerializationError",
]
