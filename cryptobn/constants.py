"""
cryptobn/constants.py

Central constants and configuration used across modules.
Every value can be overridden through a CRYPTOBN_* environment variable.
"""

from typing import Any, Dict, Optional
import os


def get_env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, str(default)).lower() in ('true', '1', 'yes', 'y')


def get_env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


def get_env_optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


DEFAULTS: Dict[str, Any] = {
    # Backend: "python" (builtin int) or "gmp" (gmpy2.mpz)
    "BACKEND": os.getenv("CRYPTOBN_BACKEND", "python").lower(),

    # Primality testing / generation
    "PRIMALITY_ROUNDS": get_env_int("CRYPTOBN_PRIMALITY_ROUNDS", 20),
    # Unset: the candidate budget scales with the requested size
    "MAX_PRIME_ATTEMPTS": get_env_optional_int("CRYPTOBN_MAX_PRIME_ATTEMPTS"),
    # Budget as a multiple of the expected number of candidates
    "PRIME_BUDGET_FACTOR": get_env_int("CRYPTOBN_PRIME_BUDGET_FACTOR", 100),
    "MIN_PRIME_BITS": 16,

    # Logging
    "LOG_LEVEL": os.getenv("CRYPTOBN_LOG_LEVEL", "WARNING"),
    "LOG_JSON": get_env_bool("CRYPTOBN_LOG_JSON", True),
}

BACKEND: str = str(DEFAULTS["BACKEND"])
PRIMALITY_ROUNDS: int = int(DEFAULTS["PRIMALITY_ROUNDS"])
MAX_PRIME_ATTEMPTS: Optional[int] = DEFAULTS["MAX_PRIME_ATTEMPTS"]
PRIME_BUDGET_FACTOR: int = int(DEFAULTS["PRIME_BUDGET_FACTOR"])
MIN_PRIME_BITS: int = int(DEFAULTS["MIN_PRIME_BITS"])
LOG_LEVEL: str = str(DEFAULTS["LOG_LEVEL"])
LOG_JSON: bool = bool(DEFAULTS["LOG_JSON"])

# Small odd primes for trial division before the expensive checks
SMALL_PRIMES = (
    3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71,
    73, 79, 83, 89, 97, 101, 103, 107, 109, 113, 127, 131, 137, 139, 149, 151,
    157, 163, 167, 173, 179, 181, 191, 193, 197, 199, 211, 223, 227, 229, 233,
    239, 241, 251,
)

__all__ = [
    'BACKEND', 'PRIMALITY_ROUNDS', 'MAX_PRIME_ATTEMPTS', 'PRIME_BUDGET_FACTOR', 'MIN_PRIME_BITS',
    'LOG_LEVEL', 'LOG_JSON', 'SMALL_PRIMES',
]
