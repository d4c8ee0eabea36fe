# File: cryptobn/primes.py
"""
Prime subsystem.

 - Strong probabilistic primality check on builtin ints: trial division,
   Miller-Rabin to base 2 and a strong Lucas-Selfridge test (together
   Baillie-PSW), followed by Miller-Rabin rounds with random bases.
 - Candidate loops for prime and safe-prime generation, written against the
   backend contract so any backend's primality predicate can drive them.

Generated values always have exactly the requested bit length and pass the
same predicate used by Bn.is_prime().
"""
from __future__ import annotations

import math
from typing import Any, Optional

from . import constants
from .config import load_config
from .dp_rng import crypto_random_bits, crypto_random_below
from .errors import PrimeGenerationError
from .logger import get_logger
from .metrics import PRIME_CANDIDATES, PRIMES_GENERATED

logger = get_logger("primes")

_TRIAL_LIMIT = constants.SMALL_PRIMES[-1] ** 2


def _has_small_factor(n: int) -> bool:
    for p in constants.SMALL_PRIMES:
        if n % p == 0:
            return n != p
    return False


def _miller_rabin(n: int, base: int) -> bool:
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    x = pow(base, d, n)
    if x == 1 or x == n - 1:
        return True
    for _ in range(s - 1):
        x = pow(x, 2, n)
        if x == n - 1:
            return True
    return False


def _jacobi(a: int, n: int) -> int:
    a %= n
    result = 1
    while a:
        while a % 2 == 0:
            a //= 2
            if n % 8 in (3, 5):
                result = -result
        a, n = n, a
        if a % 4 == 3 and n % 4 == 3:
            result = -result
        a %= n
    return result if n == 1 else 0


def _strong_lucas(n: int) -> bool:
    """
    Strong Lucas probable prime test with Selfridge's parameters
    (first D in 5, -7, 9, -11, ... with Jacobi(D, n) = -1; P = 1, Q = (1 - D) / 4).
    n must be odd and not a perfect square.
    """
    d_param = 5
    while True:
        j = _jacobi(d_param, n)
        if j == -1:
            break
        if j == 0 and abs(d_param) != n:
            return False
        d_param = -d_param - 2 if d_param > 0 else -d_param + 2
    p_param, q_param = 1, (1 - d_param) // 4

    d, s = n + 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1

    u, v, qk = 1, p_param, q_param % n
    for bit in bin(d)[3:]:
        u, v = (u * v) % n, (v * v - 2 * qk) % n
        qk = (qk * qk) % n
        if bit == "1":
            u, v = p_param * u + v, d_param * u + p_param * v
            if u % 2:
                u += n
            if v % 2:
                v += n
            u, v = (u // 2) % n, (v // 2) % n
            qk = (qk * q_param) % n

    if u == 0 or v == 0:
        return True
    for _ in range(s - 1):
        v = (v * v - 2 * qk) % n
        if v == 0:
            return True
        qk = (qk * qk) % n
    return False


def is_strong_probable_prime(n: int, rounds: Optional[int] = None) -> bool:
    """
    Baillie-PSW plus ``rounds`` random-base Miller-Rabin rounds.

    Non-positive values, 0 and 1 are never prime.
    """
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0 or _has_small_factor(n):
        return False
    if n < _TRIAL_LIMIT:
        return True
    if not _miller_rabin(n, 2):
        return False
    root = math.isqrt(n)
    if root * root == n:
        return False
    if not _strong_lucas(n):
        return False
    if rounds is None:
        rounds = load_config().primality_rounds
    for _ in range(rounds):
        if not _miller_rabin(n, 2 + crypto_random_below(n - 3)):
            return False
    return True


def _check_bits(bits: int, kind: str) -> None:
    cfg = load_config()
    if not isinstance(bits, int) or bits < cfg.min_prime_bits:
        logger.error("rejected %s generation request", kind, extra={"bits": bits})
        raise ValueError(f"{kind} size must be an integer >= {cfg.min_prime_bits} bits, got {bits!r}")


def expected_candidates(bits: int, kind: str) -> float:
    """
    Expected number of random odd candidates drawn before a hit.

    An odd x near 2**bits is prime with probability about 2 / ln x. For a
    safe prime both q and 2q + 1 must be prime, which happens for about
    2.64 / (ln q * ln 2q) of odd q (twin prime constant correction).
    """
    ln_q = (bits - 1) * math.log(2)
    if kind == "safe_prime":
        return ln_q * (ln_q + math.log(2)) / 2.64
    return bits * math.log(2) / 2


def candidate_budget(bits: int, kind: str) -> int:
    """
    Candidate cap for one generation call.

    A fixed max_prime_attempts wins; otherwise the cap is prime_budget_factor
    times the expected count, so exhausting it has probability about
    exp(-prime_budget_factor).
    """
    cfg = load_config()
    if cfg.max_prime_attempts is not None:
        return cfg.max_prime_attempts
    return math.ceil(cfg.prime_budget_factor * expected_candidates(bits, kind))


def _odd_candidate(bits: int) -> int:
    return crypto_random_bits(bits) | (1 << (bits - 1)) | 1


def generate_prime(backend: Any, bits: int) -> Any:
    """
    Random prime of exactly ``bits`` bits as a backend-native value.

    Raises:
        ValueError: bits below the configured minimum
        PrimeGenerationError: candidate budget exhausted
    """
    _check_bits(bits, "prime")
    attempts = candidate_budget(bits, "prime")
    for _ in range(attempts):
        candidate = _odd_candidate(bits)
        if _has_small_factor(candidate):
            continue
        PRIME_CANDIDATES.labels(kind="prime").inc()
        value = backend.from_int(candidate)
        if backend.is_probable_prime(value):
            PRIMES_GENERATED.labels(kind="prime").inc()
            logger.debug("prime generated", extra={"bits": bits, "backend": backend.name})
            return value
    logger.error("prime generation exhausted", extra={"bits": bits, "attempts": attempts})
    raise PrimeGenerationError(f"no {bits}-bit prime found in {attempts} candidates")


def generate_safe_prime(backend: Any, bits: int) -> Any:
    """
    Random safe prime p = 2q + 1 (q prime) of exactly ``bits`` bits.

    q is drawn with bits - 1 bits and its top bit set, so p always has the
    requested length.
    """
    _check_bits(bits, "safe prime")
    attempts = candidate_budget(bits, "safe_prime")
    for _ in range(attempts):
        q = _odd_candidate(bits - 1)
        p = 2 * q + 1
        if _has_small_factor(q) or _has_small_factor(p):
            continue
        # Fermat base 2 on both halves before the full checks
        if pow(2, q - 1, q) != 1 or pow(2, p - 1, p) != 1:
            continue
        PRIME_CANDIDATES.labels(kind="safe_prime").inc()
        q_value = backend.from_int(q)
        if not backend.is_probable_prime(q_value):
            continue
        p_value = backend.from_int(p)
        if backend.is_probable_prime(p_value):
            PRIMES_GENERATED.labels(kind="safe_prime").inc()
            logger.debug("safe prime generated", extra={"bits": bits, "backend": backend.name})
            return p_value
    logger.error("safe prime generation exhausted", extra={"bits": bits, "attempts": attempts})
    raise PrimeGenerationError(f"no {bits}-bit safe prime found in {attempts} candidates")
