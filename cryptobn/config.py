"""
config.py

Pydantic-based configuration model for the big number layer.
Defaults come from cryptobn.constants (environment driven).
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

from . import constants


class BnConfig(BaseModel):
    backend: Literal["python", "gmp"] = Field(constants.BACKEND, description="Arithmetic backend used by Bn")
    primality_rounds: int = Field(constants.PRIMALITY_ROUNDS, ge=1, description="Random-base Miller-Rabin rounds")
    max_prime_attempts: Optional[int] = Field(
        constants.MAX_PRIME_ATTEMPTS, ge=1, description="Fixed candidate cap for prime generation; None scales it with the size"
    )
    prime_budget_factor: int = Field(
        constants.PRIME_BUDGET_FACTOR, ge=1, description="Candidate budget as a multiple of the expected candidate count"
    )
    min_prime_bits: int = Field(constants.MIN_PRIME_BITS, description="Smallest bit size accepted by prime generation")
    log_level: str = Field(constants.LOG_LEVEL, description="Level of the cryptobn logger")
    log_json: bool = Field(constants.LOG_JSON, description="Emit JSON-lines log records")

    model_config = {"frozen": True}


_active: Optional[BnConfig] = None


def load_config(**overrides) -> BnConfig:
    """
    Return the active configuration.

    Overrides are merged on top of the environment defaults and become the
    new active configuration, e.g. ``load_config(primality_rounds=40)``.
    """
    global _active
    if overrides:
        base = _active.model_dump() if _active is not None else {}
        base.update(overrides)
        _active = BnConfig(**base)
        if "log_level" in overrides or "log_json" in overrides:
            from .logger import apply_config
            apply_config(_active)
    elif _active is None:
        _active = BnConfig()
    return _active


def reset_config() -> None:
    """Drop overrides and return the package logger to the environment defaults."""
    global _active
    _active = None
    from .logger import apply_config
    apply_config(load_config())

# usage:
# from cryptobn.config import load_config
# cfg = load_config()
# cfg.primality_rounds
