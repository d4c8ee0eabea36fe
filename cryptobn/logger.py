"""
Logger helper for cryptobn.
JSON-lines records via python-json-logger; never pass secret values to it,
log bit lengths instead. Level and format follow the active BnConfig.
"""

import logging
from typing import Optional

from pythonjsonlogger import jsonlogger

from .config import BnConfig, load_config

_ROOT = "cryptobn"

_handler: Optional[logging.Handler] = None


def _formatter(json_lines: bool) -> logging.Formatter:
    if json_lines:
        return jsonlogger.JsonFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")


def apply_config(cfg: BnConfig) -> logging.Logger:
    """Point the package logger at cfg.log_level and cfg.log_json."""
    global _handler
    root = logging.getLogger(_ROOT)
    if _handler is None:
        _handler = logging.StreamHandler()
        root.addHandler(_handler)
    _handler.setFormatter(_formatter(cfg.log_json))
    root.setLevel(getattr(logging, cfg.log_level.upper(), logging.WARNING))
    return root


def _configure_root() -> logging.Logger:
    if _handler is None:
        return apply_config(load_config())
    return logging.getLogger(_ROOT)


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. get_logger("primes") -> cryptobn.primes."""
    _configure_root()
    return logging.getLogger(f"{_ROOT}.{name}")


def set_level(level: str) -> None:
    load_config(log_level=level)
