# tests/test_config.py
import logging

import pytest
from pydantic import ValidationError
from pythonjsonlogger import jsonlogger

from cryptobn import BackendError, Bn, BnConfig, available_backends, bn_type, get_backend, load_config
from cryptobn.config import reset_config
from cryptobn.constants import get_env_bool, get_env_int, get_env_optional_int
from cryptobn.logger import get_logger, set_level


def test_defaults():
    cfg = load_config()
    assert cfg.backend in ("python", "gmp")
    assert cfg.primality_rounds >= 1
    assert cfg.min_prime_bits == 16


def test_overrides_merge():
    load_config(primality_rounds=7)
    cfg = load_config(max_prime_attempts=10)
    assert cfg.primality_rounds == 7
    assert cfg.max_prime_attempts == 10


def test_config_validation():
    with pytest.raises(ValidationError):
        BnConfig(backend="openssl")
    with pytest.raises(ValidationError):
        BnConfig(primality_rounds=0)


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("CRYPTOBN_TEST_INT", "12")
    monkeypatch.setenv("CRYPTOBN_TEST_BAD", "twelve")
    monkeypatch.setenv("CRYPTOBN_TEST_BOOL", "yes")
    assert get_env_int("CRYPTOBN_TEST_INT", 3) == 12
    assert get_env_int("CRYPTOBN_TEST_BAD", 3) == 3
    assert get_env_bool("CRYPTOBN_TEST_BOOL") is True
    assert get_env_bool("CRYPTOBN_TEST_MISSING") is False


def test_backend_registry():
    assert available_backends() == ["gmp", "python"]
    assert get_backend("python") is get_backend("python")
    assert bn_type("gmp") is bn_type("gmp")
    assert bn_type("gmp").get_backend().name == "gmp"
    with pytest.raises(BackendError):
        get_backend("openssl")


def test_plain_bn_uses_configured_backend():
    assert Bn.get_backend().name == load_config().backend


def test_logger_hierarchy(caplog):
    set_level("DEBUG")
    log = get_logger("test")
    assert log.name == "cryptobn.test"
    with caplog.at_level(logging.WARNING, logger="cryptobn"):
        with pytest.raises(Exception):
            Bn.from_hex("nope")
    assert any("rejected hex input" in r.getMessage() for r in caplog.records)
    set_level("WARNING")


def test_logging_follows_config():
    root = logging.getLogger("cryptobn")
    load_config(log_level="DEBUG")
    assert root.level == logging.DEBUG
    load_config(log_json=False)
    assert root.level == logging.DEBUG
    formatters = [h.formatter for h in root.handlers]
    assert any(type(f) is logging.Formatter for f in formatters)
    load_config(log_json=True)
    formatters = [h.formatter for h in root.handlers]
    assert any(isinstance(f, jsonlogger.JsonFormatter) for f in formatters)


def test_reset_config_restores_log_level():
    set_level("ERROR")
    assert load_config().log_level == "ERROR"
    reset_config()
    assert logging.getLogger("cryptobn").level == getattr(logging, load_config().log_level.upper())


def test_unset_attempt_cap_from_env(monkeypatch):
    monkeypatch.delenv("CRYPTOBN_TEST_CAP", raising=False)
    assert get_env_optional_int("CRYPTOBN_TEST_CAP") is None
    monkeypatch.setenv("CRYPTOBN_TEST_CAP", "40")
    assert get_env_optional_int("CRYPTOBN_TEST_CAP") == 40
    assert BnConfig(max_prime_attempts=None).max_prime_attempts is None
