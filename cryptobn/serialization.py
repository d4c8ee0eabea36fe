# File: cryptobn/serialization.py
"""
Structured (JSON) serialization of Bn values.

A Bn is rendered as a JSON string of lowercase signed hex digits; anything
else on input is rejected. Errors are logged without the payload.
"""
from __future__ import annotations

from pydantic import TypeAdapter, ValidationError

from .bn import Bn
from .errors import BnError, InvalidValueError
from .logger import get_logger

logger = get_logger("serialization")


class SerializationError(BnError):
    pass


_adapters = {}


def _adapter(cls: type) -> TypeAdapter:
    adapter = _adapters.get(cls)
    if adapter is None:
        adapter = _adapters[cls] = TypeAdapter(cls)
    return adapter


def dumps_bn(value: Bn) -> str:
    """Bn -> JSON string, e.g. Bn(-255) -> '"-ff"'."""
    return _adapter(type(value)).dump_json(value).decode("utf-8")


def loads_bn(payload, cls: type = Bn) -> Bn:
    """
    JSON string -> Bn.

    Raises:
        SerializationError: payload is not valid JSON
        InvalidValueError: the decoded value is not a signed hex string
    """
    try:
        return _adapter(cls).validate_json(payload)
    except ValidationError as e:
        for err in e.errors():
            cause = err.get("ctx", {}).get("error")
            if isinstance(cause, InvalidValueError):
                raise cause from e
        logger.warning("Bn payload rejected (redacted)")
        raise SerializationError("Invalid serialized Bn payload") from e
