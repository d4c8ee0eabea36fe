"""
Backend registry. Backends are created once per process and shared.
"""
import importlib
import threading
from typing import Dict, Optional

from .base import BnBackend
from ..config import load_config
from ..errors import BackendError
from ..logger import get_logger

logger = get_logger("backends")

_REGISTRY = {
    "python": ("cryptobn.backends.python_backend", "PythonBackend"),
    "gmp": ("cryptobn.backends.gmp_backend", "GmpBackend"),
}

_instances: Dict[str, BnBackend] = {}
_lock = threading.Lock()


def available_backends():
    return sorted(_REGISTRY)


def get_backend(name: Optional[str] = None) -> BnBackend:
    """
    Return the shared backend instance for ``name`` (default: configured backend).

    Raises:
        BackendError: unknown name, or the backend library cannot be imported
    """
    name = (name or load_config().backend).lower()
    backend = _instances.get(name)
    if backend is not None:
        return backend
    if name not in _REGISTRY:
        raise BackendError(f"unknown backend {name!r}, expected one of {available_backends()}")
    with _lock:
        if name not in _instances:
            module_name, class_name = _REGISTRY[name]
            try:
                module = importlib.import_module(module_name)
            except ImportError as e:
                logger.exception("backend import failed", extra={"backend": name})
                raise BackendError(f"backend {name!r} is not available: {e}") from e
            _instances[name] = getattr(module, class_name)()
            logger.info("backend loaded", extra={"backend": name})
    return _instances[name]


__all__ = ["BnBackend", "available_backends", "get_backend"]
