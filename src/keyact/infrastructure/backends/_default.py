"""
Process-wide default backend slot.

Kernels never read this slot implicitly while building an expression; only
the convenience call shapes (``kernel(tensor)``, ``kernel(scalar)``) consult it,
once, at the top of the call.

Concurrency
-----------
- First use constructs the backend from :func:`load_config` at most once
  (double-checked locking on a module lock).
- `set_default_backend`, `reset_default_backend` and `use_backend` take the
  same lock, so a replacement is visible to every later reader.
- `use_backend` swaps the *process-wide* slot; it is not thread-local.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from ...domain._backend import IBackend
from .._config import load_config
from ._registry import create_backend

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_default: Optional[IBackend] = None


def _check_backend(backend: IBackend) -> IBackend:
    if not isinstance(backend, IBackend):
        raise TypeError(
            f"Expected an object implementing IBackend, got '{type(backend).__name__}'"
        )
    return backend


def get_default_backend() -> IBackend:
    """
    Return the default backend, building it from configuration on first use.

    Raises
    ------
    BackendNotAvailableError
        If the configured backend cannot be constructed.
    ConfigError
        If the configuration is invalid.
    """
    global _default
    backend = _default
    if backend is None:
        with _lock:
            if _default is None:
                cfg = load_config()
                _default = create_backend(cfg.backend, dtype=cfg.dtype)
                logger.debug("Initialized default backend: %r", _default)
            backend = _default
    return backend


def set_default_backend(backend: IBackend) -> None:
    """Replace the default backend for all subsequent readers."""
    global _default
    _check_backend(backend)
    with _lock:
        _default = backend
    logger.debug("Default backend set to %r", backend)


def reset_default_backend() -> None:
    """Clear the slot; the next read rebuilds the backend from configuration."""
    global _default
    with _lock:
        _default = None
    logger.debug("Default backend reset")


@contextmanager
def use_backend(backend: IBackend) -> Iterator[IBackend]:
    """
    Temporarily install `backend` as the default, restoring the previous
    slot value (possibly empty) on exit.
    """
    global _default
    _check_backend(backend)
    with _lock:
        previous = _default
        _default = backend
    try:
        yield backend
    finally:
        with _lock:
            _default = previous
