from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Type

from ...domain._backend import IBackend
from ...domain._errors import BackendNotAvailableError

logger = logging.getLogger(__name__)

_BACKEND_REGISTRY: Dict[str, Callable[..., IBackend]] = {}


def register_backend(name: Optional[str] = None) -> Callable[[Type[Any]], Type[Any]]:
    """
    Decorator to register a backend class (or factory) under a name usable by
    :func:`create_backend` and the ``backend`` configuration key.
    """

    def deco(cls: Type[Any]) -> Type[Any]:
        key = (name or getattr(cls, "name", None) or cls.__name__).lower()
        _BACKEND_REGISTRY[key] = cls
        return cls

    return deco


def available_backends() -> List[str]:
    """Return the registered backend names (availability of optional
    libraries is only checked on construction)."""
    return sorted(_BACKEND_REGISTRY)


def create_backend(name: str, dtype: Optional[Any] = None) -> IBackend:
    """
    Build a backend by registry name.

    Parameters
    ----------
    name : str
        Registry name, case-insensitive (e.g., "numpy", "torch").
    dtype : Any, optional
        Default element type passed to the backend constructor.

    Raises
    ------
    BackendNotAvailableError
        If no backend is registered under `name`, or if the backend's
        library cannot be imported.
    """
    key = str(name).lower()
    factory = _BACKEND_REGISTRY.get(key)
    if factory is None:
        raise BackendNotAvailableError(
            key, f"unknown backend; registered backends are {available_backends()}"
        )
    backend = factory() if dtype is None else factory(dtype=dtype)
    logger.debug("create_backend(%r) -> %r", key, backend)
    return backend
