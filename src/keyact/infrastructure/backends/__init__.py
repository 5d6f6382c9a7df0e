"""
Computation backends and the process-wide default-backend slot.
"""

from ._registry import available_backends, create_backend, register_backend
from ._base import BaseBackend
from ._numpy_backend import NumpyBackend
from ._torch_backend import TorchBackend
from ._default import (
    get_default_backend,
    reset_default_backend,
    set_default_backend,
    use_backend,
)

__all__ = [
    "BaseBackend",
    "NumpyBackend",
    "TorchBackend",
    "available_backends",
    "create_backend",
    "register_backend",
    "get_default_backend",
    "set_default_backend",
    "reset_default_backend",
    "use_backend",
]
