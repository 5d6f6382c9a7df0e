"""
KeyAct: elementwise activation kernels over a backend-agnostic operand algebra.

Typical usage
-------------
>>> from keyact import NumpyBackend, Softmax, Tensor
>>> backend = NumpyBackend()
>>> probs = Softmax(axis=-1).apply(backend, Tensor([[1.0, 2.0, 3.0]]))

Kernels can also be called directly, in which case the process-wide default
backend is used (see `get_default_backend`).
"""

import logging

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _load_version

from .domain import (
    ActivationKind,
    BackendMismatchError,
    BackendNotAvailableError,
    BackendReleasedError,
    ConfigError,
    IActivation,
    IBackend,
    InvalidAxisError,
    InvalidParameterError,
    IOperand,
    ITensor,
    KeyActError,
    ShapeMismatchError,
    TypeMismatchError,
)
from .infrastructure._config import RuntimeConfig, load_config
from .infrastructure.activations import (
    Celu,
    Relu,
    Sigmoid,
    Softmax,
    Swish,
    Tanh,
    activation_from_config,
    activation_to_config,
    get_activation,
    register_activation,
)
from .infrastructure.backends import (
    NumpyBackend,
    TorchBackend,
    available_backends,
    create_backend,
    get_default_backend,
    register_backend,
    reset_default_backend,
    set_default_backend,
    use_backend,
)
from .infrastructure.operand import Operand, lift_scalar
from .infrastructure.tensor import Tensor

logging.getLogger(__name__).addHandler(logging.NullHandler())

try:
    __version__ = _load_version("keyact")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "ActivationKind",
    "IActivation",
    "IBackend",
    "IOperand",
    "ITensor",
    "KeyActError",
    "ShapeMismatchError",
    "TypeMismatchError",
    "InvalidAxisError",
    "InvalidParameterError",
    "BackendMismatchError",
    "BackendReleasedError",
    "BackendNotAvailableError",
    "ConfigError",
    "RuntimeConfig",
    "load_config",
    "Sigmoid",
    "Tanh",
    "Relu",
    "Swish",
    "Celu",
    "Softmax",
    "register_activation",
    "activation_to_config",
    "activation_from_config",
    "get_activation",
    "NumpyBackend",
    "TorchBackend",
    "available_backends",
    "create_backend",
    "register_backend",
    "get_default_backend",
    "set_default_backend",
    "reset_default_backend",
    "use_backend",
    "Operand",
    "lift_scalar",
    "Tensor",
    "__version__",
]
