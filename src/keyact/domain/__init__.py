"""
Domain layer: backend-agnostic contracts, kind tags and errors.

Nothing in this package depends on a numerical library.
"""

from ._activation import ActivationKind, IActivation
from ._backend import IBackend
from ._errors import (
    BackendMismatchError,
    BackendNotAvailableError,
    BackendReleasedError,
    ConfigError,
    InvalidAxisError,
    InvalidParameterError,
    KeyActError,
    ShapeMismatchError,
    TypeMismatchError,
)
from ._operand import IOperand
from ._tensor import ITensor, Number

__all__ = [
    "ActivationKind",
    "IActivation",
    "IBackend",
    "IOperand",
    "ITensor",
    "Number",
    "KeyActError",
    "ShapeMismatchError",
    "TypeMismatchError",
    "InvalidAxisError",
    "InvalidParameterError",
    "BackendMismatchError",
    "BackendReleasedError",
    "BackendNotAvailableError",
    "ConfigError",
]
