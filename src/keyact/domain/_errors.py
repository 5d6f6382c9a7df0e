"""
Exceptions raised by KeyAct.

This module defines the error taxonomy shared by the operand algebra, the
computation backends and the activation kernels. Every error derives from
:class:`KeyActError` and additionally from the closest builtin exception, so
callers may catch either the library-specific type or the builtin one.

All errors are raised synchronously to the immediate caller. Nothing in the
library retries an operation, returns a partial result, or downgrades an error
to a default value.

Notes
-----
Floating-point saturation (``inf``/``nan`` produced by Sigmoid or Tanh at
extreme magnitudes) is documented behavior and is *not* represented here.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence


class KeyActError(Exception):
    """Base class for KeyAct-specific exceptions."""


class ShapeMismatchError(KeyActError, ValueError):
    """
    Raised when two operands cannot be broadcast together.

    Backends raise this error before executing a binary primitive whose
    operand shapes are not compatible under trailing-dimension broadcasting.

    Attributes
    ----------
    op : str
        Name of the primitive that was attempted (e.g., "add").
    shape_a : tuple[int, ...]
        Shape of the left operand.
    shape_b : tuple[int, ...]
        Shape of the right operand.
    """

    def __init__(
        self, op: str, shape_a: Sequence[int], shape_b: Sequence[int]
    ) -> None:
        """
        Initialize the ShapeMismatchError.

        Parameters
        ----------
        op : str
            The primitive name.
        shape_a : Sequence[int]
            Shape of the left operand.
        shape_b : Sequence[int]
            Shape of the right operand.
        """
        self.op = op
        self.shape_a = tuple(shape_a)
        self.shape_b = tuple(shape_b)
        super().__init__(
            f"{op}: shapes {self.shape_a} and {self.shape_b} are not broadcastable."
        )


class TypeMismatchError(KeyActError, TypeError):
    """
    Raised when two operands with different element types are combined.

    Attributes
    ----------
    op : str
        Name of the primitive that was attempted.
    dtype_a : str
        Element type of the left operand.
    dtype_b : str
        Element type of the right operand.
    """

    def __init__(self, op: str, dtype_a: Any, dtype_b: Any) -> None:
        self.op = op
        self.dtype_a = str(dtype_a)
        self.dtype_b = str(dtype_b)
        super().__init__(
            f"{op}: dtype mismatch '{self.dtype_a}' vs '{self.dtype_b}'."
        )


class InvalidAxisError(KeyActError, ValueError):
    """
    Raised when a reduction axis does not index a dimension of the input.

    Softmax checks its axis before requesting any reduction from the backend,
    so this error is raised at ``apply`` time with no primitive executed.

    Attributes
    ----------
    axis : int
        The requested axis.
    ndim : int
        Rank of the input.
    """

    def __init__(self, axis: int, ndim: int) -> None:
        self.axis = axis
        self.ndim = ndim
        super().__init__(
            f"Invalid axis {axis} for input of ndim={ndim}; "
            f"expected {-ndim} <= axis < {ndim}."
        )


class InvalidParameterError(KeyActError, ValueError):
    """
    Raised when a kernel is constructed with an out-of-domain parameter.

    Kernels validate their parameters at construction so that misconfiguration
    surfaces before the first call.

    Attributes
    ----------
    kernel : str
        Name of the kernel class.
    name : str
        Name of the offending parameter.
    value : Any
        The rejected value.
    """

    def __init__(
        self, kernel: str, name: str, value: Any, reason: Optional[str] = None
    ) -> None:
        self.kernel = kernel
        self.name = name
        self.value = value
        detail = f": {reason}" if reason else ""
        super().__init__(f"{kernel}: invalid {name}={value!r}{detail}")


class BackendMismatchError(KeyActError, RuntimeError):
    """
    Raised when operands produced by two different backend handles are
    combined in one expression.
    """

    def __init__(self, op: str, backend_a: Any, backend_b: Any) -> None:
        self.op = op
        self.backend_a = backend_a
        self.backend_b = backend_b
        super().__init__(
            f"{op}: operands belong to different backends "
            f"({backend_a!r} vs {backend_b!r})."
        )


class BackendReleasedError(KeyActError, RuntimeError):
    """
    Raised when an operand is used after its backend has been garbage
    collected.

    Operands only hold a weak reference to the backend that produced them.
    """


class BackendNotAvailableError(KeyActError, RuntimeError):
    """
    Raised when a backend is requested by an unknown name, or when the
    library it lowers onto cannot be imported.

    Attributes
    ----------
    backend : str
        The requested backend name.
    """

    def __init__(self, backend: str, reason: str) -> None:
        self.backend = backend
        super().__init__(f"Backend '{backend}' is not available: {reason}")


class ConfigError(KeyActError, ValueError):
    """Raised for invalid configuration values or configuration files."""
