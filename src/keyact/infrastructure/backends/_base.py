"""
Shared backend machinery.

`BaseBackend` implements the checks every backend owes the operand algebra:

- operands passed to a primitive must have been produced by this backend
  (`BackendMismatchError`),
- binary primitives require equal dtypes (`TypeMismatchError`) and
  broadcast-compatible shapes (`ShapeMismatchError`).

Concrete backends only describe their native values (`_describe`) and supply
the native functions for each primitive.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Tuple

import numpy as np

from ...domain._errors import (
    BackendMismatchError,
    InvalidParameterError,
    ShapeMismatchError,
    TypeMismatchError,
)
from ..operand._operand import Operand
from ..tensor._tensor import Tensor

logger = logging.getLogger(__name__)

SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def normalize_dtype(owner: str, dtype: Any) -> np.dtype:
    """
    Convert a dtype ("float32", np.float64, ...) to a supported
    `numpy.dtype`.

    Raises
    ------
    InvalidParameterError
        If the dtype is not float32 or float64.
    """
    try:
        dt = np.dtype(dtype)
    except TypeError as exc:
        raise InvalidParameterError(owner, "dtype", dtype, str(exc)) from exc
    if dt not in SUPPORTED_DTYPES:
        raise InvalidParameterError(
            owner, "dtype", dtype, "supported dtypes are float32 and float64"
        )
    return dt


def broadcast_shape(op: str, shape_a: Tuple[int, ...], shape_b: Tuple[int, ...]) -> Tuple[int, ...]:
    """Return the broadcast of two shapes or raise `ShapeMismatchError`."""
    try:
        return tuple(np.broadcast_shapes(shape_a, shape_b))
    except ValueError as exc:
        raise ShapeMismatchError(op, shape_a, shape_b) from exc


class BaseBackend(ABC):
    """
    Base class for bundled backends.

    Attributes
    ----------
    name : str
        Registry name, set by subclasses.
    dtype : np.dtype
        Default element type for constants created without an explicit dtype.

    Notes
    -----
    Backends hold no mutable state after construction and may be shared
    across threads.
    """

    name: str = "base"

    def __init__(self, dtype: Any = "float32") -> None:
        self.dtype = normalize_dtype(type(self).__name__, dtype)
        logger.debug("Created %s backend (dtype=%s)", self.name, self.dtype)

    # ------------------------------------------------------------------
    # Native hooks
    # ------------------------------------------------------------------
    @abstractmethod
    def _describe(self, native: Any) -> Tuple[Tuple[int, ...], np.dtype]:
        """Return ``(shape, numpy dtype)`` for a native value."""
        raise NotImplementedError

    @abstractmethod
    def _from_numpy(self, arr: np.ndarray) -> Any:
        """Convert a host array into a native value."""
        raise NotImplementedError

    @abstractmethod
    def _to_numpy(self, native: Any) -> np.ndarray:
        """Copy a native value back to a host array."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _wrap(self, native: Any) -> Operand:
        shape, dtype = self._describe(native)
        return Operand(native, shape=shape, dtype=dtype, backend=self)

    def _own(self, op: str, x: Operand) -> Operand:
        if not isinstance(x, Operand):
            raise TypeError(f"{op}: expected an Operand, got '{type(x).__name__}'")
        owner = x.backend
        if owner is not self:
            raise BackendMismatchError(op, self, owner)
        return x

    def _binary(self, op: str, a: Operand, b: Operand, fn: Callable[[Any, Any], Any]) -> Operand:
        a = self._own(op, a)
        b = self._own(op, b)
        if a.dtype != b.dtype:
            raise TypeMismatchError(op, a.dtype, b.dtype)
        broadcast_shape(op, a.shape, b.shape)
        return self._wrap(fn(a.value, b.value))

    def _unary(self, op: str, a: Operand, fn: Callable[[Any], Any]) -> Operand:
        a = self._own(op, a)
        return self._wrap(fn(a.value))

    # ------------------------------------------------------------------
    # Constants / realization
    # ------------------------------------------------------------------
    def constant(self, value: Any, dtype: Optional[Any] = None) -> Operand:
        """
        Create a constant operand.

        Parameters
        ----------
        value : Any
            Python scalar, nested sequence, `np.ndarray` or `Tensor`. The data
            is copied and converted to `dtype`.
        dtype : Any, optional
            Element type; defaults to the backend's dtype.

        Returns
        -------
        Operand
            Constant operand; 0-d for scalar input.
        """
        if isinstance(value, Operand):
            raise TypeError("constant() expects host data, not an Operand")
        dt = self.dtype if dtype is None else normalize_dtype(type(self).__name__, dtype)
        if isinstance(value, Tensor):
            value = value.to_numpy()
        arr = np.array(value, dtype=dt)
        return self._wrap(self._from_numpy(arr))

    def materialize(self, x: Operand) -> Tensor:
        """Copy an operand into a read-only `Tensor`."""
        x = self._own("materialize", x)
        return Tensor.from_numpy(self._to_numpy(x.value))

    def scalar_value(self, t: Tensor) -> float:
        """
        Return the single element of `t` as a Python float.

        Raises
        ------
        ValueError
            If `t` does not hold exactly one element.
        """
        return float(t.item())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dtype={self.dtype.name})"
