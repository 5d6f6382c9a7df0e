"""
Deferred operand value.

`Operand` is the unit the arithmetic layer works with: a backend-native value
(e.g., `np.ndarray`, `torch.Tensor`) together with its shape, its dtype and a
non-owning reference to the backend that produced it.

Operands are immutable. Operators defined by the mixins below never touch the
receiver; they request a new operand from the backend instead.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Sequence

import numpy as np

from ...domain._errors import BackendReleasedError
from .mixins import (
    OperandMixinArithmetic,
    OperandMixinReduction,
    OperandMixinUnary,
)

if TYPE_CHECKING:
    from ...domain._backend import IBackend
    from ..tensor._tensor import Tensor


class Operand(OperandMixinArithmetic, OperandMixinUnary, OperandMixinReduction):
    """
    Shape-typed value produced by a backend.

    Parameters
    ----------
    value : Any
        Backend-native value. Only the producing backend interprets it.
    shape : Sequence[int]
        Shape of the value.
    dtype : Any
        Element type, normalized to a `numpy.dtype`.
    backend : IBackend
        The producing backend. Only a weak reference is kept.

    Notes
    -----
    - Operands are normally created by a backend (``backend.constant(...)`` or
      the result of a primitive), not by user code.
    - ``__array_ufunc__ = None`` makes NumPy scalars defer to the reflected
      operators, so ``np.float32(2) * x`` is handled by ``x.__rmul__``.
    """

    __slots__ = ("_value", "_shape", "_dtype", "_backend_ref")

    __array_ufunc__ = None

    def __init__(
        self, value: Any, *, shape: Sequence[int], dtype: Any, backend: "IBackend"
    ) -> None:
        self._value = value
        self._shape = tuple(int(d) for d in shape)
        self._dtype = np.dtype(dtype)
        self._backend_ref = weakref.ref(backend)

    @property
    def value(self) -> Any:
        return self._value

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def backend(self) -> "IBackend":
        """
        Return the backend that produced this operand.

        Raises
        ------
        BackendReleasedError
            If the backend has already been garbage collected.
        """
        backend = self._backend_ref()
        if backend is None:
            raise BackendReleasedError(
                "The backend that produced this operand no longer exists."
            )
        return backend

    def materialize(self) -> "Tensor":
        """Realize this operand through its backend."""
        return self.backend.materialize(self)

    def __repr__(self) -> str:
        backend = self._backend_ref()
        name = "<released>" if backend is None else getattr(backend, "name", "?")
        return f"Operand(shape={self._shape}, dtype={self._dtype}, backend={name})"
