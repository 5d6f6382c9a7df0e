"""
Common call shapes for activation kernels.

`ActivationMixin` turns a kernel's operand-level `forward` into the three
public call shapes:

- ``kernel.apply(backend, x)``: explicit backend handle, returns a `Tensor`;
- ``kernel(x)`` with a tensor or array-like: default backend, returns a
  `Tensor`;
- ``kernel(x)`` with a real number: default backend, returns a `float`.

The mixin defines no instance attributes. Kernels combine it with a frozen
dataclass, so every kernel instance is immutable and safe to share.
"""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any, ClassVar, Union

import numpy as np

from ...domain._activation import ActivationKind
from ...domain._backend import IBackend
from ...domain._errors import BackendMismatchError, InvalidParameterError
from ..backends._default import get_default_backend
from ..operand._functional import is_scalar
from ..operand._operand import Operand
from ..tensor._tensor import Tensor


def _as_operand(backend: IBackend, x: Any) -> Operand:
    if isinstance(x, (bool, np.bool_)):
        raise TypeError(f"Expected a real number or array-like, got {type(x).__name__}")
    if isinstance(x, Operand):
        owner = x.backend
        if owner is not backend:
            raise BackendMismatchError("apply", backend, owner)
        return x
    return backend.constant(x)


def check_real(kernel: str, name: str, value: Any) -> float:
    """
    Validate a finite real parameter and return it as a float.

    Raises
    ------
    InvalidParameterError
        If `value` is a bool, not a real number, or not finite.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        raise InvalidParameterError(kernel, name, value, "expected a real number")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(kernel, name, value, "must be finite")
    return value


def check_int(kernel: str, name: str, value: Any) -> int:
    """Validate an integer (non-bool) parameter and return it as an int."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Integral):
        raise InvalidParameterError(kernel, name, value, "expected an integer")
    return int(value)


def check_bool(kernel: str, name: str, value: Any) -> bool:
    """Validate a boolean parameter and return it as a bool."""
    if not isinstance(value, (bool, np.bool_)):
        raise InvalidParameterError(kernel, name, value, "expected a bool")
    return bool(value)


class ActivationMixin:
    """
    Mixin providing `apply` and `__call__` on top of `forward`.

    Subclasses set the `kind` class attribute and implement `forward`.
    """

    __slots__ = ()

    kind: ClassVar[ActivationKind]

    def forward(self, x: Operand) -> Operand:
        """
        Build the kernel expression over `x`.

        Parameters
        ----------
        x : Operand
            Input operand. Its backend executes every primitive.

        Returns
        -------
        Operand
            The (unrealized) kernel output.
        """
        raise NotImplementedError

    def apply(self, backend: IBackend, x: Any) -> Tensor:
        """
        Apply the kernel to `x` through `backend` and realize the result.

        Parameters
        ----------
        backend : IBackend
            Backend executing the primitives.
        x : Tensor, array-like, number, or Operand
            Input. Host data is converted to the backend's dtype. An operand
            must have been produced by `backend`.

        Returns
        -------
        Tensor
            Read-only result with the same shape as the input.

        Raises
        ------
        BackendMismatchError
            If `x` is an operand from a different backend.
        TypeError
            If `x` is a bool.
        """
        return backend.materialize(self.forward(_as_operand(backend, x)))

    def __call__(self, x: Any) -> Union[Tensor, float]:
        """
        Apply the kernel using the process-wide default backend.

        Returns
        -------
        Tensor or float
            A `Tensor` for tensor/array-like input, a `float` for a real
            number.
        """
        backend = get_default_backend()
        if is_scalar(x):
            return backend.scalar_value(self.apply(backend, x))
        return self.apply(backend, x)
