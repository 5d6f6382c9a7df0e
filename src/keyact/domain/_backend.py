"""
Backend capability contract for KeyAct.

This module defines `IBackend`, the duck-typed contract every computation
backend implements. Activation kernels are written purely against the operand
algebra, which in turn only calls the primitives listed here, so any object
satisfying this protocol (a NumPy backend, a Torch backend, a recording test
double) can be substituted without touching kernel code.

Design notes
------------
- Uses `typing.Protocol` and `@runtime_checkable` so callers can validate a
  backend structurally instead of by class identity.
- Backends are responsible for surfacing shape and dtype mismatches
  (`ShapeMismatchError`, `TypeMismatchError`); the algebra layer does not
  validate shapes itself.
- Thread-safety is owned by each implementation. The bundled backends hold no
  mutable state after construction and may be shared across threads; a
  third-party backend must document its own policy.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from ._operand import IOperand
from ._tensor import ITensor, Number


@runtime_checkable
class IBackend(Protocol):
    """
    Duck-typed backend contract.

    Attributes
    ----------
    name : str
        Registry name of the backend (e.g., "numpy").
    dtype : Any
        Default element type (a `numpy.dtype`) for constants created without
        an explicit dtype.
    """

    name: str
    dtype: Any

    # ---------------------------------------------------------------------
    # Constants / realization
    # ---------------------------------------------------------------------
    def constant(self, value: Any, dtype: Optional[Any] = None) -> IOperand:
        """
        Create a constant operand from a scalar, array-like, or `ITensor`.

        A Python scalar produces a zero-dimensional operand.
        """
        ...

    def materialize(self, x: IOperand) -> ITensor:
        """Realize an operand into a read-only tensor."""
        ...

    def scalar_value(self, t: ITensor) -> Number:
        """Extract the single element of a one-element tensor."""
        ...

    # ---------------------------------------------------------------------
    # Elementwise binary primitives (broadcasting)
    # ---------------------------------------------------------------------
    def add(self, a: IOperand, b: IOperand) -> IOperand: ...

    def sub(self, a: IOperand, b: IOperand) -> IOperand: ...

    def mul(self, a: IOperand, b: IOperand) -> IOperand: ...

    def div(self, a: IOperand, b: IOperand) -> IOperand: ...

    def minimum(self, a: IOperand, b: IOperand) -> IOperand: ...

    def maximum(self, a: IOperand, b: IOperand) -> IOperand: ...

    # ---------------------------------------------------------------------
    # Elementwise unary primitives
    # ---------------------------------------------------------------------
    def negate(self, a: IOperand) -> IOperand: ...

    def exp(self, a: IOperand) -> IOperand: ...

    def reciprocal(self, a: IOperand) -> IOperand: ...

    # ---------------------------------------------------------------------
    # Reductions
    # ---------------------------------------------------------------------
    def reduce_max(self, a: IOperand, axis: int, keepdims: bool = False) -> IOperand:
        """Maximum over one axis; the caller guarantees the axis is valid."""
        ...

    def reduce_sum(self, a: IOperand, axis: int, keepdims: bool = False) -> IOperand:
        """Sum over one axis; the caller guarantees the axis is valid."""
        ...
