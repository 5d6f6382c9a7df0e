"""
Arithmetic mixin defining elementwise operand operators.

This module declares :class:`OperandMixinArithmetic`, the mixin that gives
operands their ``+ - * /`` and unary ``-`` syntax.

The mixin performs no computation. Each operator promotes a bare scalar to a
zero-dimensional constant through :func:`lift_scalar` and then delegates to
the corresponding backend primitive through the functional helpers in
``operand._functional``.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Union

Number = Union[int, float]


def _supports(other: Any) -> bool:
    from .._operand import Operand

    return isinstance(other, (Operand, Real)) and not isinstance(other, bool)


class OperandMixinArithmetic:
    """
    Mixin defining elementwise arithmetic operators for operands.

    Notes
    -----
    - Operands must share a backend and a dtype, and be broadcast compatible.
      The backend enforces the last two.
    - Scalars are promoted to zero-dimensional constants of the operand's
      dtype before the primitive is requested; they then broadcast to the
      operand's shape.
    - Unsupported right-hand types yield ``NotImplemented`` so Python can try
      the reflected operator.
    """

    __slots__ = ()

    # ----------------------------
    # Addition
    # ----------------------------
    def __add__(self, other: Union["OperandMixinArithmetic", Number]) -> Any:
        """
        Elementwise addition.

        Parameters
        ----------
        other : Union[Operand, Number]
            Right-hand operand. Scalars are lifted to 0-d constants.

        Returns
        -------
        Operand
            Operand holding ``self + other`` with the broadcast shape.
        """
        if not _supports(other):
            return NotImplemented
        from .._functional import add

        return add(self, other)

    def __radd__(self, other: Number) -> Any:
        """Right-hand addition to support ``scalar + operand``."""
        if not _supports(other):
            return NotImplemented
        from .._functional import add

        return add(other, self)

    # ----------------------------
    # Subtraction
    # ----------------------------
    def __sub__(self, other: Union["OperandMixinArithmetic", Number]) -> Any:
        """
        Elementwise subtraction.

        Returns
        -------
        Operand
            Operand holding ``self - other``.
        """
        if not _supports(other):
            return NotImplemented
        from .._functional import sub

        return sub(self, other)

    def __rsub__(self, other: Number) -> Any:
        """Right-hand subtraction to support ``scalar - operand``."""
        if not _supports(other):
            return NotImplemented
        from .._functional import sub

        return sub(other, self)

    # ----------------------------
    # Multiplication
    # ----------------------------
    def __mul__(self, other: Union["OperandMixinArithmetic", Number]) -> Any:
        """
        Elementwise multiplication.

        Returns
        -------
        Operand
            Operand holding ``self * other``.
        """
        if not _supports(other):
            return NotImplemented
        from .._functional import mul

        return mul(self, other)

    def __rmul__(self, other: Number) -> Any:
        """Right-hand multiplication to support ``scalar * operand``."""
        if not _supports(other):
            return NotImplemented
        from .._functional import mul

        return mul(other, self)

    # ----------------------------
    # True division
    # ----------------------------
    def __truediv__(self, other: Union["OperandMixinArithmetic", Number]) -> Any:
        """
        Elementwise true division.

        Returns
        -------
        Operand
            Operand holding ``self / other``.

        Notes
        -----
        Division by zero follows IEEE-754 (``inf`` or ``nan``); it is not
        raised as an error.
        """
        if not _supports(other):
            return NotImplemented
        from .._functional import div

        return div(self, other)

    def __rtruediv__(self, other: Number) -> Any:
        """Right-hand true division to support ``scalar / operand``."""
        if not _supports(other):
            return NotImplemented
        from .._functional import div

        return div(other, self)

    # ----------------------------
    # Negation
    # ----------------------------
    def __neg__(self) -> Any:
        """Elementwise sign flip; shape-preserving."""
        from .._functional import negate

        return negate(self)

    def __pos__(self) -> Any:
        return self
