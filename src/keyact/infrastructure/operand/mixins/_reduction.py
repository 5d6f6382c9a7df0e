"""
Reduction operand methods (``max``, ``sum``) over a single axis.
"""

from __future__ import annotations

from typing import Any


class OperandMixinReduction:
    """
    Mixin defining single-axis reductions.

    Notes
    -----
    The axis is validated against the operand's rank before the backend is
    asked for anything; an out-of-range axis raises `InvalidAxisError`.
    """

    __slots__ = ()

    def max(self, axis: int, keepdims: bool = False) -> Any:
        """
        Maximum along `axis`.

        Parameters
        ----------
        axis : int
            Axis to reduce. Negative values count from the last dimension.
        keepdims : bool, optional
            Keep the reduced axis with size 1.

        Returns
        -------
        Operand
            The reduced operand.
        """
        from .._functional import reduce_max

        return reduce_max(self, axis, keepdims=keepdims)

    def sum(self, axis: int, keepdims: bool = False) -> Any:
        """Sum along `axis`. See :meth:`max` for parameter semantics."""
        from .._functional import reduce_sum

        return reduce_sum(self, axis, keepdims=keepdims)
