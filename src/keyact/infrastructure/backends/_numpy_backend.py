"""
NumPy reference backend.

Executes every primitive eagerly with NumPy on the CPU. Operand values are
non-writeable `np.ndarray` objects (0-d arrays for scalars, never NumPy scalar
objects).

Floating-point policy
---------------------
Primitives run under ``np.errstate`` with overflow, underflow, invalid and
divide-by-zero set to ``"ignore"``: results follow IEEE-754 (``inf``, ``0``,
``nan``) silently. This is the documented saturation behavior of Sigmoid and
Tanh at extreme magnitudes, not an error condition.
"""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from ..operand._operand import Operand
from ._base import BaseBackend
from ._registry import register_backend

_IEEE = dict(over="ignore", under="ignore", invalid="ignore", divide="ignore")


@register_backend("numpy")
class NumpyBackend(BaseBackend):
    """
    Backend lowering the operand algebra onto NumPy.

    Parameters
    ----------
    dtype : Any, optional
        Default element type for constants, ``"float32"`` (default) or
        ``"float64"``.
    """

    name = "numpy"

    def _describe(self, native: Any) -> Tuple[Tuple[int, ...], np.dtype]:
        return tuple(native.shape), native.dtype

    def _from_numpy(self, arr: np.ndarray) -> np.ndarray:
        arr = np.asarray(arr)
        arr.setflags(write=False)
        return arr

    def _to_numpy(self, native: np.ndarray) -> np.ndarray:
        return np.array(native, copy=True)

    def _wrap(self, native: Any) -> Operand:
        # ufuncs return NumPy scalars for 0-d inputs
        return super()._wrap(self._from_numpy(np.asarray(native)))

    # ------------------------------------------------------------------
    # Binary
    # ------------------------------------------------------------------
    def add(self, a: Operand, b: Operand) -> Operand:
        with np.errstate(**_IEEE):
            return self._binary("add", a, b, np.add)

    def sub(self, a: Operand, b: Operand) -> Operand:
        with np.errstate(**_IEEE):
            return self._binary("sub", a, b, np.subtract)

    def mul(self, a: Operand, b: Operand) -> Operand:
        with np.errstate(**_IEEE):
            return self._binary("mul", a, b, np.multiply)

    def div(self, a: Operand, b: Operand) -> Operand:
        with np.errstate(**_IEEE):
            return self._binary("div", a, b, np.true_divide)

    def minimum(self, a: Operand, b: Operand) -> Operand:
        return self._binary("minimum", a, b, np.minimum)

    def maximum(self, a: Operand, b: Operand) -> Operand:
        return self._binary("maximum", a, b, np.maximum)

    # ------------------------------------------------------------------
    # Unary
    # ------------------------------------------------------------------
    def negate(self, a: Operand) -> Operand:
        return self._unary("negate", a, np.negative)

    def exp(self, a: Operand) -> Operand:
        with np.errstate(**_IEEE):
            return self._unary("exp", a, np.exp)

    def reciprocal(self, a: Operand) -> Operand:
        with np.errstate(**_IEEE):
            return self._unary("reciprocal", a, np.reciprocal)

    # ------------------------------------------------------------------
    # Reductions
    # ------------------------------------------------------------------
    def reduce_max(self, a: Operand, axis: int, keepdims: bool = False) -> Operand:
        return self._unary(
            "reduce_max", a, lambda v: np.max(v, axis=axis, keepdims=keepdims)
        )

    def reduce_sum(self, a: Operand, axis: int, keepdims: bool = False) -> Operand:
        with np.errstate(**_IEEE):
            return self._unary(
                "reduce_sum", a, lambda v: np.sum(v, axis=axis, keepdims=keepdims)
            )
