"""
PyTorch backend.

Lowers the operand algebra onto ``torch`` CPU tensors. PyTorch is an optional
dependency (``pip install keyact[torch]``); it is imported when the backend is
constructed, and a missing installation surfaces as
`BackendNotAvailableError` at that point.

Operand values are ``torch.Tensor`` objects on the CPU. Materialization copies
them back to NumPy, so the resulting `Tensor` is identical in kind to the one
produced by the NumPy backend.
"""

from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from ...domain._errors import BackendNotAvailableError
from ..operand._operand import Operand
from ._base import BaseBackend
from ._registry import register_backend


@register_backend("torch")
class TorchBackend(BaseBackend):
    """
    Backend lowering the operand algebra onto PyTorch.

    Parameters
    ----------
    dtype : Any, optional
        Default element type for constants, ``"float32"`` (default) or
        ``"float64"``.

    Raises
    ------
    BackendNotAvailableError
        If ``torch`` cannot be imported.
    """

    name = "torch"

    def __init__(self, dtype: Any = "float32") -> None:
        try:
            import torch
        except ImportError as exc:
            raise BackendNotAvailableError("torch", str(exc)) from exc
        self._torch = torch
        super().__init__(dtype=dtype)

    def _describe(self, native: Any) -> Tuple[Tuple[int, ...], np.dtype]:
        # torch.float32 -> "float32"
        return tuple(native.shape), np.dtype(str(native.dtype).rsplit(".", 1)[-1])

    def _from_numpy(self, arr: np.ndarray) -> Any:
        return self._torch.from_numpy(np.array(arr, copy=True))

    def _to_numpy(self, native: Any) -> np.ndarray:
        return native.detach().cpu().numpy().copy()

    # ------------------------------------------------------------------
    # Binary
    # ------------------------------------------------------------------
    def add(self, a: Operand, b: Operand) -> Operand:
        return self._binary("add", a, b, self._torch.add)

    def sub(self, a: Operand, b: Operand) -> Operand:
        return self._binary("sub", a, b, self._torch.sub)

    def mul(self, a: Operand, b: Operand) -> Operand:
        return self._binary("mul", a, b, self._torch.mul)

    def div(self, a: Operand, b: Operand) -> Operand:
        return self._binary("div", a, b, self._torch.div)

    def minimum(self, a: Operand, b: Operand) -> Operand:
        return self._binary("minimum", a, b, self._torch.minimum)

    def maximum(self, a: Operand, b: Operand) -> Operand:
        return self._binary("maximum", a, b, self._torch.maximum)

    # ------------------------------------------------------------------
    # Unary
    # ------------------------------------------------------------------
    def negate(self, a: Operand) -> Operand:
        return self._unary("negate", a, self._torch.neg)

    def exp(self, a: Operand) -> Operand:
        return self._unary("exp", a, self._torch.exp)

    def reciprocal(self, a: Operand) -> Operand:
        return self._unary("reciprocal", a, self._torch.reciprocal)

    # ------------------------------------------------------------------
    # Reductions
    # ------------------------------------------------------------------
    def reduce_max(self, a: Operand, axis: int, keepdims: bool = False) -> Operand:
        return self._unary(
            "reduce_max", a, lambda v: self._torch.amax(v, dim=axis, keepdim=keepdims)
        )

    def reduce_sum(self, a: Operand, axis: int, keepdims: bool = False) -> Operand:
        return self._unary(
            "reduce_sum", a, lambda v: self._torch.sum(v, dim=axis, keepdim=keepdims)
        )
