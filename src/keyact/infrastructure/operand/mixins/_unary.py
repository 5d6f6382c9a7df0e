"""
Unary operand methods (``exp``, ``reciprocal``).

Kernels usually call the functional forms (``exp(x)``); the methods exist so
that expressions can also be chained (``x.exp().reciprocal()``).
"""

from __future__ import annotations

from typing import Any


class OperandMixinUnary:
    __slots__ = ()

    def exp(self) -> Any:
        """Elementwise natural exponential. Overflow saturates to ``inf``."""
        from .._functional import exp

        return exp(self)

    def reciprocal(self) -> Any:
        """Elementwise ``1 / x``. ``reciprocal(0)`` is ``inf``."""
        from .._functional import reciprocal

        return reciprocal(self)
