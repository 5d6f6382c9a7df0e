"""
Hyperbolic tangent activation kernel.

Computed as ``e = exp(2x); r = reciprocal(e); (e - r) / (e + r)``, i.e.

    (e^{2x} - e^{-2x}) / (e^{2x} + e^{-2x}) = tanh(2x)

Known limitation: the kernel evaluates ``tanh(2x)``, not ``tanh(x)``. The
expression is kept as published for this activation; it still maps 0 to 0,
is odd, and stays within [-1, 1].

Like Sigmoid this is not stabilized: once ``exp(2x)`` overflows (|x| above
~44 in float32) the quotient becomes ``inf / inf`` and the result is ``nan``.
This is documented saturation behavior, not an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ...domain._activation import ActivationKind
from ...domain.model._stateless_mixin import StatelessConfigMixin
from ..operand._functional import exp, reciprocal
from ..operand._operand import Operand
from ._base import ActivationMixin
from ._serialization import register_activation


@register_activation()
@dataclass(frozen=True)
class Tanh(StatelessConfigMixin, ActivationMixin):
    """Hyperbolic tangent of ``2x``, applied elementwise. Output lies in [-1, 1]."""

    kind: ClassVar[ActivationKind] = ActivationKind.TANH

    def forward(self, x: Operand) -> Operand:
        e = exp(2.0 * x)
        r = reciprocal(e)
        return (e - r) / (e + r)
