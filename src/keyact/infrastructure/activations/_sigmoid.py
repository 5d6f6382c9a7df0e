"""
Sigmoid activation kernel.

    sigmoid(x) = 1 / (1 + exp(-x))

Precision limitation
--------------------
No sign-split stabilization is applied. In float32 the result saturates to
exactly ``1.0`` once ``exp(-x)`` drops below half an ulp of 1 (``x >= ~17``,
and in particular for every ``x >= 88``), and to exactly ``0.0`` once
``exp(-x)`` overflows (``x <= -89``). Saturation is expected behavior and is
never reported as an error.
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
class Sigmoid(StatelessConfigMixin, ActivationMixin):
    """
    Logistic sigmoid, applied elementwise.

    Examples
    --------
    >>> from keyact import NumpyBackend, Sigmoid
    >>> backend = NumpyBackend()
    >>> Sigmoid().apply(backend, [0.0, 1.0, 50.0, 100.0]).tolist()
    [0.5, 0.7310585975646973, 1.0, 1.0]
    """

    kind: ClassVar[ActivationKind] = ActivationKind.SIGMOID

    def forward(self, x: Operand) -> Operand:
        """
        Build ``reciprocal(1 + exp(-x))``.

        Returns
        -------
        Operand
            An operand with the same shape as `x`, values in [0, 1].
        """
        return reciprocal(1.0 + exp(-x))
