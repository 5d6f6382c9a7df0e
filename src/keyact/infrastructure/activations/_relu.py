from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from ...domain._activation import ActivationKind
from ...domain.model._stateless_mixin import StatelessConfigMixin
from ..operand._functional import maximum
from ..operand._operand import Operand
from ._base import ActivationMixin
from ._serialization import register_activation


@register_activation()
@dataclass(frozen=True)
class Relu(StatelessConfigMixin, ActivationMixin):
    """
    Rectified linear unit: ``relu(x) = max(x, 0)``, elementwise.

    Exact for every input; ``relu(0) == 0``.
    """

    kind: ClassVar[ActivationKind] = ActivationKind.RELU

    def forward(self, x: Operand) -> Operand:
        return maximum(x, 0.0)
