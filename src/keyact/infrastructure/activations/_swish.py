"""
Swish activation kernel.

    swish(x) = x * sigmoid(beta * x)

Composed directly from :class:`Sigmoid`, so it inherits Sigmoid's saturation
behavior, scaled by `beta`. Changing `beta` changes the steepness of the
curve but not its zero crossing (``swish(0) == 0`` for every beta).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from ...domain._activation import ActivationKind
from ..operand._operand import Operand
from ._base import ActivationMixin, check_real
from ._serialization import register_activation
from ._sigmoid import Sigmoid


@register_activation()
@dataclass(frozen=True)
class Swish(ActivationMixin):
    """
    Swish activation.

    Parameters
    ----------
    beta : float, default=1.0
        Scale applied to the sigmoid argument. Must be finite.

    Raises
    ------
    InvalidParameterError
        If `beta` is not a finite real number.
    """

    beta: float = 1.0

    kind: ClassVar[ActivationKind] = ActivationKind.SWISH

    def __post_init__(self) -> None:
        object.__setattr__(self, "beta", check_real("Swish", "beta", self.beta))

    def forward(self, x: Operand) -> Operand:
        return x * Sigmoid().forward(self.beta * x)

    def get_config(self) -> Dict[str, Any]:
        return {"beta": float(self.beta)}

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "Swish":
        return cls(beta=cfg.get("beta", 1.0))
