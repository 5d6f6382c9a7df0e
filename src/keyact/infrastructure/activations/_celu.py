"""
Continuously differentiable exponential linear unit (CELU).

    celu(x) = max(0, x) + min(0, alpha * (exp(x / alpha) - 1))

`alpha` controls the saturation level for negative inputs. It must be
nonzero; ``Celu(alpha=0)`` raises `InvalidParameterError` at construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from ...domain._activation import ActivationKind
from ...domain._errors import InvalidParameterError
from ..operand._functional import exp, maximum, minimum
from ..operand._operand import Operand
from ._base import ActivationMixin, check_real
from ._serialization import register_activation


@register_activation()
@dataclass(frozen=True)
class Celu(ActivationMixin):
    """
    CELU activation.

    Parameters
    ----------
    alpha : float, default=1.0
        Saturation parameter. Must be finite and nonzero.

    Raises
    ------
    InvalidParameterError
        If `alpha` is zero, not finite, or not a real number.

    Notes
    -----
    - ``celu(0) == 0`` for every valid alpha.
    - For positive alpha, ``celu(x) == x`` exactly for ``x >= 0``.
    """

    alpha: float = 1.0

    kind: ClassVar[ActivationKind] = ActivationKind.CELU

    def __post_init__(self) -> None:
        alpha = check_real("Celu", "alpha", self.alpha)
        if alpha == 0.0:
            raise InvalidParameterError("Celu", "alpha", self.alpha, "must be nonzero")
        object.__setattr__(self, "alpha", alpha)

    def forward(self, x: Operand) -> Operand:
        """
        Build the CELU expression.

        Returns
        -------
        Operand
            An operand with the same shape as `x`.
        """
        alpha = self.alpha
        return maximum(0.0, x) + minimum(0.0, alpha * (exp(x / alpha) - 1.0))

    def get_config(self) -> Dict[str, Any]:
        return {"alpha": float(self.alpha)}

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "Celu":
        return cls(alpha=cfg.get("alpha", 1.0))
