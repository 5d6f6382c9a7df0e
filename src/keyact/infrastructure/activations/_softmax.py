"""
Softmax activation kernel.

Converts a real-valued tensor into categorical probabilities along one axis:
every output element lies in (0, 1) and the elements along `axis` sum to 1.

Two formulations are available:

- stable (default)::

      e = exp(x - max(x, axis, keepdims=True))
      softmax = e / sum(e, axis, keepdims=True)

  Subtracting the per-axis maximum bounds every exponent argument by 0, so
  large positive inputs cannot overflow. It costs one extra reduction.

- unstable (``stable=False``)::

      e = exp(x)
      softmax = e / sum(e, axis, keepdims=True)

  Kept for comparison and testing. Inputs above ~88 (float32) overflow to
  ``inf`` and yield ``nan``.

The reduced axis is kept with size 1 only transiently; the final division
broadcasts it back, so the output shape always equals the input shape.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict

from ...domain._activation import ActivationKind
from ...domain._errors import InvalidParameterError
from ..operand._functional import exp, normalize_axis, reduce_max, reduce_sum
from ..operand._operand import Operand
from ._base import ActivationMixin, check_bool, check_int
from ._serialization import register_activation


@register_activation()
@dataclass(frozen=True)
class Softmax(ActivationMixin):
    """
    Softmax activation along a single axis.

    Parameters
    ----------
    axis : int
        Dimension along which the probabilities are normalized. Negative
        values count from the last dimension.
    stable : bool, default=True
        Subtract the per-axis maximum before exponentiating.

    Raises
    ------
    InvalidParameterError
        At construction, if `axis` is not an integer or `stable` is not a bool.
    InvalidAxisError
        At apply time, if `axis` does not index a dimension of the input.
        A 0-d input has no valid axis, so scalar invocation always raises.
    """

    axis: int
    stable: bool = True

    kind: ClassVar[ActivationKind] = ActivationKind.SOFTMAX

    def __post_init__(self) -> None:
        object.__setattr__(self, "axis", check_int("Softmax", "axis", self.axis))
        object.__setattr__(self, "stable", check_bool("Softmax", "stable", self.stable))

    def forward(self, x: Operand) -> Operand:
        """
        Build the softmax expression.

        Returns
        -------
        Operand
            An operand with the same shape as `x`.

        Raises
        ------
        InvalidAxisError
            If the axis is out of range; no primitive has run at that point.

        Notes
        -----
        An input whose reduced axis has length 0 is returned unchanged.
        """
        axis = normalize_axis(self.axis, x.ndim)
        if x.shape[axis] == 0:
            # empty axis: nothing to normalize
            return x
        if self.stable:
            e = exp(x - reduce_max(x, axis, keepdims=True))
        else:
            e = exp(x)
        return e / reduce_sum(e, axis, keepdims=True)

    def get_config(self) -> Dict[str, Any]:
        return {"axis": int(self.axis), "stable": bool(self.stable)}

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "Softmax":
        if "axis" not in cfg:
            raise InvalidParameterError("Softmax", "axis", None, "missing")
        return cls(axis=cfg["axis"], stable=cfg.get("stable", True))
