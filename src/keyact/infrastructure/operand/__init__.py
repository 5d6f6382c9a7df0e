"""
Operand algebra: the `Operand` value type and its functional operators.
"""

from ._operand import Operand
from ._functional import (
    add,
    div,
    exp,
    is_scalar,
    lift_scalar,
    maximum,
    minimum,
    mul,
    negate,
    normalize_axis,
    reciprocal,
    reduce_max,
    reduce_sum,
    sub,
)

__all__ = [
    "Operand",
    "add",
    "sub",
    "mul",
    "div",
    "negate",
    "exp",
    "reciprocal",
    "minimum",
    "maximum",
    "reduce_max",
    "reduce_sum",
    "lift_scalar",
    "is_scalar",
    "normalize_axis",
]
