"""
Functional form of the operand algebra.

Every activation kernel is written against these helpers (or the operator
syntax that forwards to them). The helpers resolve which backend an
expression belongs to, promote bare scalars with :func:`lift_scalar`, and
delegate the actual work to the backend primitive.

Backend resolution rules
------------------------
- Two operands: both must reference the *same* backend handle, otherwise
  `BackendMismatchError` is raised before any primitive runs.
- Operand and scalar (either order): the operand's backend is used and the
  scalar becomes a 0-d constant with the operand's dtype.
- Two scalars: rejected with `TypeError`; there is no backend to lower onto.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Optional, Tuple, Union

from ...domain._backend import IBackend
from ...domain._errors import BackendMismatchError, InvalidAxisError
from ._operand import Operand

Number = Union[int, float]
OperandLike = Union[Operand, Number]


def is_scalar(value: Any) -> bool:
    """Return True for bare real numbers (including NumPy scalars), excluding bools."""
    return isinstance(value, Real) and not isinstance(value, (bool, Operand))


def lift_scalar(backend: IBackend, value: Number, like: Optional[Operand] = None) -> Operand:
    """
    Promote a bare number to a zero-dimensional constant operand.

    Parameters
    ----------
    backend : IBackend
        Backend that creates the constant.
    value : Number
        The scalar to promote.
    like : Operand, optional
        If given, the constant takes this operand's dtype; otherwise the
        backend's default dtype is used.

    Returns
    -------
    Operand
        A 0-d constant that broadcasts against any shape.
    """
    if not is_scalar(value):
        raise TypeError(f"lift_scalar expects a real number, got {type(value).__name__}")
    dtype = like.dtype if like is not None else None
    return backend.constant(value, dtype=dtype)


def _resolve_pair(op: str, a: OperandLike, b: OperandLike) -> Tuple[IBackend, Operand, Operand]:
    a_is = isinstance(a, Operand)
    b_is = isinstance(b, Operand)
    if a_is and b_is:
        backend_a, backend_b = a.backend, b.backend
        if backend_a is not backend_b:
            raise BackendMismatchError(op, backend_a, backend_b)
        return backend_a, a, b
    if a_is and is_scalar(b):
        backend = a.backend
        return backend, a, lift_scalar(backend, b, like=a)
    if b_is and is_scalar(a):
        backend = b.backend
        return backend, lift_scalar(backend, a, like=b), b
    raise TypeError(
        f"{op}: unsupported operand types '{type(a).__name__}' and '{type(b).__name__}'"
    )


def _require_operand(op: str, x: Any) -> Operand:
    if not isinstance(x, Operand):
        raise TypeError(f"{op}: expected an Operand, got '{type(x).__name__}'")
    return x


def normalize_axis(axis: int, ndim: int) -> int:
    """
    Map `axis` into ``[0, ndim)``.

    Raises
    ------
    InvalidAxisError
        If ``axis`` is not in ``[-ndim, ndim)``.
    """
    if not -ndim <= axis < ndim:
        raise InvalidAxisError(axis, ndim)
    return axis + ndim if axis < 0 else axis


# ---------------------------------------------------------------------
# Binary
# ---------------------------------------------------------------------
def add(a: OperandLike, b: OperandLike) -> Operand:
    backend, x, y = _resolve_pair("add", a, b)
    return backend.add(x, y)


def sub(a: OperandLike, b: OperandLike) -> Operand:
    backend, x, y = _resolve_pair("sub", a, b)
    return backend.sub(x, y)


def mul(a: OperandLike, b: OperandLike) -> Operand:
    backend, x, y = _resolve_pair("mul", a, b)
    return backend.mul(x, y)


def div(a: OperandLike, b: OperandLike) -> Operand:
    backend, x, y = _resolve_pair("div", a, b)
    return backend.div(x, y)


def minimum(a: OperandLike, b: OperandLike) -> Operand:
    """
    Elementwise minimum of two operands, or of a scalar and an operand.

    With a scalar on either side the result has the operand's shape.
    """
    backend, x, y = _resolve_pair("minimum", a, b)
    return backend.minimum(x, y)


def maximum(a: OperandLike, b: OperandLike) -> Operand:
    """
    Elementwise maximum of two operands, or of a scalar and an operand.

    With a scalar on either side the result has the operand's shape.
    """
    backend, x, y = _resolve_pair("maximum", a, b)
    return backend.maximum(x, y)


# ---------------------------------------------------------------------
# Unary
# ---------------------------------------------------------------------
def negate(a: Operand) -> Operand:
    x = _require_operand("negate", a)
    return x.backend.negate(x)


def exp(a: Operand) -> Operand:
    x = _require_operand("exp", a)
    return x.backend.exp(x)


def reciprocal(a: Operand) -> Operand:
    x = _require_operand("reciprocal", a)
    return x.backend.reciprocal(x)


# ---------------------------------------------------------------------
# Reductions
# ---------------------------------------------------------------------
def reduce_max(a: Operand, axis: int, keepdims: bool = False) -> Operand:
    x = _require_operand("reduce_max", a)
    return x.backend.reduce_max(x, normalize_axis(axis, x.ndim), keepdims=keepdims)


def reduce_sum(a: Operand, axis: int, keepdims: bool = False) -> Operand:
    x = _require_operand("reduce_sum", a)
    return x.backend.reduce_sum(x, normalize_axis(axis, x.ndim), keepdims=keepdims)
