"""
Operand interface definitions.

An operand is a deferred, shape-typed numeric value produced by a backend.
Operands are combined with arithmetic operators; each combination asks the
producing backend for a new operand and never mutates its inputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ._backend import IBackend


@runtime_checkable
class IOperand(Protocol):
    """
    Operand interface.

    Notes
    -----
    - `backend` is a non-owning reference. An operand must not keep its
      backend alive.
    - `value` is the backend-native object (e.g., `np.ndarray` or
      `torch.Tensor`). Only the producing backend should interpret it.
    """

    @property
    def value(self) -> Any: ...

    @property
    def shape(self) -> tuple[int, ...]: ...

    @property
    def dtype(self) -> Any: ...

    @property
    def ndim(self) -> int: ...

    @property
    def backend(self) -> "IBackend": ...
