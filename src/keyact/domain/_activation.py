"""
Activation kernel interface and kind tags.

`IActivation` is the single capability every kernel provides: turn an input
tensor into an output tensor through an explicit backend handle.
`ActivationKind` is the explicit tag used to name and construct kernels
without relying on class identity (e.g., from configuration).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Protocol, runtime_checkable

from ._backend import IBackend
from ._operand import IOperand
from ._tensor import ITensor


class ActivationKind(Enum):
    """
    Enumeration of the available activation kernels.

    The value of each member is the registry name of the kernel class.
    """

    SIGMOID = "Sigmoid"
    TANH = "Tanh"
    RELU = "Relu"
    SWISH = "Swish"
    CELU = "Celu"
    SOFTMAX = "Softmax"


@runtime_checkable
class IActivation(Protocol):
    """
    Activation kernel contract.

    Implementations are immutable after construction and hold no state that
    evolves across calls, so `apply` is a pure function of its input.
    """

    @property
    def kind(self) -> ActivationKind: ...

    def apply(self, backend: IBackend, x: Any) -> ITensor:
        """Apply the kernel to `x` using `backend` and realize the result."""
        ...

    def forward(self, x: IOperand) -> IOperand:
        """Build the kernel expression over an operand without realizing it."""
        ...

    def get_config(self) -> Dict[str, Any]: ...
