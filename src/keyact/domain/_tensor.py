"""
Tensor interface definitions.

This module defines the domain-level interface for realized tensors using
structural typing. A realized tensor is the read-only result of materializing
an operand: a concrete multi-dimensional array with a fixed shape and element
type.

Notes
-----
The interface deliberately excludes any mutation method. Tensors are read-only
from the caller's perspective; new tensors are produced by applying kernels,
never by writing into existing ones.
"""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

Number = Union[int, float]


@runtime_checkable
class ITensor(Protocol):
    """
    Realized tensor interface.

    An `ITensor` is a concrete array whose shape and dtype are fixed at
    creation. Backends consume it (via ``constant``) and produce it (via
    ``materialize``).
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the shape of the tensor.

        Returns
        -------
        tuple[int, ...]
            The tensor's shape.
        """
        ...

    @property
    def dtype(self) -> Any:
        """
        Return the element type of the tensor.

        Returns
        -------
        Any
            A `numpy.dtype` describing the element type.
        """
        ...

    @property
    def ndim(self) -> int:
        """Return the number of dimensions."""
        ...

    def to_numpy(self) -> Any:
        """
        Return the tensor contents as a read-only NumPy array.

        Returns
        -------
        Any
            A non-writeable `np.ndarray` view of the tensor data.
        """
        ...

    def item(self) -> Number:
        """
        Return the single element of a one-element tensor as a Python number.

        Raises
        ------
        ValueError
            If the tensor holds more than one element.
        """
        ...
