"""
Realized, read-only tensor.

`Tensor` is the value callers hand to an activation kernel and receive back
from it. It wraps a NumPy array whose write flag is cleared, so neither the
shape nor the contents can change after creation. Backends produce tensors
through `materialize` and accept them through `constant`.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import numpy as np

Number = Union[int, float]


class Tensor:
    """
    Concrete multi-dimensional array with a fixed shape and element type.

    Parameters
    ----------
    data : Any
        Array-like input (NumPy array, nested sequences, scalar, or another
        `Tensor`). The data is always copied.
    dtype : Any, optional
        Element type. Defaults to the input's dtype for arrays, and to
        float32 for Python scalars and sequences.

    Notes
    -----
    - `__slots__` prevents attribute assignment on instances.
    - The stored array is non-writeable; `to_numpy()` returns that read-only
      array without copying.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any, dtype: Optional[Any] = None) -> None:
        if isinstance(data, Tensor):
            data = data._data
        if dtype is None and not isinstance(data, np.ndarray):
            dtype = np.float32
        arr = np.array(data, dtype=dtype, copy=True)
        arr.setflags(write=False)
        self._data = arr

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> "Tensor":
        """Build a tensor from a NumPy array, keeping its dtype."""
        return cls(np.asarray(arr))

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(int(d) for d in self._data.shape)

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def ndim(self) -> int:
        return int(self._data.ndim)

    @property
    def size(self) -> int:
        return int(self._data.size)

    def to_numpy(self) -> np.ndarray:
        """
        Return the tensor contents.

        Returns
        -------
        np.ndarray
            The underlying read-only array. Writing to it raises `ValueError`.
        """
        return self._data

    def tolist(self) -> Any:
        return self._data.tolist()

    def item(self) -> Number:
        """
        Return the single element as a Python number.

        Raises
        ------
        ValueError
            If the tensor does not hold exactly one element.
        """
        if self._data.size != 1:
            raise ValueError(
                f"item() requires a one-element tensor, got shape {self.shape}"
            )
        return self._data.item()

    def __array__(self, dtype=None, copy=None):
        if dtype is not None:
            return self._data.astype(dtype)
        if copy:
            return self._data.copy()
        return self._data

    def __len__(self) -> int:
        if self._data.ndim == 0:
            raise TypeError("len() of a 0-d tensor")
        return int(self._data.shape[0])

    def __repr__(self) -> str:
        return f"Tensor(shape={self.shape}, dtype={self.dtype}, data={self._data.tolist()!r})"
