"""
Stateless configuration mixin.

This module defines `StatelessConfigMixin`, a helper mixin for activation
kernels whose behavior does not depend on any configurable parameter
(Sigmoid, Tanh, Relu).

It provides no-op serialization hooks so that parameter-free kernels take
part in `activation_to_config` / `activation_from_config` round trips without
special cases.
"""

from typing import Any, Dict
from typing_extensions import Self


class StatelessConfigMixin:
    """
    Mixin providing configuration hooks for parameter-free kernels.

    The mixin defines no instance attributes, so it can be combined with
    frozen dataclasses without introducing mutable state.
    """

    __slots__ = ()

    def get_config(self) -> Dict[str, Any]:
        """
        Return a JSON-serializable configuration dictionary.

        Returns
        -------
        Dict[str, Any]
            An empty dictionary; no parameters are needed to rebuild the
            kernel.
        """
        return {}

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> Self:
        """
        Reconstruct the kernel from a configuration dictionary.

        Parameters
        ----------
        cfg : Dict[str, Any]
            Configuration dictionary (unused).

        Returns
        -------
        StatelessConfigMixin
            A newly constructed kernel.
        """
        return cls()
