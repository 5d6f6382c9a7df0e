from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Type, Union

from ...domain._activation import ActivationKind

_ACTIVATION_REGISTRY: dict[str, Type[Any]] = {}


def register_activation(name: Optional[str] = None) -> Callable[[Type[Any]], Type[Any]]:
    """
    Decorator to register an activation class for config deserialization.
    """

    def deco(cls: Type[Any]) -> Type[Any]:
        key = name or cls.__name__
        _ACTIVATION_REGISTRY[key] = cls
        return cls

    return deco


def activation_to_config(kernel: Any) -> dict[str, Any]:
    """
    Convert a kernel into a JSON-serializable node.

    Node format
    -----------
    {
      "type": "Celu",
      "config": {"alpha": 0.5}
    }
    """
    get_cfg = getattr(kernel, "get_config", None)
    cfg = get_cfg() if callable(get_cfg) else {}
    return {"type": kernel.__class__.__name__, "config": cfg}


def activation_from_config(node: Dict[str, Any]) -> Any:
    """
    Rebuild a kernel from a node produced by :func:`activation_to_config`.

    Raises
    ------
    ValueError
        If the node names an unregistered type.
    InvalidParameterError
        If the stored parameters are out of domain.
    """
    type_name = str(node["type"])
    if type_name not in _ACTIVATION_REGISTRY:
        raise ValueError(
            f"Unknown activation type '{type_name}'. "
            f"Register it via @register_activation."
        )

    cls = _ACTIVATION_REGISTRY[type_name]
    cfg = node.get("config", {}) or {}

    from_cfg = getattr(cls, "from_config", None)
    if callable(from_cfg):
        return from_cfg(cfg)
    return cls(**cfg)


def get_activation(kind: Union[ActivationKind, str], **params: Any) -> Any:
    """
    Build a kernel from its kind tag.

    Parameters
    ----------
    kind : ActivationKind or str
        The kind, or its value ("Sigmoid", "Celu", ...). Strings are matched
        case-insensitively.
    **params
        Constructor parameters (e.g., ``alpha=0.5``, ``axis=-1``).
    """
    if isinstance(kind, str):
        matches = [k for k in ActivationKind if k.value.lower() == kind.lower()]
        if not matches:
            raise ValueError(f"Unknown activation kind '{kind}'.")
        kind = matches[0]
    return _ACTIVATION_REGISTRY[kind.value](**params)
