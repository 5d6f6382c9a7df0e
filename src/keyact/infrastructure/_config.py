"""
Runtime configuration.

Resolution order (later wins):

1. built-in defaults (``backend="numpy"``, ``dtype="float32"``),
2. a YAML mapping read from ``path`` or ``$KEYACT_CONFIG``,
3. the environment variables ``$KEYACT_BACKEND`` and ``$KEYACT_DTYPE``.

Configuration is resolved on demand (the default-backend slot calls
:func:`load_config` the first time it is read), never at import time.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..domain._errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "KEYACT_CONFIG"
BACKEND_ENV = "KEYACT_BACKEND"
DTYPE_ENV = "KEYACT_DTYPE"

_DTYPES = ("float32", "float64")


@dataclass(frozen=True)
class RuntimeConfig:
    """
    Process-level settings used to build the default backend.

    Attributes
    ----------
    backend : str
        Registry name of the default backend.
    dtype : str
        Default element type, "float32" or "float64".
    """

    backend: str = "numpy"
    dtype: str = "float32"

    def __post_init__(self) -> None:
        if not isinstance(self.backend, str) or not self.backend:
            raise ConfigError(f"backend must be a non-empty string, got {self.backend!r}")
        if self.dtype not in _DTYPES:
            raise ConfigError(f"dtype must be one of {_DTYPES}, got {self.dtype!r}")
        object.__setattr__(self, "backend", self.backend.lower())


def load_yaml_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a YAML configuration mapping.

    Returns an empty mapping if the file does not exist.

    Raises
    ------
    ConfigError
        If the file is not valid YAML or its top level is not a mapping.
    """
    cfg_path = Path(path)
    if not cfg_path.exists():
        logger.debug("No config found at %s. Using defaults.", cfg_path)
        return {}
    try:
        with open(cfg_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {cfg_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {cfg_path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def load_config(
    path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> RuntimeConfig:
    """
    Resolve the runtime configuration.

    Parameters
    ----------
    path : str or Path, optional
        YAML file to read. Defaults to ``$KEYACT_CONFIG`` when set.
    environ : Mapping[str, str], optional
        Environment to read overrides from. Defaults to ``os.environ``.

    Returns
    -------
    RuntimeConfig
        The merged configuration.
    """
    env = os.environ if environ is None else environ
    cfg = RuntimeConfig()

    yaml_path = path if path is not None else env.get(CONFIG_ENV)
    if yaml_path:
        known = {f.name for f in fields(RuntimeConfig)}
        raw = load_yaml_config(yaml_path)
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys in %s: %s", yaml_path, unknown)
        cfg = replace(cfg, **{k: v for k, v in raw.items() if k in known})

    overrides: Dict[str, Any] = {}
    if env.get(BACKEND_ENV):
        overrides["backend"] = env[BACKEND_ENV]
    if env.get(DTYPE_ENV):
        overrides["dtype"] = env[DTYPE_ENV]
    if overrides:
        cfg = replace(cfg, **overrides)

    logger.debug("Resolved runtime config: %s", cfg)
    return cfg
