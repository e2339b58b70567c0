"""
Configuration and Kernel State Files

YAML helpers for:
1. Loading kernel settings into SquaredExpARDConfig
2. Saving/restoring kernel hyperparameters

Kernel state is stored in log space (the kernel's canonical
representation). Example state file:

    input_dim: 2
    log_params: [0.0, -0.5, 0.1]

Example config file:

    kernel:
      signal_variance: 2.0
      rank: 0
"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from ..gp.kernels import SquaredExpARDConfig, SquaredExponentialARD

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# PyYAML (YAML 1.1) loads exponent floats without a dot, e.g. 1e-3, as strings
_FIELD_TYPES = {
    "signal_variance": float,
    "rank": int,
}


def load_config(path: PathLike) -> Dict[str, Any]:
    """
    Load a YAML file.

    Args:
        path: File path

    Returns:
        Parsed mapping ({} for an empty file)
    """
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at top level of {path}, got {type(data).__name__}")
    return data


def kernel_config_from_dict(data: Dict[str, Any]) -> SquaredExpARDConfig:
    """
    Build a SquaredExpARDConfig from a mapping.

    Accepts the fields directly or nested under a "kernel" section.
    """
    section = data.get("kernel", data) or {}
    known = {f.name for f in fields(SquaredExpARDConfig)}
    unknown = set(section) - known
    if unknown:
        raise ValueError(f"Unknown kernel config keys: {sorted(unknown)}")

    values = {}
    for key, value in section.items():
        try:
            values[key] = _FIELD_TYPES[key](value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid value for kernel config key '{key}': {value!r}") from e

    return SquaredExpARDConfig(**values)


def load_kernel_config(path: PathLike) -> SquaredExpARDConfig:
    """Load SquaredExpARDConfig from a YAML file."""
    return kernel_config_from_dict(load_config(path))


def save_kernel_state(kernel: SquaredExponentialARD, path: PathLike) -> None:
    """
    Write kernel hyperparameters (log space) to YAML.

    Args:
        kernel: Kernel to save
        path: Output file
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(kernel.state_dict(), f, default_flow_style=None)

    logger.info("Saved kernel state to %s", path)


def load_kernel_state(path: PathLike) -> SquaredExponentialARD:
    """Rebuild a kernel from a file written by save_kernel_state()."""
    return SquaredExponentialARD.from_state_dict(load_config(path))
