"""
Utilities Module

- config_loader: YAML configuration and kernel state files
- logging_utils: Logging setup for scripts
"""

from .config_loader import (
    kernel_config_from_dict,
    load_config,
    load_kernel_config,
    load_kernel_state,
    save_kernel_state,
)
from .logging_utils import setup_logging

__all__ = [
    # Config
    "kernel_config_from_dict",
    "load_config",
    "load_kernel_config",
    "load_kernel_state",
    "save_kernel_state",
    # Logging
    "setup_logging",
]
