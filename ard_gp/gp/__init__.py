"""
Gaussian Process Kernel Module

- kernels: SE-ARD covariance function with log-space hyperparameters

Usage:
    >>> from ard_gp.gp import SquaredExponentialARD, SquaredExpARDConfig
    >>>
    >>> kernel = SquaredExponentialARD(input_dim=2, config=SquaredExpARDConfig(signal_variance=2.0))
    >>> k = kernel.evaluate([0.0, 0.0], [1.0, 0.5])
    >>> dk = kernel.grad([0.0, 0.0], [1.0, 0.5])  # (3,) w.r.t. log params
    >>>
    >>> # Optimizers work in log space
    >>> p = kernel.get_params()
    >>> kernel.set_params(p + 0.1 * dk)
"""

from .kernels import (
    SE_ARD,
    DimensionMismatchError,
    # Base class
    Kernel,
    SquaredExpARDConfig,
    SquaredExponentialARD,
    # Factory functions
    create_se_ard_kernel,
)

__all__ = [
    "SE_ARD",
    "DimensionMismatchError",
    # Kernels
    "Kernel",
    "SquaredExpARDConfig",
    "SquaredExponentialARD",
    "create_se_ard_kernel",
]
