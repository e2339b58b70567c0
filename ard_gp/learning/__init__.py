"""
Hyperparameter Learning Module

The GP model owns one optimization strategy and calls tune(model) once
per fit cycle. Strategies use the kernel's get_params / grad /
set_params triad and must leave the kernel in a valid state.

Components:
    hyperparameter_tuner: Strategy interface and the no-op strategy

Usage:
    >>> from ard_gp.learning import create_hyperparameter_optimizer
    >>>
    >>> strategy = create_hyperparameter_optimizer("none")
    >>> strategy.tune(gp_model)  # hyperparameters stay fixed
"""

from .hyperparameter_tuner import (
    HyperparameterOptimizer,
    NoLFOpt,
    TunableKernel,
    TunableModel,
    create_hyperparameter_optimizer,
)

__all__ = [
    # Strategy interface
    "HyperparameterOptimizer",
    "NoLFOpt",
    "TunableKernel",
    "TunableModel",
    "create_hyperparameter_optimizer",
]
