"""
ARD GP Kernel

Squared exponential covariance function with Automatic Relevance
Determination for Gaussian Process regression, plus the pluggable
strategy that decides whether its hyperparameters get re-estimated.

Modules:
    gp: SE-ARD kernel with log-space hyperparameters and gradients
    learning: Hyperparameter optimization strategies
    utils: Config/state files and logging setup
"""

__version__ = "0.1.0"
__author__ = "ARD GP Kernel Team"

# Convenience imports
from . import gp, learning, utils

__all__ = [
    "gp",
    "learning",
    "utils",
]
