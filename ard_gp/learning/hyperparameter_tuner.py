"""
GP Hyperparameter Optimization Strategies

The owning GP model holds one strategy object and calls
``strategy.tune(model)`` once per fit cycle. A strategy may read the
kernel's log-space hyperparameters and gradient and write back a new
vector through ``kernel.set_params``; whatever it does, the kernel must
be left in a valid state when ``tune`` returns.

Strategies are selected by composition, not inheritance: any object with
a ``tune(model)`` method satisfies ``HyperparameterOptimizer``.

Available methods:
    "none": NoLFOpt, keeps the hyperparameters fixed
"""

from __future__ import annotations

import logging
from typing import Dict, Protocol, Type, runtime_checkable

from numpy.typing import ArrayLike, NDArray

logger = logging.getLogger(__name__)


class TunableKernel(Protocol):
    """Kernel surface a strategy is allowed to use."""

    @property
    def n_params(self) -> int: ...

    def get_params(self) -> NDArray: ...

    def set_params(self, params: ArrayLike) -> None: ...

    def grad(self, x1: ArrayLike, x2: ArrayLike) -> NDArray: ...


class TunableModel(Protocol):
    """GP model as seen by a strategy: something that owns a kernel."""

    kernel: TunableKernel


@runtime_checkable
class HyperparameterOptimizer(Protocol):
    """Capability invoked by the GP model after (re)fitting its data."""

    def tune(self, model: TunableModel) -> None: ...


class NoLFOpt:
    """
    Strategy that performs no likelihood optimization.

    Leaves the model's kernel hyperparameters, and every other piece of
    model state, exactly as they were. Use it when the kernel is fixed or
    its hyperparameters are set once at construction.

    Example:
        >>> strategy = NoLFOpt()
        >>> strategy.tune(gp_model)  # gp_model unchanged
    """

    def tune(self, model: TunableModel) -> None:
        logger.debug("Hyperparameter tuning disabled; keeping current kernel parameters")

    def __repr__(self) -> str:
        return "NoLFOpt()"


_OPTIMIZERS: Dict[str, Type] = {
    "none": NoLFOpt,
}


def create_hyperparameter_optimizer(method: str = "none") -> HyperparameterOptimizer:
    """
    Create a hyperparameter optimization strategy by name.

    Args:
        method: Strategy name (currently only "none")

    Returns:
        Strategy instance exposing tune(model)
    """
    try:
        cls = _OPTIMIZERS[method]
    except KeyError:
        raise ValueError(f"Unknown method: {method}. Available: {sorted(_OPTIMIZERS)}") from None
    return cls()
