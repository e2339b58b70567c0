"""
Kernel Functions for Gaussian Processes

Implements the squared exponential covariance function with Automatic
Relevance Determination (ARD), intended to be driven by a likelihood
optimizer:
    k(x, x') = σ² exp(-0.5 Σᵢ (xᵢ - x'ᵢ)² / lᵢ²)

where σ² is the signal variance and lᵢ are per-dimension lengthscales.

Hyperparameters live in log space,
    p = [log l₁, ..., log l_D, log σ]
so an optimizer can move freely in ℝ^{D+1} while lᵢ = exp(pᵢ) and
σ² = exp(2 p_D) stay strictly positive.

Reference:
    Rasmussen, C. E., & Williams, C. K. I. (2006). Gaussian Processes
    for Machine Learning. MIT Press, p. 106.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.spatial.distance import cdist

logger = logging.getLogger(__name__)


class DimensionMismatchError(ValueError):
    """Input or hyperparameter vector has the wrong length for this kernel."""


# =============================================================================
# Base Kernel Class
# =============================================================================


class Kernel(ABC):
    """
    Abstract base class for kernel functions.

    All kernels implement:
    - evaluate(x1, x2) / grad(x1, x2): covariance of two points and its gradient
    - __call__(X1, X2): Compute kernel matrix K(X1, X2)
    - diagonal(X): Compute diagonal k(xᵢ, xᵢ) efficiently
    - gradients(X1, X2): Compute gradient matrices w.r.t. hyperparameters
    """

    @abstractmethod
    def evaluate(self, x1: ArrayLike, x2: ArrayLike) -> float:
        """Covariance k(x1, x2) between two input vectors."""

    @abstractmethod
    def grad(self, x1: ArrayLike, x2: ArrayLike) -> NDArray:
        """Gradient of k(x1, x2) w.r.t. the hyperparameters, ordered as get_params()."""

    @abstractmethod
    def __call__(
        self,
        X1: ArrayLike,
        X2: Optional[ArrayLike] = None,
    ) -> NDArray:
        """
        Compute kernel matrix.

        Args:
            X1: First set of points (N1, D)
            X2: Second set of points (N2, D). If None, compute K(X1, X1).

        Returns:
            Kernel matrix (N1, N2)
        """

    @abstractmethod
    def diagonal(self, X: ArrayLike) -> NDArray:
        """
        Compute diagonal of kernel matrix k(xᵢ, xᵢ).

        Args:
            X: Input points (N, D)

        Returns:
            Diagonal values (N,)
        """

    @abstractmethod
    def gradients(
        self,
        X1: ArrayLike,
        X2: Optional[ArrayLike] = None,
    ) -> Dict[str, NDArray]:
        """
        Compute gradients of kernel matrix w.r.t. hyperparameters.

        Returns:
            Dictionary mapping parameter names to gradient matrices
        """

    @property
    @abstractmethod
    def n_params(self) -> int:
        """Number of hyperparameters."""

    @property
    @abstractmethod
    def param_names(self) -> List[str]:
        """Names of hyperparameters."""

    @abstractmethod
    def get_params(self) -> NDArray:
        """Get hyperparameters as array (in log space for positive params)."""

    @abstractmethod
    def set_params(self, params: ArrayLike) -> None:
        """Set hyperparameters from array (in log space for positive params)."""


# =============================================================================
# Squared Exponential Kernel with ARD
# =============================================================================


@dataclass
class SquaredExpARDConfig:
    """Initial settings for SquaredExponentialARD."""

    # Initial signal variance σ²
    signal_variance: float = 1.0

    # Columns of the low-rank Λ factor in M = ΛΛᵀ + diag(l⁻²).
    # Only the diagonal case (rank 0) is implemented.
    rank: int = 0


class SquaredExponentialARD(Kernel):
    """
    Squared Exponential (RBF) kernel with Automatic Relevance Determination.

    k(x, x') = σ² exp(-0.5 Σᵢ (xᵢ - x'ᵢ)² / lᵢ²)

    ARD means each input dimension has its own lengthscale, allowing
    the GP to automatically determine which features are relevant.

    The log-space vector p = [log l₀, ..., log l_{D-1}, log σ] is the canonical
    stored state; lengthscales and signal variance are derived from it on
    every set_params() call, which always replaces the full vector.

    Example:
        >>> kernel = SquaredExponentialARD(input_dim=3)
        >>> kernel.evaluate([0.0, 0.0, 0.0], [1.0, 0.0, 0.0])  # exp(-0.5)
        >>> kernel.grad([0.0, 0.0, 0.0], [1.0, 0.0, 0.0])      # (4,)
        >>> K = kernel(np.random.randn(10, 3))                  # (10, 10)
    """

    def __init__(
        self,
        input_dim: int = 1,
        config: Optional[SquaredExpARDConfig] = None,
    ):
        """
        Initialize SE-ARD kernel.

        Lengthscales start at 1.0; the signal variance starts at
        config.signal_variance.

        Args:
            input_dim: Number of input dimensions D
            config: Initial settings (defaults to unit signal variance)
        """
        config = config or SquaredExpARDConfig()

        if input_dim < 1:
            raise ValueError(f"input_dim must be >= 1, got {input_dim}")
        if not config.signal_variance > 0:
            raise ValueError(f"signal_variance must be positive, got {config.signal_variance}")
        if config.rank < 0:
            raise ValueError(f"rank must be >= 0, got {config.rank}")
        if config.rank != 0:
            raise NotImplementedError(f"Low-rank ARD (rank={config.rank}) is not supported; use rank=0")

        self._input_dim = int(input_dim)

        params = np.zeros(self._input_dim + 1)
        params[-1] = 0.5 * np.log(config.signal_variance)  # log σ
        self.set_params(params)

        logger.debug("Created %r", self)

    @classmethod
    def from_state_dict(cls, state: Dict[str, Any]) -> "SquaredExponentialARD":
        """Rebuild a kernel from the output of state_dict()."""
        kernel = cls(input_dim=int(state["input_dim"]))
        kernel.set_params(state["log_params"])
        return kernel

    def state_dict(self) -> Dict[str, Any]:
        """
        Serializable state.

        The log-space vector is the canonical form; natural-space values are
        re-derived on load.
        """
        return {
            "input_dim": self._input_dim,
            "log_params": self._log_params.tolist(),
        }

    @property
    def input_dim(self) -> int:
        """Number of input dimensions D."""
        return self._input_dim

    @property
    def signal_variance(self) -> float:
        """Signal variance σ²."""
        return self._signal_variance

    @property
    def lengthscales(self) -> NDArray:
        """Lengthscales l (one per input dimension)."""
        return self._lengthscales.copy()

    @property
    def n_params(self) -> int:
        """Number of hyperparameters (D lengthscales + signal std)."""
        return self._input_dim + 1

    @property
    def param_names(self) -> List[str]:
        names = [f"log_lengthscale_{i}" for i in range(self._input_dim)]
        names.append("log_signal_std")
        return names

    def get_params(self) -> NDArray:
        """
        Get hyperparameters in log space.

        Returns:
            Copy of [log(l₀), ..., log(l_{D-1}), log(σ)]
        """
        return self._log_params.copy()

    def set_params(self, params: ArrayLike) -> None:
        """
        Set hyperparameters from a log-space vector.

        Args:
            params: [log(l₀), ..., log(l_{D-1}), log(σ)], length D+1

        Raises:
            DimensionMismatchError: if params is not a 1-D vector of D+1 entries
        """
        params = np.array(params, dtype=float)
        if params.ndim != 1 or params.shape[0] != self.n_params:
            raise DimensionMismatchError(
                f"Expected a vector of {self.n_params} hyperparameters (input_dim + 1), got shape {params.shape}"
            )

        self._log_params = params
        self._lengthscales = np.exp(params[: self._input_dim])
        self._signal_variance = float(np.exp(2.0 * params[self._input_dim]))

        logger.debug(
            "Set hyperparameters: lengthscales=%s, signal_variance=%.6g",
            self._lengthscales,
            self._signal_variance,
        )

    def _check_point(self, x: ArrayLike, name: str) -> NDArray:
        x = np.asarray(x, dtype=float)
        if x.ndim != 1 or x.shape[0] != self._input_dim:
            raise DimensionMismatchError(f"{name} must be a vector of length {self._input_dim}, got shape {x.shape}")
        return x

    def _check_points(self, X: ArrayLike, name: str) -> NDArray:
        X = np.atleast_2d(np.asarray(X, dtype=float))
        if X.ndim != 2 or X.shape[1] != self._input_dim:
            raise DimensionMismatchError(f"{name} must have shape (N, {self._input_dim}), got {X.shape}")
        return X

    def _scaled_sq_diffs(self, x1: ArrayLike, x2: ArrayLike) -> NDArray:
        """zᵢ = ((x1ᵢ - x2ᵢ) / lᵢ)², divided before squaring."""
        x1 = self._check_point(x1, "x1")
        x2 = self._check_point(x2, "x2")
        return ((x1 - x2) / self._lengthscales) ** 2

    def evaluate(self, x1: ArrayLike, x2: ArrayLike) -> float:
        """
        Covariance between two points.

        k(x1, x2) = σ² exp(-0.5 Σᵢ ((x1ᵢ - x2ᵢ) / lᵢ)²)

        Args:
            x1: First input (D,)
            x2: Second input (D,)

        Returns:
            Scalar covariance; equals σ² when x1 == x2
        """
        z = self._scaled_sq_diffs(x1, x2)
        return self._signal_variance * float(np.exp(-0.5 * np.sum(z)))

    def grad(self, x1: ArrayLike, x2: ArrayLike) -> NDArray:
        """
        Gradient of k(x1, x2) w.r.t. the log-space hyperparameters.

        - ∂k/∂(log lᵢ) = k · (x1ᵢ - x2ᵢ)² / lᵢ²
        - ∂k/∂(log σ)  = 2k   (σ² = exp(2 log σ))

        Args:
            x1: First input (D,)
            x2: Second input (D,)

        Returns:
            Gradient (D+1,) in the same order as get_params()
        """
        z = self._scaled_sq_diffs(x1, x2)
        k = self._signal_variance * float(np.exp(-0.5 * np.sum(z)))

        g = np.empty(self.n_params)
        g[: self._input_dim] = z * k
        g[self._input_dim] = 2.0 * k
        return g

    def _compute_scaled_distance_sq(
        self,
        X1: NDArray,
        X2: Optional[NDArray] = None,
    ) -> NDArray:
        """
        Squared scaled Euclidean distance.

        r²(x, x') = Σᵢ (xᵢ - x'ᵢ)² / lᵢ²

        Args:
            X1: (N1, D)
            X2: (N2, D) or None

        Returns:
            Squared distances (N1, N2)
        """
        X1_scaled = X1 / self._lengthscales
        X2_scaled = X1_scaled if X2 is None else X2 / self._lengthscales
        return cdist(X1_scaled, X2_scaled, metric="sqeuclidean")

    def __call__(
        self,
        X1: ArrayLike,
        X2: Optional[ArrayLike] = None,
    ) -> NDArray:
        """
        Compute kernel matrix K(X1, X2).

        K[i,j] = σ² exp(-0.5 * r²(x1ᵢ, x2ⱼ))

        Args:
            X1: First inputs (N1, D)
            X2: Second inputs (N2, D). If None, uses X2 = X1.

        Returns:
            Kernel matrix (N1, N2)
        """
        X1 = self._check_points(X1, "X1")
        if X2 is not None:
            X2 = self._check_points(X2, "X2")

        dist_sq = self._compute_scaled_distance_sq(X1, X2)
        return self._signal_variance * np.exp(-0.5 * dist_sq)

    def diagonal(self, X: ArrayLike) -> NDArray:
        """
        Compute diagonal k(xᵢ, xᵢ) = σ².

        For stationary kernels, the diagonal is constant.
        """
        X = self._check_points(X, "X")
        return np.full(X.shape[0], self._signal_variance)

    def gradients(
        self,
        X1: ArrayLike,
        X2: Optional[ArrayLike] = None,
    ) -> Dict[str, NDArray]:
        """
        Compute gradients of kernel matrix w.r.t. log hyperparameters.

        - ∂K/∂(log lᵢ) = K ⊙ (x1ᵢ - x2ᵢ)² / lᵢ²
        - ∂K/∂(log σ)  = 2K

        Args:
            X1: First inputs (N1, D)
            X2: Second inputs (N2, D). If None, uses X2 = X1.

        Returns:
            Dictionary keyed by param_names, each (N1, N2)
        """
        X1 = self._check_points(X1, "X1")
        X2 = X1 if X2 is None else self._check_points(X2, "X2")

        K = self(X1, X2)

        grads = {}
        for i in range(self._input_dim):
            diff_i = ((X1[:, i : i + 1] - X2[:, i : i + 1].T) / self._lengthscales[i]) ** 2
            grads[f"log_lengthscale_{i}"] = K * diff_i
        grads["log_signal_std"] = 2.0 * K

        return grads

    def __repr__(self) -> str:
        return (
            f"SquaredExponentialARD("
            f"input_dim={self._input_dim}, "
            f"signal_variance={self._signal_variance:.4f}, "
            f"lengthscales={self._lengthscales})"
        )


# Alias for convenience
SE_ARD = SquaredExponentialARD


# =============================================================================
# Factory Functions
# =============================================================================


def create_se_ard_kernel(
    input_dim: int,
    config: Optional[SquaredExpARDConfig] = None,
) -> SquaredExponentialARD:
    """
    Create SE kernel with ARD.

    Args:
        input_dim: Number of input dimensions
        config: Initial settings (signal variance, rank)

    Returns:
        SquaredExponentialARD kernel
    """
    return SquaredExponentialARD(input_dim=input_dim, config=config)
