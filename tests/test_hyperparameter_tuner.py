import logging
import pickle

import numpy as np
import pytest

from ard_gp.gp import SquaredExponentialARD
from ard_gp.learning import (
    HyperparameterOptimizer,
    NoLFOpt,
    create_hyperparameter_optimizer,
)


class FixedKernelModel:
    """Stand-in for a GP model: owns a kernel, a strategy and some fitted state."""

    def __init__(self, kernel, strategy):
        self.kernel = kernel
        self.strategy = strategy
        self.X_train = np.arange(6.0).reshape(3, 2)
        self.y_train = np.array([0.1, -0.4, 2.0])
        self.noise_variance = 1e-4

    def fit(self):
        self.strategy.tune(self)
        return self


class GradientStepOptimizer:
    """Single gradient-ascent step on Σ k(xᵢ, xⱼ); only used to exercise the interface."""

    def __init__(self, step=0.1):
        self.step = step

    def tune(self, model):
        kernel = model.kernel
        X = model.X_train
        g = np.zeros(kernel.n_params)
        for a in X:
            for b in X:
                g += kernel.grad(a, b)
        kernel.set_params(kernel.get_params() + self.step * g)


@pytest.fixture
def model():
    kernel = SquaredExponentialARD(input_dim=2)
    kernel.set_params([0.3, -0.7, 0.2])
    return FixedKernelModel(kernel, NoLFOpt())


def test_noop_leaves_params_unchanged(model):
    before = model.kernel.get_params()
    model.strategy.tune(model)

    np.testing.assert_array_equal(model.kernel.get_params(), before)


def test_noop_leaves_model_byte_identical(model):
    before = pickle.dumps(model)
    NoLFOpt().tune(model)

    assert pickle.dumps(model) == before


def test_noop_through_fit_cycle(model):
    before = pickle.dumps(model)
    for _ in range(3):
        model.fit()

    assert pickle.dumps(model) == before


def test_noop_logs_at_debug(model, caplog):
    caplog.set_level(logging.DEBUG, logger="ard_gp.learning.hyperparameter_tuner")
    NoLFOpt().tune(model)

    assert any("disabled" in r.getMessage() for r in caplog.records)


def test_strategies_satisfy_protocol():
    assert isinstance(NoLFOpt(), HyperparameterOptimizer)
    assert isinstance(GradientStepOptimizer(), HyperparameterOptimizer)
    assert not isinstance(object(), HyperparameterOptimizer)


def test_writing_strategy_keeps_kernel_valid(model):
    model.strategy = GradientStepOptimizer(step=0.05)
    before = model.kernel.get_params()
    model.fit()

    kernel = model.kernel
    p = kernel.get_params()
    assert not np.array_equal(p, before)
    assert kernel.n_params == 3
    np.testing.assert_allclose(kernel.lengthscales, np.exp(p[:2]))
    assert kernel.signal_variance == pytest.approx(np.exp(2 * p[2]))
    assert np.all(kernel.lengthscales > 0)


def test_factory():
    strategy = create_hyperparameter_optimizer("none")
    assert isinstance(strategy, NoLFOpt)
    assert isinstance(create_hyperparameter_optimizer(), NoLFOpt)


def test_factory_unknown_method():
    with pytest.raises(ValueError, match="Unknown method"):
        create_hyperparameter_optimizer("cma-es")
