#!/usr/bin/env python3
"""
SE-ARD Kernel Demo

Evaluates the kernel and its log-space gradient for two points, and
optionally saves the kernel state.

Usage:
    python scripts/demo_kernel.py --x1 0 --x2 1
    python scripts/demo_kernel.py --x1 0 0 --x2 1 2 --log-params 0 0.5 0
    python scripts/demo_kernel.py --x1 0 --x2 1 --config kernel.yaml --save state.yaml
"""

import argparse
import logging

import numpy as np

from ard_gp.gp import SquaredExponentialARD
from ard_gp.learning import create_hyperparameter_optimizer
from ard_gp.utils import load_kernel_config, save_kernel_state, setup_logging

logger = logging.getLogger(__name__)


class _Model:
    """Minimal stand-in for a GP model owning a kernel."""

    def __init__(self, kernel):
        self.kernel = kernel


def main():
    parser = argparse.ArgumentParser(description="Evaluate the SE-ARD kernel")
    parser.add_argument("--x1", type=float, nargs="+", required=True, help="First input vector")
    parser.add_argument("--x2", type=float, nargs="+", required=True, help="Second input vector")
    parser.add_argument("--log-params", type=float, nargs="+", help="Log-space hyperparameters (D+1)")
    parser.add_argument("--config", type=str, help="YAML kernel config")
    parser.add_argument("--tuner", type=str, default="none", help="Hyperparameter optimization method")
    parser.add_argument("--save", type=str, help="Write kernel state to this YAML file")
    parser.add_argument("--log-level", type=str, default="INFO")
    args = parser.parse_args()

    setup_logging(args.log_level)

    config = load_kernel_config(args.config) if args.config else None
    kernel = SquaredExponentialARD(input_dim=len(args.x1), config=config)
    if args.log_params is not None:
        kernel.set_params(args.log_params)

    model = _Model(kernel)
    create_hyperparameter_optimizer(args.tuner).tune(model)

    k = kernel.evaluate(args.x1, args.x2)
    g = kernel.grad(args.x1, args.x2)

    print(f"Kernel:   {kernel}")
    print(f"k(x1,x2): {k:.6f}")
    print(f"grad:     {np.array2string(g, precision=6)}")

    if args.save:
        save_kernel_state(kernel, args.save)


if __name__ == "__main__":
    main()
