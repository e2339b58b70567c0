import logging

import numpy as np
import pytest

from ard_gp.gp import DimensionMismatchError, SquaredExpARDConfig, SquaredExponentialARD
from ard_gp.utils import (
    kernel_config_from_dict,
    load_config,
    load_kernel_config,
    load_kernel_state,
    save_kernel_state,
    setup_logging,
)


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_config(path) == {}


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")

    with pytest.raises(ValueError):
        load_config(path)


def test_kernel_config_nested_section(tmp_path):
    path = tmp_path / "kernel.yaml"
    path.write_text("kernel:\n  signal_variance: 2.5\n  rank: 0\n")

    config = load_kernel_config(path)
    assert config == SquaredExpARDConfig(signal_variance=2.5, rank=0)


def test_kernel_config_flat_and_defaults():
    assert kernel_config_from_dict({"signal_variance": 3.0}) == SquaredExpARDConfig(signal_variance=3.0)
    assert kernel_config_from_dict({}) == SquaredExpARDConfig()
    assert kernel_config_from_dict({"kernel": None}) == SquaredExpARDConfig()


def test_kernel_config_exponent_notation(tmp_path):
    path = tmp_path / "kernel.yaml"
    path.write_text("kernel:\n  signal_variance: 1e-3\n  rank: \"0\"\n")

    config = load_kernel_config(path)
    assert config == SquaredExpARDConfig(signal_variance=1e-3, rank=0)
    assert isinstance(config.signal_variance, float)

    kernel = SquaredExponentialARD(input_dim=2, config=config)
    assert kernel.signal_variance == pytest.approx(1e-3)


def test_kernel_config_invalid_value():
    with pytest.raises(ValueError, match="signal_variance"):
        kernel_config_from_dict({"kernel": {"signal_variance": "large"}})
    with pytest.raises(ValueError, match="rank"):
        kernel_config_from_dict({"rank": [1]})


def test_kernel_config_unknown_key():
    with pytest.raises(ValueError, match="lengthscale"):
        kernel_config_from_dict({"kernel": {"lengthscale": 1.0}})


def test_state_file_round_trip(tmp_path):
    kernel = SquaredExponentialARD(input_dim=3)
    kernel.set_params([0.25, -1e-5, 3.75, -0.125])

    path = tmp_path / "nested" / "state.yaml"
    save_kernel_state(kernel, path)
    restored = load_kernel_state(path)

    assert restored.input_dim == 3
    np.testing.assert_array_equal(restored.get_params(), kernel.get_params())
    assert restored.evaluate([0.0, 0.0, 0.0], [1.0, 2.0, 3.0]) == kernel.evaluate([0.0, 0.0, 0.0], [1.0, 2.0, 3.0])


def test_state_file_length_mismatch(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("input_dim: 2\nlog_params: [0.0, 0.0, 0.0, 0.0]\n")

    with pytest.raises(DimensionMismatchError):
        load_kernel_state(path)


def test_setup_logging_levels():
    try:
        setup_logging("warning")
        assert logging.getLogger("ard_gp").level == logging.WARNING
        setup_logging(logging.DEBUG)
        assert logging.getLogger("ard_gp").level == logging.DEBUG
    finally:
        logging.getLogger("ard_gp").setLevel(logging.NOTSET)


def test_setup_logging_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("chatty")
