"""
Shared fixtures for integration tests.
"""

import pytest
import numpy as np
from evonet import Config, Network


@pytest.fixture
def xor_config():
    """Config for a 2-3-1 tanh/sigmoid network, seeded for reproducibility."""
    config = Config()
    config.layer_sizes       = [2, 3, 1]
    config.layer_activations = ["identity", "tanh", "sigmoid"]
    config.seed              = 42
    config.quantize_digits   = 6
    return config


@pytest.fixture
def xor_population(xor_config):
    """A population of independently randomized networks, evaluated on nothing yet."""
    rng = xor_config.make_rng()
    template = Network.from_config(xor_config)
    return [template.clone().randomize(rng) for _ in range(10)]


