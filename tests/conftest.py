"""Pytest configuration and shared fixtures."""

import pytest
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the Python path
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir / "src"))


@pytest.fixture
def rng():
    """Seeded random number generator, threaded through randomize/mutate calls."""
    return np.random.default_rng(42)


@pytest.fixture
def scenario_network():
    """
    Wired 2-2-1 network: relu hidden layer, identity output layer, all biases 0.
    Hidden weights [[1, 0], [0, 1]], output weights [1, 1].
    """
    from evonet.network import Group, Network

    network = Network()
    network.append(Group(2, 'identity'))
    network.append(Group(2, 'relu'))
    network.append(Group(1, 'identity'))
    network.wire_all()

    hidden, output = network.groups[1], network.groups[2]
    for i, unit in enumerate(hidden.units):
        for conn in unit.connections:
            conn.weight = 1.0 if conn.source_index == i else 0.0
    for conn in output.units[0].connections:
        conn.weight = 1.0
    return network


@pytest.fixture
def xor_dataset():
    """XOR as a list of (inputs, expected outputs) records."""
    return [([0.0, 0.0], [0.0]),
            ([0.0, 1.0], [1.0]),
            ([1.0, 0.0], [1.0]),
            ([1.0, 1.0], [0.0])]
