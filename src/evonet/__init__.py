"""
evonet - evolvable layered neural networks.

This package provides the "organism" evolved by an evolution strategy: a layered
feedforward network whose parameters change through random mutation instead of
gradient descent, and whose fitness is its half mean squared error on a labelled
dataset. Population management, selection and the generation loop belong to the
caller, which drives networks through the EvolvableNetwork interface.

Main components:
- network:     Connection, Unit, Group and Network classes, errors and the capability interface
- activations: Activation functions available to units
- run:         Configuration

Example:
    >>> from evonet import Config, Network
    >>> config = Config("config.ini")
    >>> rng = config.make_rng()
    >>> network = Network.from_config(config).randomize(rng)
    >>> network.evaluate(dataset)
    >>> child = network.clone()
    >>> child.error = network.error
    >>> child.mutate(rng)
"""

__version__ = "0.1.0"

from evonet.activations import Activation
from evonet.network     import (Connection, Unit, Group, Network, EvolvableNetwork, NetworkError,
                                ShapeMismatchError, NotWiredError, WiringError, EmptyDatasetError,
                                DegenerateTopologyError)
from evonet.run.config  import Config

__all__ = [
    "Activation",
    "Config",
    "Connection",
    "Unit",
    "Group",
    "Network",
    "EvolvableNetwork",
    "NetworkError",
    "ShapeMismatchError",
    "NotWiredError",
    "WiringError",
    "EmptyDatasetError",
    "DegenerateTopologyError",
]
