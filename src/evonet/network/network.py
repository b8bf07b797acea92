"""
evonet Network Module

This module implements the Network class: an ordered chain of fully connected
Groups, together with the scalar error used as its fitness by an
evolutionary driver.

Classes:
    Network: A layered feedforward network evolved through random mutation
"""

import math
import warnings
import graphviz  # type: ignore
import numpy as np
from typing import Sequence, TYPE_CHECKING

from evonet.activations    import activations
from evonet.network.errors import (DegenerateTopologyError, EmptyDatasetError,
                                   NotWiredError, ShapeMismatchError)
from evonet.network.group  import Group

if TYPE_CHECKING:
    from evonet.run.config import Config

class Network:
    """
    A layered feedforward network whose parameters evolve by random mutation.

    A Network is assembled by appending Groups and then wiring them, each Group
    being fully connected to the one before it. The first Group is the input
    layer and the last Group the output layer.

    The 'error' attribute doubles as the network's fitness (lower is better)
    and as the magnitude of its mutations: 'mutate' perturbs the parameters by
    amounts proportional to the current error, so poorly performing networks
    explore widely while good ones refine locally. The error is set to 1.0
    whenever the parameters are reinitialized, and recomputed by 'evaluate'.

    Public Attributes:
        groups: The layers of the network, input layer first
        error:  Half mean squared error from the last evaluation (1.0 if never evaluated)

    Public Properties:
        input_size:         Number of units in the input layer
        output_size:        Number of units in the output layer
        number_groups:      Number of layers
        number_units:       Total number of units
        number_connections: Total number of connections
        number_parameters:  Total number of biases and weights

    Public Methods:
        from_config(config):  Build and wire a network described by a Config
        append(group):        Add a layer at the end of the network
        wire_all():           Wire every layer to the one preceding it
        clone():              Independent deep copy
        randomize(rng):       Reinitialize every parameter and reset the error
        mutate(rng):          Perturb every parameter, scaled by the error
        quantize(digits):     Round every parameter
        run(inputs):          Forward pass for one input vector
        run_batch(inputs):    Vectorized forward pass for a batch of input vectors
        evaluate(dataset):    Compute the error against a labelled dataset
        parameters():         Every bias and weight as a flat array
        visualize(view):      Render the network with Graphviz
    """

    def __init__(self):
        self.groups: list[Group] = []
        self.error : float       = 1.0

    @classmethod
    def from_config(cls, config: 'Config') -> 'Network':
        """
        Build and wire a network with the layers described in the configuration.

        Parameters:
            config: Provides 'layer_sizes' and the activation function of every layer

        Returns:
            A wired network whose parameters are all zero (call 'randomize' next)
        """
        network = cls()
        for size, activation_fn in zip(config.layer_sizes, config.activations_per_layer()):
            network.append(Group(size, activation_fn))
        network.wire_all()
        return network

    @property
    def input_size(self) -> int:
        return len(self.groups[0].units)

    @property
    def output_size(self) -> int:
        return len(self.groups[-1].units)

    @property
    def number_groups(self) -> int:
        return len(self.groups)

    @property
    def number_units(self) -> int:
        return sum(len(group.units) for group in self.groups)

    @property
    def number_connections(self) -> int:
        return sum(len(unit.connections) for group in self.groups for unit in group.units)

    @property
    def number_parameters(self) -> int:
        return self.number_units + self.number_connections

    def append(self, group: Group) -> None:
        """
        Add a layer at the end of the network.
        The layer stays inert until 'wire_all' is called.
        """
        self.groups.append(group)

    def wire_all(self) -> None:
        """
        Wire every Group to the one before it (the first Group to none).

        Raises:
            DegenerateTopologyError: if the network has no Groups
        """
        if not self.groups:
            raise DegenerateTopologyError("Cannot wire a network without groups")

        predecessor = None
        for group in self.groups:
            group.wire(predecessor)
            predecessor = group

    def clone(self) -> 'Network':
        """
        Create an independent deep copy of the network.

        Each cloned Group is linked to the previous cloned Group, never to a Group
        of the original network. The error is not copied: the clone carries 1.0
        until it is evaluated.
        """
        network     = Network()
        predecessor = None
        for group in self.groups:
            group_clone = group.clone()
            if group.wired:
                group_clone.relink(predecessor)
            network.groups.append(group_clone)
            predecessor = group_clone
        return network

    def randomize(self, rng: np.random.Generator) -> 'Network':
        """
        Draw every bias and weight uniformly from [-1, 1) and reset the error to 1.0.

        Returns:
            this network, randomized in place
        """
        self.error = 1.0
        for group in self.groups:
            group.randomize(rng)
        return self

    def mutate(self, rng: np.random.Generator) -> None:
        """
        Perturb every parameter, using the current error as the mutation budget.

        Each Group receives the whole budget, which it splits evenly among its units;
        each unit perturbs its bias with its share and splits it again evenly among
        its connections.

        Raises:
            ValueError: if the error is negative or not finite
        """
        rate = self.error
        if not math.isfinite(rate) or rate < 0.0:
            raise ValueError(f"Cannot mutate with error={rate}; evaluate the network first")
        if rate == 0.0:
            warnings.warn("Network error is 0.0, mutate() leaves the parameters unchanged",
                          RuntimeWarning, stacklevel=2)

        for group in self.groups:
            group.mutate(rate, rng)

    def quantize(self, digits: int) -> None:
        """
        Round every bias and weight to 'digits' decimal places.
        """
        for group in self.groups:
            group.quantize(digits)

    def run(self, inputs: Sequence[float]) -> list[float]:
        """
        Perform a complete forward pass through the network.

        Parameters:
            inputs: the network inputs (as many as units in the input layer)

        Returns:
            the activations of the output layer (as many as units in the output layer)
        """
        if not self.groups:
            raise DegenerateTopologyError("Cannot run a network without groups")

        self.groups[0].activate_from_input(inputs)
        for group in self.groups[1:]:
            group.activate_from_predecessor()

        return self.groups[-1].activations

    def run_batch(self, inputs: np.ndarray) -> np.ndarray:
        """
        Perform a vectorized forward pass for a batch of inputs.

        Gives the same outputs as calling 'run' on each row, but does not
        update the activation stored in each unit.

        Parameters:
            inputs: array of shape (batch_size, input_size), or (input_size,)
                    which is reshaped to (1, input_size)

        Returns:
            array of shape (batch_size, output_size)
        """
        if not self.groups:
            raise DegenerateTopologyError("Cannot run a network without groups")

        x = np.asarray(inputs, dtype=np.float64)
        if x.ndim == 1:
            x = x.reshape(1, -1)
        if x.ndim != 2 or x.shape[1] != self.input_size:
            raise ShapeMismatchError(f"Expected inputs of shape (batch_size, {self.input_size}), got {x.shape}")

        for group in self.groups[1:]:
            if group.predecessor is None:
                raise NotWiredError("Group has no predecessor to activate from; wire it first")
            x = activations[group.activation_fn](x @ group.weight_matrix().T + group.bias_vector())

        return x

    def evaluate(self, dataset: Sequence[tuple[Sequence[float], Sequence[float]]]) -> float:
        """
        Compute the half mean squared error of the network over a labelled dataset.

        The squared differences between expected and actual outputs are summed over
        every output of every record, then divided by twice the number of records.
        The result is stored in 'self.error' and returned.

        Parameters:
            dataset: sequence of (inputs, expected outputs) pairs

        Raises:
            EmptyDatasetError:  if the dataset has no records
            ShapeMismatchError: if some record does not fit the input or output layer
        """
        if len(dataset) == 0:
            raise EmptyDatasetError("Cannot evaluate a network on an empty dataset")

        total = 0.0
        for inputs, expected in dataset:
            actual = self.run(inputs)
            if len(expected) != len(actual):
                raise ShapeMismatchError(f"Expected {len(actual)} target values, got {len(expected)}")
            for exp, act in zip(expected, actual):
                diff   = exp - act
                total += diff * diff

        self.error = float(total / (2 * len(dataset)))
        return self.error

    def parameters(self) -> np.ndarray:
        """
        Every parameter of the network as a flat array: for each unit, in order,
        its bias followed by the weights of its connections.
        """
        values = []
        for group in self.groups:
            for unit in group.units:
                values.append(unit.bias)
                values.extend(conn.weight for conn in unit.connections)
        return np.array(values, dtype=np.float64)

    def visualize(self, view: bool = False) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout
        dot.attr('graph', labelloc='t')

        last = len(self.groups) - 1
        fill = {0: 'lightgrey', last: 'white'}
        node_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                      'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}

        for g, group in enumerate(self.groups):
            with dot.subgraph(name=f'cluster_{g}') as cluster:
                cluster.attr(rank='same', label=f'{group.activation_fn.value}', style='invisible')
                for u, unit in enumerate(group.units):
                    attrs = dict(node_attrs, fillcolor=fill.get(g, 'lightblue'))
                    attrs['label'] = f"{g}.{u}\\nbias={unit.bias:.2f}"
                    cluster.node(f"g{g}u{u}", **attrs)

        for g, group in enumerate(self.groups[1:], start=1):
            for u, unit in enumerate(group.units):
                for conn in unit.connections:
                    dot.edge(f"g{g - 1}u{conn.source_index}", f"g{g}u{u}",
                             label=f"w={conn.weight:.2f}", fontsize='5', penwidth='0.5',
                             arrowsize='0.5', labelfloat='false', color='black')

        if view:
            dot.view(cleanup=True)

        return dot

    def __str__(self):
        groups_str = "\n".join(f"  {group}" for group in self.groups)
        return f"Network(error={self.error:.6f})\n{groups_str}"

    def __repr__(self):
        return f"Network(groups={self.groups!r}, error={self.error})"
