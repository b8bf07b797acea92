"""
evonet Group Module

This module implements the Group class: an ordered layer of units sharing
one activation function.

Classes:
    Group: A layer of units, optionally wired to the preceding layer
"""

import numpy as np
from typing import Optional, Sequence

from evonet.activations        import Activation, activation_codes
from evonet.network.connection import Connection
from evonet.network.errors     import (DegenerateTopologyError, NotWiredError,
                                       ShapeMismatchError, WiringError)
from evonet.network.unit       import Unit

class Group:
    """
    An ordered layer of units sharing one activation function.

    A Group is created unwired. Wiring it to a predecessor Group gives every
    unit one connection (of weight 0.0) per unit of the predecessor, making
    the two layers fully connected. The first Group of a network is wired to
    no predecessor; its units receive the network inputs directly.

    The predecessor is a lookup reference only: the Group does not own it,
    and a cloned Group starts without one (the owning Network re-links it).

    Public Attributes:
        units:         The units of this layer, in order
        activation_fn: The activation function shared by all units
        predecessor:   The Group this layer reads from (None for the input layer)

    Public Properties:
        wired:       Whether 'wire' has been called
        activations: The current activation of every unit

    Public Methods:
        wire(predecessor):            Connect this layer to the preceding one
        clone():                      Deep copy (predecessor left unset)
        relink(predecessor):          Point a clone at its new predecessor
        randomize(rng):               Randomize every unit
        mutate(rate, rng):            Mutate every unit with an equal share of 'rate'
        quantize(digits):             Round every parameter
        activate_from_input(data):    Assign the unit activations directly
        activate_from_predecessor():  Compute the unit activations from the predecessor
        weight_matrix():              Connection weights as a (units, predecessor units) array
        bias_vector():                Unit biases as an array
    """

    def __init__(self, size: int, activation_fn: Activation | str = Activation.SIGMOID):
        """
        Parameters:
            size:          Number of units in the layer (at least 1)
            activation_fn: The activation function shared by all units

        Raises:
            DegenerateTopologyError: if 'size' is smaller than 1
            ValueError:              if 'activation_fn' is not a known activation function
        """
        if size < 1:
            raise DegenerateTopologyError(f"A Group needs at least one unit, got size={size}")

        self._activation_fn: Activation      = Activation.parse(activation_fn)
        self.units         : list[Unit]      = [Unit(self._activation_fn) for _ in range(size)]
        self.predecessor   : Optional[Group] = None
        self._wired        : bool            = False

    @property
    def activation_fn(self) -> Activation:
        return self._activation_fn

    @activation_fn.setter
    def activation_fn(self, value: Activation | str) -> None:
        """Change the activation function of the Group and of every unit in it."""
        self._activation_fn = Activation.parse(value)
        for unit in self.units:
            unit.activation_fn = self._activation_fn

    @property
    def wired(self) -> bool:
        return self._wired

    @property
    def activations(self) -> list[float]:
        return [unit.activation for unit in self.units]

    def wire(self, predecessor: Optional['Group']) -> None:
        """
        Wire this Group to its predecessor (or to nothing, for the input layer).

        Must be called exactly once, before the Group is randomized, mutated or activated.

        Parameters:
            predecessor: The preceding Group, or None for the input layer

        Raises:
            WiringError: if the Group is already wired
        """
        if self._wired:
            raise WiringError("Group is already wired")
        self._wired = True

        if predecessor is None:
            return

        self.predecessor = predecessor
        for unit in self.units:
            for index in range(len(predecessor.units)):
                unit.connections.append(Connection(index, 0.0))

    def relink(self, predecessor: Optional['Group']) -> None:
        """
        Point a cloned Group at its new predecessor, marking it wired.

        Unlike 'wire', no connections are created: a clone already carries its own.
        """
        self.predecessor = predecessor
        self._wired      = True

    def clone(self) -> 'Group':
        group = Group.__new__(Group)
        group._activation_fn = self._activation_fn
        group.units          = [unit.clone() for unit in self.units]
        group.predecessor    = None
        group._wired         = False
        return group

    def randomize(self, rng: np.random.Generator) -> None:
        for unit in self.units:
            unit.randomize(rng)

    def mutate(self, rate: float, rng: np.random.Generator) -> None:
        """
        Mutate every unit, splitting the mutation budget 'rate' evenly among them.
        """
        unit_rate = rate / len(self.units)
        for unit in self.units:
            unit.mutate(unit_rate, rng)

    def quantize(self, digits: int) -> None:
        for unit in self.units:
            unit.quantize(digits)

    def activate_from_input(self, data: Sequence[float]) -> None:
        """
        Set the activation of every unit from the matching element of 'data'.

        Raises:
            ShapeMismatchError: if 'data' does not have one element per unit
        """
        if len(data) != len(self.units):
            raise ShapeMismatchError(f"Expected {len(self.units)} inputs, got {len(data)}")

        for unit, value in zip(self.units, data):
            unit.set_activation(value)

    def activate_from_predecessor(self) -> None:
        """
        Compute the activation of every unit from the predecessor's activations.

        Raises:
            NotWiredError: if the Group has no predecessor
        """
        if self.predecessor is None:
            raise NotWiredError("Group has no predecessor to activate from; wire it first")

        for unit in self.units:
            unit.forward(self.predecessor)

    def weight_matrix(self) -> np.ndarray:
        """
        The connection weights as an array of shape (number of units, number of
        predecessor units), where entry [i, j] is the weight with which unit i
        reads unit j of the predecessor. The input layer yields shape (number of units, 0).
        """
        num_sources = len(self.predecessor.units) if self.predecessor is not None else 0
        weights = np.zeros((len(self.units), num_sources), dtype=np.float64)
        for i, unit in enumerate(self.units):
            for conn in unit.connections:
                weights[i, conn.source_index] = conn.weight
        return weights

    def bias_vector(self) -> np.ndarray:
        return np.array([unit.bias for unit in self.units], dtype=np.float64)

    def __len__(self):
        return len(self.units)

    def __str__(self):
        units_str = " ".join(str(unit) for unit in self.units)
        return f"Group({len(self.units)}, {activation_codes[self.activation_fn]}): {units_str}"

    def __repr__(self):
        return f"Group(size={len(self.units)}, activation_fn=Activation.{self.activation_fn.name})"
