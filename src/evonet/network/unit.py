"""
evonet Unit Module

This module implements the Unit class, the computational node of a network.

Classes:
    Unit: A node applying an activation function to its biased, weighted input
"""

import numpy as np
from typing import TYPE_CHECKING

from evonet.activations         import Activation, activations, activation_codes
from evonet.network.connection  import Connection, quantize_value

if TYPE_CHECKING:
    from evonet.network.group import Group

class Unit:
    """
    A computational node (unit) in a layered network.

    A unit reads the activations of the preceding Group through its incoming
    connections and computes its own activation as:
        activation_fn(sum(weight * source_activation) + bias)

    Units in the input Group have no connections; their activation is assigned
    directly from the network inputs.

    Public Attributes:
        bias:          Bias added to the weighted input
        activation:    The current output of the unit
        activation_fn: Which activation function the unit applies
        connections:   Incoming connections, one per unit of the preceding Group

    Public Methods:
        clone():                Create an independent deep copy
        randomize(rng):         Draw new bias and weights uniformly from [-1, 1)
        mutate(rate, rng):      Perturb bias and weights
        quantize(digits):       Round bias and weights
        set_activation(value):  Assign the activation directly (input units)
        forward(predecessor):   Compute the activation from the preceding Group
    """

    def __init__(self, activation_fn: Activation | str = Activation.SIGMOID):
        """
        Parameters:
            activation_fn: The activation function (an Activation or its name)

        Raises:
            ValueError: if 'activation_fn' does not name a known activation function
        """
        self._activation_fn: Activation       = Activation.parse(activation_fn)
        self.bias          : float            = 0.0
        self.activation    : float            = 0.0
        self.connections   : list[Connection] = []

    @property
    def activation_fn(self) -> Activation:
        return self._activation_fn

    @activation_fn.setter
    def activation_fn(self, value: Activation | str) -> None:
        self._activation_fn = Activation.parse(value)

    def clone(self) -> 'Unit':
        unit = Unit(self.activation_fn)
        unit.bias        = self.bias
        unit.activation  = self.activation
        unit.connections = [conn.clone() for conn in self.connections]
        return unit

    def randomize(self, rng: np.random.Generator) -> None:
        self.bias = float(rng.uniform(-1.0, 1.0))
        for conn in self.connections:
            conn.randomize(rng)

    def mutate(self, rate: float, rng: np.random.Generator) -> None:
        """
        Perturb the bias by a value drawn uniformly from [-rate, rate), then
        mutate every connection with an equal share of the rate.

        Units without connections (input units) only have their bias perturbed.

        Parameters:
            rate: The mutation budget allotted to this unit
            rng:  Source of randomness
        """
        self.bias += float(rng.uniform(-rate, rate))

        if not self.connections:
            return

        conn_rate = rate / len(self.connections)
        for conn in self.connections:
            conn.mutate(conn_rate, rng)

    def quantize(self, digits: int) -> None:
        self.bias = quantize_value(self.bias, digits)
        for conn in self.connections:
            conn.quantize(digits)

    def set_activation(self, value: float) -> None:
        self.activation = float(value)

    def forward(self, predecessor: 'Group') -> None:
        """
        Calculate the activation of this unit from the activations of the preceding Group.
        The result is saved in 'self.activation'.

        Parameters:
            predecessor: the Group this unit's connections read from
        """
        sources = predecessor.units
        total   = sum(conn.weight * sources[conn.source_index].activation for conn in self.connections)
        total  += self.bias
        self.activation = float(activations[self.activation_fn](total))

    def __str__(self):
        return f"[{activation_codes[self.activation_fn]},b={self.bias:+.2f},n={len(self.connections)}]"

    def __repr__(self):
        return (f"Unit(activation_fn=Activation.{self.activation_fn.name}, bias={self.bias}, "
                f"activation={self.activation}, connections={self.connections!r})")
