"""
evonet Connection Module

This module implements the Connection class, the leaf of the network tree.

Classes:
    Connection: A weighted link to one unit of the preceding Group

Functions:
    quantize_value: Round a parameter to a fixed number of decimal places
"""

import numpy as np

def quantize_value(value: float, digits: int) -> float:
    """
    Round 'value' to 'digits' decimal places, halves rounding away from zero.

    Applying it twice with the same 'digits' gives the same result as applying it once.
    """
    precision = 10.0 ** digits
    scaled    = value * precision
    rounded   = np.round(scaled)            # halves go to even here
    truncated = np.trunc(scaled)
    if abs(scaled - truncated) == 0.5:      # exact tie: move away from zero
        rounded = truncated + np.sign(scaled)
    return float(rounded) / precision

class Connection:
    """
    A weighted link from a unit to a unit in the preceding Group.

    The connection does not hold a reference to the unit it reads from, only
    the position of that unit in the preceding Group.

    Public Attributes:
        source_index: Index of the source unit in the preceding Group
        weight:       Weight multiplying the source unit's activation

    Public Methods:
        clone():              Create an independent copy
        randomize(rng):       Draw a new weight uniformly from [-1, 1)
        mutate(rate, rng):    Add a uniform perturbation from [-rate, rate)
        quantize(digits):     Round the weight to 'digits' decimal places
    """

    def __init__(self, source_index: int, weight: float = 0.0):
        """
        Parameters:
            source_index: Index of the source unit in the preceding Group
            weight:       Initial weight of the connection
        """
        self.source_index: int   = source_index
        self.weight      : float = weight

    def clone(self) -> 'Connection':
        return Connection(self.source_index, self.weight)

    def randomize(self, rng: np.random.Generator) -> None:
        self.weight = float(rng.uniform(-1.0, 1.0))

    def mutate(self, rate: float, rng: np.random.Generator) -> None:
        """
        Perturb the weight by a value drawn uniformly from [-rate, rate).
        The weight is not clipped.
        """
        self.weight += float(rng.uniform(-rate, rate))

    def quantize(self, digits: int) -> None:
        self.weight = quantize_value(self.weight, digits)

    def __repr__(self):
        return f"Connection(source_index={self.source_index}, weight={self.weight})"

    def __str__(self):
        return f"[{self.source_index:02d},{self.weight:+.02f}]"
