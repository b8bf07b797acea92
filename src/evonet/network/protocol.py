"""Capability interface shared by every evolvable network.

An evolutionary driver only ever talks to a network through the operations
below. Network types implement them structurally, without inheriting from a
common base class.
"""

from typing import Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class EvolvableNetwork(Protocol):
    """Protocol that every network handed to an evolutionary driver implements.

    The 'error' attribute is the network's fitness: lower is better, and
    1.0 is the value a freshly (re)initialized network carries until evaluated.
    """

    error: float

    def clone(self) -> "EvolvableNetwork":
        """Return an independent deep copy (fitness is not copied)."""
        ...

    def randomize(self, rng: np.random.Generator) -> "EvolvableNetwork":
        """Reinitialize every parameter, reset 'error' to 1.0 and return self."""
        ...

    def mutate(self, rng: np.random.Generator) -> None:
        """Perturb every parameter in place, with a magnitude scaled by 'error'."""
        ...

    def quantize(self, digits: int) -> None:
        """Round every parameter in place to 'digits' decimal places."""
        ...

    def run(self, inputs: Sequence[float]) -> list[float]:
        """Forward pass for one input vector."""
        ...

    def evaluate(self, dataset: Sequence[tuple[Sequence[float], Sequence[float]]]) -> float:
        """Score the network against a labelled dataset, updating 'error'."""
        ...
