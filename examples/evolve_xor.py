"""
XOR Problem with an evolved layered network

This script is a minimal evolutionary driver: it keeps a population of
networks, scores them on XOR and replaces the worst with mutated clones of the
best. Each child inherits its parent's error, so that the size of its mutation
shrinks as the parent gets better.

The XOR Problem:
    Input (0, 0) → Output 0
    Input (0, 1) → Output 1
    Input (1, 0) → Output 1
    Input (1, 1) → Output 0

Fitness Function:
    error = Σ(target - output)² / (2 * 4)      (lower is better)

Usage:
    python evolve_xor.py [config_file]
"""

import sys
from pathlib import Path

from evonet import Config, Network

XOR_DATASET = [([0.0, 0.0], [0.0]),
               ([0.0, 1.0], [1.0]),
               ([1.0, 0.0], [1.0]),
               ([1.0, 1.0], [0.0])]

def evolve(config: Config,
           population_size: int   = 20,
           num_parents    : int   = 5,
           max_generations: int   = 500,
           error_threshold: float = 0.005) -> Network:
    """
    Evolve networks on XOR until the best error drops below 'error_threshold'.

    Returns:
        the best network found
    """
    rng        = config.make_rng()
    template   = Network.from_config(config)
    population = [template.clone().randomize(rng) for _ in range(population_size)]
    for network in population:
        network.evaluate(XOR_DATASET)

    for generation in range(max_generations):
        population.sort(key=lambda n: n.error)
        best = population[0]
        if generation % 25 == 0:
            print(f"Generation {generation:03d}: best error={best.error:.6f}")
        if best.error < error_threshold:
            break

        parents  = population[:num_parents]
        children = []
        for i in range(population_size - num_parents):
            parent = parents[i % num_parents]
            child  = parent.clone()
            child.error = parent.error
            child.mutate(rng)
            if config.quantize_digits is not None:
                child.quantize(config.quantize_digits)
            child.evaluate(XOR_DATASET)
            children.append(child)
        population = parents + children

    population.sort(key=lambda n: n.error)
    return population[0]

if __name__ == "__main__":
    config_file = sys.argv[1] if len(sys.argv) > 1 else Path(__file__).parent / "config_xor.ini"
    config      = Config(str(config_file))
    champion    = evolve(config)

    print(f"\nFinal error: {champion.error:.6f}")
    for inputs, expected in XOR_DATASET:
        output = champion.run(inputs)
        print(f"  {inputs} -> {output[0]:.4f} (expected {expected[0]:.0f})")
    print(f"\n{champion}")
