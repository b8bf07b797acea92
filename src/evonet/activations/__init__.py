"""
Activations Package

This package provides the activation functions available to evonet units.

Exported:
    Activation:       Enumeration of the supported activation functions
    activations:      Dictionary mapping each Activation to its function
    activation_codes: Dictionary mapping each Activation to a 3-letter code
    Individual activation functions: identity_activation, relu_activation,
                                     sigmoid_activation, tanh_activation
"""

from evonet.activations.basic_activations import (
    Activation,
    activations,
    activation_codes,
    identity_activation,
    relu_activation,
    sigmoid_activation,
    tanh_activation
)

__all__ = [
    'Activation',
    'activations',
    'activation_codes',
    'identity_activation',
    'relu_activation',
    'sigmoid_activation',
    'tanh_activation'
]
