import numpy as np
from enum import Enum

class Activation(Enum):
    """
    The closed set of activation functions a Unit can apply.
    """
    IDENTITY = "identity"
    RELU     = "relu"
    SIGMOID  = "sigmoid"
    TANH     = "tanh"

    @classmethod
    def parse(cls, value: "Activation | str") -> "Activation":
        """
        Convert a name (or an Activation) into an Activation.

        Raises:
            ValueError: if 'value' does not name a known activation function
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            valid = ", ".join(a.value for a in cls)
            raise ValueError(f"Unknown activation function '{value}' (expected one of: {valid})") from None

def identity_activation(z):
    return z

def relu_activation(z):
    return np.maximum(0.0, z)

def sigmoid_activation(z):
    z = np.clip(z, -500, 500)   # to prevent overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-z))

def tanh_activation(z):
    return np.tanh(z)

activations = {
    Activation.IDENTITY: identity_activation,
    Activation.RELU    : relu_activation,
    Activation.SIGMOID : sigmoid_activation,
    Activation.TANH    : tanh_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    Activation.IDENTITY: "IDN",
    Activation.RELU    : "RLU",
    Activation.SIGMOID : "SIG",
    Activation.TANH    : "TNH"
    }
