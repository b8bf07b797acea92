import configparser
import os
import numpy as np
from evonet.activations import Activation

class Config:

    @staticmethod
    def _parse_layer_sizes(raw_sizes):
        """
        Parse layer_sizes from string to list.

        Parameters:
            raw_sizes: Either a comma-separated list of integers, or already a list

        Returns:
            List of layer sizes
        """
        if raw_sizes is None:
            return []
        if isinstance(raw_sizes, str):
            raw_sizes = [s for s in (part.strip() for part in raw_sizes.split(',')) if s]
        sizes = [int(size) for size in raw_sizes]
        for size in sizes:
            if size < 1:
                raise ValueError(f"Invalid layer size {size} in layer_sizes (must be at least 1)")
        return sizes

    @staticmethod
    def _parse_activations(raw_activations):
        """
        Parse layer_activations from string to list.

        Parameters:
            raw_activations: None, a comma-separated list of names, or already a list

        Returns:
            List of Activation members, or None
        """
        if raw_activations is None:
            return None
        if isinstance(raw_activations, str):
            raw_activations = [opt.strip() for opt in raw_activations.split(',')]
        return [Activation.parse(opt) for opt in raw_activations]

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create an empty Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config with default values for manual setup.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.layer_sizes        = []
            self.layer_activations  = None
            self.default_activation = Activation.SIGMOID
            self.seed               = None
            self.quantize_digits    = None
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser(inline_comment_prefixes=('#', ';'))
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [NETWORK]

        # The number of units in each layer, input layer first and output layer last.
        self.layer_sizes = get_value('NETWORK', 'layer_sizes', str)

        # The activation function of each layer (one per layer, in order).
        # The input layer never applies its activation function, so any value works there.
        # Use "None" (or leave out) to give every layer 'default_activation'.
        self.layer_activations = get_value('NETWORK', 'layer_activations', str, default=None)

        # The activation function of layers with no entry in 'layer_activations'.
        # Use "None" (or leave out) for sigmoid.
        self.default_activation = get_value('NETWORK', 'default_activation', str, default=None) or 'sigmoid'

        # [EVOLUTION]

        # Seed of the random number generator (see 'make_rng').
        # Use "None" for a non-reproducible run.
        self.seed = get_value('EVOLUTION', 'seed', int, default=None)

        # The number of decimal places to which networks are rounded after mutation.
        # Use "None" to disable rounding.
        self.quantize_digits = get_value('EVOLUTION', 'quantize_digits', int, default=None)

    def activations_per_layer(self) -> list[Activation]:
        """
        The activation function of every layer in 'layer_sizes'.

        Raises:
            ValueError: if 'layer_activations' does not have one entry per layer
        """
        if self.layer_activations is None:
            return [self.default_activation] * len(self.layer_sizes)
        if len(self.layer_activations) != len(self.layer_sizes):
            raise ValueError(f"Expected {len(self.layer_sizes)} layer_activations, "
                             f"got {len(self.layer_activations)}")
        return list(self.layer_activations)

    def make_rng(self) -> np.random.Generator:
        """
        Create the random number generator to thread through randomize/mutate calls.
        """
        return np.random.default_rng(self.seed)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse list-valued and activation options when set.
        This allows users to write config.layer_sizes = "2, 3, 1" and have it automatically
        converted to a list of integers.
        """
        if name == 'layer_sizes':
            value = self._parse_layer_sizes(value)
        elif name == 'layer_activations':
            value = self._parse_activations(value)
        elif name == 'default_activation':
            value = Activation.parse(value)
        super().__setattr__(name, value)
