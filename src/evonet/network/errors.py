"""
evonet Network Errors

Exceptions raised when a network is built or used inconsistently. They all
derive from NetworkError, itself a ValueError, so callers can catch either.

Classes:
    NetworkError:            Base class of all network errors
    ShapeMismatchError:      Data length differs from the layer it is fed to
    NotWiredError:           Propagation through a Group that has no predecessor
    WiringError:             A Group is wired more than once
    EmptyDatasetError:       A Network is evaluated against an empty dataset
    DegenerateTopologyError: A Group (or Network) with no members
"""

class NetworkError(ValueError):
    """Base class for errors raised by the network core."""

class ShapeMismatchError(NetworkError):
    """The length of some data does not match the size of the Group it is meant for."""

class NotWiredError(NetworkError):
    """A Group was activated from its predecessor before being wired to one."""

class WiringError(NetworkError):
    """A Group was wired more than once."""

class EmptyDatasetError(NetworkError):
    """A Network was evaluated against a dataset with no records."""

class DegenerateTopologyError(NetworkError):
    """A Group with no Units, or a Network with no Groups."""
