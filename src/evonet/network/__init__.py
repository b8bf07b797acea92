"""
evonet Network Package

This package implements the evolvable layered network: the objects holding its
parameters, the operators that randomize, mutate and round them, and the
forward pass and error used to score it.

Modules:
    connection: Connection class (a weighted link to a preceding unit)
    unit:       Unit class (bias, activation function, incoming connections)
    group:      Group class (an ordered layer of units)
    network:    Network class (a chain of Groups plus its error)
    protocol:   EvolvableNetwork capability interface
    errors:     Exceptions raised on inconsistent use of the above

Exported Classes:
    Connection, Unit, Group, Network, EvolvableNetwork, NetworkError,
    ShapeMismatchError, NotWiredError, WiringError, EmptyDatasetError,
    DegenerateTopologyError
"""

from evonet.network.connection import Connection
from evonet.network.errors     import (NetworkError, ShapeMismatchError, NotWiredError, WiringError,
                                       EmptyDatasetError, DegenerateTopologyError)
from evonet.network.group      import Group
from evonet.network.network    import Network
from evonet.network.protocol   import EvolvableNetwork
from evonet.network.unit       import Unit

__all__ = ['Connection',
           'Unit',
           'Group',
           'Network',
           'EvolvableNetwork',
           'NetworkError',
           'ShapeMismatchError',
           'NotWiredError',
           'WiringError',
           'EmptyDatasetError',
           'DegenerateTopologyError']
