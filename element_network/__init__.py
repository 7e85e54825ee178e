"""
Element Network Package - Connectivity of Numbered Elements

A small library for modeling a fixed set of elements numbered 1..size and
an undirected "connected" relation between them.

Key Features:
- Symmetric connect/disconnect with range validation
- Breadth-first reachability and shortest-hop "level" queries
- Adjacency invariant auditing
- Connected component analysis
- Three-phase interactive shell

Architecture:
- core/: Error kinds and value types
- validators/: Element range checks and invariant audits
- graph/: Network representation, building and analysis
- config/: Shell configuration
- shell/: Command handlers and the interactive session
- utils/: Logging setup

Example Usage:
    from element_network import ElementNetwork

    network = ElementNetwork(6)
    network.connect(1, 2)
    network.connect(2, 3)

    if network.are_connected(1, 3):
        print(f"Level: {network.level_of(1, 3)}")  # Level: 2
"""

from .core.models import Connection, ConnectionLevel
from .core.exceptions import (
    NetworkError,
    InvalidArgumentError,
    OutOfRangeError,
    InvalidStateError,
    ConfigurationError,
)
from .validators import ElementValidator, InvariantValidator, ValidationResult
from .graph import ElementNetwork, NetworkBuilder, ConnectivityAnalyzer, ConnectivityResult
from .config import ShellConfiguration

__version__ = "1.0.0"

__all__ = [
    # Core models
    'Connection',
    'ConnectionLevel',

    # Exceptions
    'NetworkError',
    'InvalidArgumentError',
    'OutOfRangeError',
    'InvalidStateError',
    'ConfigurationError',

    # Validators
    'ElementValidator',
    'InvariantValidator',
    'ValidationResult',

    # Main classes
    'ElementNetwork',
    'NetworkBuilder',
    'ConnectivityAnalyzer',
    'ConnectivityResult',
    'ShellConfiguration',
]

# Module configuration
import logging
logging.getLogger(__name__).addHandler(logging.NullHandler())
