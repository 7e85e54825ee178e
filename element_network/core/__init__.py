"""
Core components for element network modeling.

This package provides the error kinds and the small value types
shared by the graph, validators and shell.
"""

from .models import Connection, ConnectionLevel
from .exceptions import (
    NetworkError,
    InvalidArgumentError,
    OutOfRangeError,
    InvalidStateError,
    ConfigurationError,
)

__all__ = [
    'Connection',
    'ConnectionLevel',
    'NetworkError',
    'InvalidArgumentError',
    'OutOfRangeError',
    'InvalidStateError',
    'ConfigurationError',
]
