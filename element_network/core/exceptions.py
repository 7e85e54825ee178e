"""
Custom exceptions for the element network package.
"""


class NetworkError(Exception):
    """Base exception class for element network errors."""

    kind = "Network"

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.details = details or {}


class InvalidArgumentError(NetworkError):
    """Raised for a bad network size, a self-connection or a non-integer element."""

    kind = "InvalidArgument"


class OutOfRangeError(NetworkError):
    """Raised when an element lies outside 1..size."""

    kind = "OutOfRange"


class InvalidStateError(NetworkError):
    """Raised when disconnecting two elements that are not directly connected."""

    kind = "InvalidState"


class ConfigurationError(NetworkError):
    """Raised when shell configuration is invalid or missing."""

    kind = "Configuration"
