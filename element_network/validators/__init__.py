"""
Validators package for element networks.
"""

from .element_validator import ElementValidator
from .invariant_validator import InvariantValidator
from .validation_result import ValidationResult

__all__ = [
    'ElementValidator',
    'InvariantValidator',
    'ValidationResult',
]
