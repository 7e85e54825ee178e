"""
Element validator for checking element identifiers against the network universe.
"""

import numbers

from ..core.exceptions import InvalidArgumentError, OutOfRangeError


class ElementValidator:
    """
    Validates that element ids lie in the universe 1..size.
    """

    def __init__(self, size: int):
        self.size = size

    def validate(self, element) -> None:
        """
        Validate a single element id.

        Args:
            element: The element identifier to check

        Raises:
            InvalidArgumentError: If the element is not an integer
            OutOfRangeError: If the element is outside 1..size
        """
        if isinstance(element, bool) or not isinstance(element, numbers.Integral):
            raise InvalidArgumentError(
                f"Element {element!r} must be an integer.",
                details={'element': element},
            )
        if element < 1 or element > self.size:
            raise OutOfRangeError(
                f"Element {element} is out of valid range (1 to {self.size}).",
                details={'element': element, 'min': 1, 'max': self.size},
            )

    def validate_pair(self, a, b) -> None:
        """Validate both endpoints of a pair, first failure wins."""
        self.validate(a)
        self.validate(b)

    def is_valid(self, element) -> bool:
        """Check an element without raising."""
        try:
            self.validate(element)
        except (InvalidArgumentError, OutOfRangeError):
            return False
        return True
