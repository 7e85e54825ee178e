"""
Invariant validator for auditing the adjacency of an element network.
"""

import logging

from .validation_result import ValidationResult

logger = logging.getLogger(__name__)


class InvariantValidator:
    """
    Audits a network's adjacency: complete universe, no self-loops, symmetry.
    """

    def validate(self, network) -> ValidationResult:
        """
        Validate the structural invariants of a network.

        Args:
            network: ElementNetwork to audit

        Returns:
            ValidationResult with one error per violation found
        """
        result = ValidationResult()
        adjacency = network.adjacency
        universe = set(network.elements)

        missing = sorted(universe - set(adjacency))
        if missing:
            result.add_error(f"Elements missing from adjacency: {missing}")

        extra = sorted(set(adjacency) - universe)
        if extra:
            result.add_error(f"Adjacency holds elements outside 1..{network.size}: {extra}")

        for element, neighbors in adjacency.items():
            if element in neighbors:
                result.add_error(f"Element {element} is connected to itself")

            for neighbor in neighbors:
                if neighbor not in universe:
                    result.add_error(f"Element {element} has out-of-range neighbor {neighbor}")
                elif element not in adjacency.get(neighbor, ()):
                    result.add_error(f"Asymmetric connection: {element} -> {neighbor}")

        result.details = {
            'elements': len(adjacency),
            'edges': network.edge_count,
        }

        if not result.is_valid:
            logger.warning(f"Network invariant audit failed: {result}")

        return result
