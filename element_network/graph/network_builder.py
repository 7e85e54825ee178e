"""
Network builder module for constructing element networks from edge lists.
"""

import logging
from typing import Iterable, Tuple

from ..core.exceptions import NetworkError
from ..validators.validation_result import ValidationResult
from .element_network import ElementNetwork

logger = logging.getLogger(__name__)


class NetworkBuilder:
    """
    Builds element networks from a size and a list of element pairs.
    """

    def build(self, size: int, pairs: Iterable[Tuple[int, int]]) -> Tuple[ElementNetwork, ValidationResult]:
        """
        Build a network, connecting every acceptable pair.

        Rejected pairs are recorded as errors rather than aborting the build.

        Args:
            size: Number of elements in the network
            pairs: Element pairs to connect

        Returns:
            The built network and a ValidationResult listing rejected pairs

        Raises:
            InvalidArgumentError: If ``size`` is not a positive integer
        """
        network = ElementNetwork(size)
        result = ValidationResult()
        connected = 0

        for pair in pairs:
            try:
                a, b = pair
                if network.connect(a, b):
                    connected += 1
            except (NetworkError, TypeError, ValueError) as e:
                logger.warning(f"Failed to add connection {pair!r}: {e}")
                result.add_error(f"Connection {pair!r} rejected: {e}")

        result.details = {'connections_created': connected}
        return network, result
