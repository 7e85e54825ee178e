"""
Connectivity analyzer for element networks.
"""

import logging
from typing import List

import networkx as nx

logger = logging.getLogger(__name__)


class ConnectivityResult:
    """Results from connectivity analysis."""

    def __init__(self):
        self.connectivity_ratio = 0.0
        self.connected_components: List[List[int]] = []
        self.isolated_elements: List[int] = []
        self.analysis_details = {}

    @property
    def component_count(self) -> int:
        return len(self.connected_components)


class ConnectivityAnalyzer:
    """
    Analyzes connectivity properties of element networks.
    """

    def analyze(self, network) -> ConnectivityResult:
        """
        Analyze connectivity of the given network.

        Args:
            network: ElementNetwork to analyze

        Returns:
            ConnectivityResult with analysis details
        """
        result = ConnectivityResult()
        graph = network.graph

        total_elements = graph.number_of_nodes()
        total_edges = graph.number_of_edges()

        if total_elements > 1:
            max_possible_edges = total_elements * (total_elements - 1) // 2
            result.connectivity_ratio = total_edges / max_possible_edges
        else:
            result.connectivity_ratio = 1.0

        components = [sorted(component) for component in nx.connected_components(graph)]
        components.sort(key=lambda component: (-len(component), component[0]))
        result.connected_components = components

        result.isolated_elements = sorted(node for node in graph.nodes() if graph.degree(node) == 0)

        result.analysis_details = {
            'total_elements': total_elements,
            'total_edges': total_edges,
            'component_count': len(components),
            'isolated_count': len(result.isolated_elements),
        }

        logger.debug(f"Connectivity analysis: {result.analysis_details}")
        return result
