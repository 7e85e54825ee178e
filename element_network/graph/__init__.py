"""
Graph Module - Element Network Construction and Analysis

Contains the core network representation and analysis components.
"""

from .element_network import ElementNetwork
from .network_builder import NetworkBuilder
from .connectivity_analyzer import ConnectivityAnalyzer, ConnectivityResult

__all__ = [
    'ElementNetwork',
    'NetworkBuilder',
    'ConnectivityAnalyzer',
    'ConnectivityResult',
]
