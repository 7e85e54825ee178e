"""
Configuration package for element networks.
"""

from .shell_config import ShellConfiguration

__all__ = [
    'ShellConfiguration',
]
