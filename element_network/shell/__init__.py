"""
Interactive shell around ElementNetwork.

The shell only calls the public network operations; the core never imports it.
"""

from .commands import CommandOutcome, parse_pair, run_connect, run_disconnect, run_query
from .session import InteractiveSession, SessionReport

__all__ = [
    'CommandOutcome',
    'parse_pair',
    'run_connect',
    'run_disconnect',
    'run_query',
    'InteractiveSession',
    'SessionReport',
]
