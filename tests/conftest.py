import io

import pytest
from rich.console import Console

from element_network import ElementNetwork, ShellConfiguration
from element_network.shell import InteractiveSession


@pytest.fixture
def network():
    return ElementNetwork(6)


@pytest.fixture
def chain_network():
    """1-2-3-4 in a network of 6 elements."""
    network = ElementNetwork(6)
    network.connect(1, 2)
    network.connect(2, 3)
    network.connect(3, 4)
    return network


@pytest.fixture
def make_session():
    """Build a session fed from a list of lines; returns (session, output buffer)."""

    def _make(lines, config=None):
        buffer = io.StringIO()
        console = Console(file=buffer, width=200, color_system=None, highlight=False)
        feed = iter(lines)

        def fake_input(prompt=""):
            try:
                return next(feed)
            except StopIteration:
                raise EOFError

        session = InteractiveSession(config or ShellConfiguration(), console=console, input_func=fake_input)
        return session, buffer

    return _make


@pytest.fixture(autouse=True)
def restore_package_logger():
    """setup_logging mutates the package logger; put it back after each test."""
    import logging

    logger = logging.getLogger("element_network")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
