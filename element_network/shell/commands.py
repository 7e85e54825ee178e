"""
Command handlers for the interactive shell.

Each handler takes the network explicitly, runs one core operation and
turns its outcome, success or error, into a CommandOutcome value.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from ..core.exceptions import NetworkError
from ..graph.element_network import ElementNetwork

INVALID_ENTRY_MESSAGE = "Invalid entry. Try: <int> <int>"

# Optional sign and ASCII digits only; rejects "1_0" and non-ASCII digits
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass
class CommandOutcome:
    """Result of a single shell command."""
    ok: bool
    message: str
    error_kind: Optional[str] = None
    value: Any = None

    def __str__(self) -> str:
        return self.message


def parse_int(text: str) -> Optional[int]:
    """Parse a decimal integer with optional surrounding whitespace, or return None."""
    text = text.strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


def parse_pair(line: str) -> Optional[Tuple[int, int]]:
    """
    Parse a line holding exactly two integers, or return None.

    Every whitespace character separates a field, so runs of spaces and
    leading or trailing blanks produce empty fields and the line is rejected.
    """
    parts = re.split(r"\s", line)
    if len(parts) != 2:
        return None
    a, b = parse_int(parts[0]), parse_int(parts[1])
    if a is None or b is None:
        return None
    return a, b


def _run(operation: Callable[[], Any], success: Callable[[Any], str]) -> CommandOutcome:
    try:
        value = operation()
    except NetworkError as e:
        return CommandOutcome(ok=False, message=f"Error: {e}", error_kind=e.kind)
    return CommandOutcome(ok=True, message=success(value), value=value)


def run_connect(network: ElementNetwork, a: int, b: int) -> CommandOutcome:
    return _run(
        lambda: network.connect(a, b),
        lambda _: f"Successfully connected: {a} and {b}.",
    )


def run_disconnect(network: ElementNetwork, a: int, b: int) -> CommandOutcome:
    return _run(
        lambda: network.disconnect(a, b),
        lambda _: f"Disconnected: {a} and {b}.",
    )


def run_query(network: ElementNetwork, a: int, b: int) -> CommandOutcome:
    return _run(
        lambda: network.query(a, b),
        lambda level: level.describe(),
    )
