"""
Interactive three-phase shell: connect, then disconnect, then query.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from rich.console import Console
from rich.table import Table

from ..config.shell_config import ShellConfiguration
from ..graph.connectivity_analyzer import ConnectivityAnalyzer
from ..graph.element_network import ElementNetwork
from ..validators.invariant_validator import InvariantValidator
from .commands import (
    INVALID_ENTRY_MESSAGE,
    CommandOutcome,
    parse_int,
    parse_pair,
    run_connect,
    run_disconnect,
    run_query,
)

logger = logging.getLogger(__name__)

CommandHandler = Callable[[ElementNetwork, int, int], CommandOutcome]


@dataclass
class SessionReport:
    """What happened during one run of the shell."""
    network: ElementNetwork
    connections_made: int = 0
    outcomes: Dict[str, List[CommandOutcome]] = field(default_factory=dict)


class InteractiveSession:
    """
    Drives an ElementNetwork from line-based input.

    The session owns no global state: the network it builds is passed
    explicitly to each command handler and returned in the report.
    """

    def __init__(
        self,
        config: Optional[ShellConfiguration] = None,
        console: Optional[Console] = None,
        input_func: Optional[Callable[[str], str]] = None,
    ):
        self.config = config or ShellConfiguration()
        self.console = console or Console(highlight=False)
        self._input = input_func or self.console.input

    def _read_line(self, prompt: str) -> Optional[str]:
        """Read one line, or None at end of input."""
        try:
            return self._input(prompt)
        except EOFError:
            return None

    def _say(self, message: str = "", style: Optional[str] = None) -> None:
        self.console.print(message, style=style, markup=False, highlight=False)

    def read_size(self) -> int:
        """Ask for the number of elements, falling back to the configured default."""
        default = self.config.default_size
        line = self._read_line(f"How many elements? (press Enter for default {default}): ")

        if line is None or not line.strip():
            self._say(f"Defaulting to {default} elements.")
            return default

        while True:
            size = parse_int(line)
            if size is not None and size > 0:
                return size

            line = self._read_line("Type a positive integer: ")
            if line is None:
                logger.info("Input ended while reading size, using default")
                self._say(f"Defaulting to {default} elements.")
                return default

    def run_phase(self, network: ElementNetwork, prompt: str, handler: CommandHandler) -> List[CommandOutcome]:
        """
        Read pairs and dispatch them to ``handler`` until the terminator token
        or end of input.

        Malformed lines are reported and skipped; they produce no outcome.
        """
        outcomes = []

        while True:
            line = self._read_line(prompt)
            if line is None or self.config.is_terminator(line):
                break

            pair = parse_pair(line)
            if pair is None:
                self._say(INVALID_ENTRY_MESSAGE, style="yellow")
                continue

            outcome = handler(network, *pair)
            outcomes.append(outcome)
            self._say(outcome.message, style=None if outcome.ok else "red")

        return outcomes

    def run(self, size: Optional[int] = None) -> SessionReport:
        """
        Run the full session.

        Args:
            size: Network size; prompts for it when None

        Returns:
            SessionReport with the final network and every command outcome
        """
        if size is None:
            size = self.read_size()

        network = ElementNetwork(size)
        report = SessionReport(network=network)
        terminator = self.config.terminator

        self._say()
        self._say(f"Available integers: 1 - {size}")
        self._say()
        self._say(
            f"Type the integers you wish to connect (example: 1 2). "
            f"Type '{terminator}' to finish this step."
        )
        report.outcomes['connect'] = self.run_phase(network, "Connect: ", run_connect)
        report.connections_made = sum(1 for outcome in report.outcomes['connect'] if outcome.ok)

        self._say()
        self._say(f"Total connections made: {report.connections_made}")

        self._say()
        self._say(f"Disconnect connections (example: 1 2). Type '{terminator}' to finish.")
        report.outcomes['disconnect'] = self.run_phase(network, "Disconnect: ", run_disconnect)

        self._say()
        self._say(f"Consult connections (example: 1 4). Type '{terminator}' to finish this step.")
        report.outcomes['query'] = self.run_phase(network, "Consult: ", run_query)

        if self.config.show_summary:
            self.print_summary(network)

        self._say()
        self._say("Program ended.")
        return report

    def print_summary(self, network: ElementNetwork) -> None:
        """Print connectivity statistics for the network as a table."""
        audit = InvariantValidator().validate(network)
        connectivity = ConnectivityAnalyzer().analyze(network)

        table = Table(title="Network Summary", show_header=True, header_style="bold white")
        table.add_column("Metric", style="bright_yellow")
        table.add_column("Value", style="bold cyan", justify="right")

        table.add_row("Elements", str(network.size))
        table.add_row("Connections", str(network.edge_count))
        table.add_row("Components", str(connectivity.component_count))
        table.add_row("Isolated elements", str(len(connectivity.isolated_elements)))
        table.add_row("Connectivity ratio", f"{connectivity.connectivity_ratio:.2%}")
        table.add_row("Invariants", "OK" if audit.is_valid else "BROKEN")

        self._say()
        self.console.print(table)
