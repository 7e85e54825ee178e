"""
Command-line entry point: python -m element_network
"""

import argparse
import logging
import sys

from .config.shell_config import ShellConfiguration
from .core.exceptions import ConfigurationError
from .shell.session import InteractiveSession
from .utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} is not a positive integer")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="element_network",
        description="Connect, disconnect and query numbered elements interactively.",
    )
    parser.add_argument("--size", type=positive_int, default=None,
                        help="Number of elements (skips the size prompt)")
    parser.add_argument("--config", default=None,
                        help="JSON file with shell configuration")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Override the configured log level")
    parser.add_argument("--summary", action="store_true",
                        help="Print a connectivity summary before exiting")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ShellConfiguration.from_file(args.config) if args.config else ShellConfiguration()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    if args.log_level:
        config.log_level = args.log_level
    if args.summary:
        config.show_summary = True

    setup_logging(config.log_level)
    logger.debug(f"Starting session with {config}")

    InteractiveSession(config).run(size=args.size)
    return 0


if __name__ == "__main__":
    sys.exit(main())
