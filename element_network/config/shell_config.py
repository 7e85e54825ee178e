"""
Configuration system for the interactive shell.

This module provides the settings the shell reads at startup: the default
network size, the phase terminator token and logging behavior.
"""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ShellConfiguration:
    """
    Configuration settings for the interactive shell.
    """

    default_size: int = 6
    terminator: str = "end"
    log_level: str = "WARNING"
    show_summary: bool = False

    def __post_init__(self):
        if isinstance(self.default_size, bool) or not isinstance(self.default_size, int) or self.default_size <= 0:
            raise ConfigurationError(
                f"default_size must be a positive integer, got {self.default_size!r}"
            )
        if not isinstance(self.terminator, str) or not self.terminator.strip():
            raise ConfigurationError("terminator must be a non-empty string")
        self.terminator = self.terminator.strip()
        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            )

    def is_terminator(self, line: str) -> bool:
        """Case-insensitive match of an input line against the terminator token."""
        return line.strip().lower() == self.terminator.lower()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ShellConfiguration':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_file(cls, config_filepath: str) -> 'ShellConfiguration':
        """
        Load configuration from a JSON file.

        Args:
            config_filepath: Path to a JSON object with ShellConfiguration fields

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        path = Path(config_filepath)
        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to load configuration from {path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

        config = cls.from_dict(data)
        logger.info(f"Successfully loaded shell configuration from: {path}")
        return config
