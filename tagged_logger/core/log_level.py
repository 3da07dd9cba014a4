"""
Log level and output format enumerations
"""

from enum import Enum, IntEnum
from typing import Tuple, Union


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Values are ordered by severity; the minimum-level filter compares them
    as integers.
    """

    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages, logged with causes and stacks
    FATAL = 50      # Fatal errors, terminate the process after logging

    def __str__(self) -> str:
        """String representation of log level."""
        return self.label

    @property
    def label(self) -> str:
        """Lowercase level name as used in configuration and JSON records."""
        return self.name.lower()

    @property
    def is_error(self) -> bool:
        """True for levels that carry cause chains and stack traces."""
        return self >= LogLevel.ERROR

    @classmethod
    def from_string(cls, level: Union["LogLevel", str]) -> "LogLevel":
        """
        Convert a level name to LogLevel.

        Args:
            level: LogLevel or lowercase level name

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level is not one of the known levels
        """
        if isinstance(level, cls):
            return level
        if isinstance(level, str) and level in LOG_LEVEL_NAMES:
            return cls[level.upper()]
        raise ValueError(
            f'Invalid log level: "{level}". Valid levels: {", ".join(LOG_LEVEL_NAMES)}'
        )


class OutputFormat(str, Enum):
    """Line format chosen at logger construction."""

    TEXT = "text"
    JSONL = "jsonl"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, output_format: Union["OutputFormat", str]) -> "OutputFormat":
        """
        Convert a format name to OutputFormat.

        Raises:
            ValueError: If output_format is not "text" or "jsonl"
        """
        if isinstance(output_format, cls):
            return output_format
        for member in cls:
            if member.value == output_format:
                return member
        raise ValueError(
            f'Invalid output format: "{output_format}". '
            f'Valid formats: {", ".join(OUTPUT_FORMAT_NAMES)}'
        )


LOG_LEVEL_NAMES: Tuple[str, ...] = tuple(level.label for level in LogLevel)
OUTPUT_FORMAT_NAMES: Tuple[str, ...] = tuple(fmt.value for fmt in OutputFormat)
