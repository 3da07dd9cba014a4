"""
Logger configuration management
"""

import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from tagged_logger.core.environment import is_test_context
from tagged_logger.core.log_level import LogLevel, OutputFormat
from tagged_logger.writers.null_writer import NullStream


def exit_process() -> None:
    """Default fatal callback: exit with status 1."""
    sys.exit(1)


@dataclass
class LoggerConfig:
    """
    Logger configuration.

    Level and format names are validated and converted to their enums in
    __post_init__, so an invalid value fails before any logger exists.
    """

    # Basic settings
    log_level: Union[LogLevel, str] = LogLevel.INFO
    module: str = ""
    output_format: Union[OutputFormat, str] = OutputFormat.TEXT

    # Stream settings
    jsonl_split_streams: bool = False
    stdout: Any = None   # debug/info in text mode, every level in unified jsonl mode
    stderr: Any = None   # warn/error/fatal when streams are split

    # Color settings (None: detect from environ)
    color: Optional[bool] = None
    truecolor: Optional[bool] = None
    environ: Optional[Mapping[str, str]] = None

    # Called after a fatal entry has been written
    terminate: Optional[Callable[[], Any]] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_level = LogLevel.from_string(self.log_level)
        self.output_format = OutputFormat.from_string(self.output_format)
        if not isinstance(self.module, str):
            raise TypeError("module must be a string")

        if self.environ is None:
            self.environ = os.environ

        if self.stdout is None:
            self.stdout = NullStream() if is_test_context(self.environ) else sys.stdout
        if self.stderr is None:
            self.stderr = NullStream() if is_test_context(self.environ) else sys.stderr

        if self.terminate is None:
            self.terminate = exit_process
        elif not callable(self.terminate):
            raise TypeError("terminate must be callable")

    @property
    def is_jsonl(self) -> bool:
        return self.output_format is OutputFormat.JSONL

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(log_level=LogLevel.DEBUG)

    @classmethod
    def json_config(cls, split_streams: bool = False) -> "LoggerConfig":
        """Create configuration for newline-delimited JSON output."""
        return cls(
            output_format=OutputFormat.JSONL,
            jsonl_split_streams=split_streams,
        )
