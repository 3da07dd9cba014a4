"""
Main Logger class - leveled logging facade

Each call is filtered against the minimum level, formatted as text or as a
JSON record and written synchronously before the call returns.
"""

from __future__ import annotations
from typing import Any, Optional, Sequence, Union

from tagged_logger.core.environment import (
    detect_color_support,
    detect_truecolor_support,
    resolve_flag,
)
from tagged_logger.core.log_entry import DurationContext, LogEntry
from tagged_logger.core.log_level import LogLevel
from tagged_logger.core.logger_config import LoggerConfig
from tagged_logger.core.timer import Timer
from tagged_logger.formatters.base_formatter import BaseFormatter
from tagged_logger.formatters.colors import Colorizer
from tagged_logger.formatters.duration_formatter import TimerFormat
from tagged_logger.formatters.error_inspector import capture_native_stack
from tagged_logger.formatters.json_formatter import JSONFormatter
from tagged_logger.formatters.text_formatter import TextFormatter
from tagged_logger.writers.console_writer import ConsoleWriter


class Logger:
    """
    Logger with module tagging, colored text or JSON lines, and timers.

    Example:
        logger = Logger(module="api", log_level="debug")
        logger.info("Server started", {"port": 3000})
        logger.error("Request failed", TimeoutError("upstream"))
    """

    def __init__(self, config: Optional[LoggerConfig] = None, **options: Any):
        """
        Create a logger.

        Args:
            config: Complete configuration
            **options: LoggerConfig fields, used when config is not given

        Raises:
            ValueError: If the level or output format is invalid
            TypeError: If both config and options are given
        """
        if config is not None and options:
            raise TypeError("pass either a LoggerConfig or keyword options, not both")
        self._config = config if config is not None else LoggerConfig(**options)

        self._log_level: LogLevel = self._config.log_level
        self._module: str = self._config.module

        use_color = resolve_flag(
            self._config.color,
            detect_color_support(self._config.environ, self._config.stdout),
        )
        use_truecolor = resolve_flag(
            self._config.truecolor,
            detect_truecolor_support(self._config.environ, use_color),
        )
        self._colorizer = Colorizer(use_color, use_truecolor)

        self._formatter: BaseFormatter
        if self._config.is_jsonl:
            self._formatter = JSONFormatter()
        else:
            self._formatter = TextFormatter(self._colorizer)

        self._writer = ConsoleWriter(
            self._config.stdout,
            self._config.stderr,
            split_streams=not self._config.is_jsonl or self._config.jsonl_split_streams,
        )

    @property
    def log_level(self) -> LogLevel:
        return self._log_level

    @property
    def module(self) -> str:
        return self._module

    @property
    def module_color(self) -> str:
        """ANSI color of the module tag, empty without color or module."""
        if not self._colorizer.use_color:
            return ""
        return self._colorizer.module_color(self._module)

    @property
    def is_jsonl_output(self) -> bool:
        return self._config.is_jsonl

    def set_log_level(self, level: Union[LogLevel, str]) -> None:
        """
        Change the minimum log level at runtime.

        Raises:
            ValueError: If level is invalid; the current level is kept
        """
        self._log_level = LogLevel.from_string(level)

    def set_module(self, module: str) -> None:
        """Change the module name shown in log prefixes and records."""
        self._module = module

    def log(self, level: Union[LogLevel, str], message: Any, *args: Any) -> None:
        """
        Log a message at the given level.

        Args:
            level: Log level (debug, info, warn, error, fatal)
            message: Primary message or value to log
            *args: Additional values to log
        """
        self._log(LogLevel.from_string(level), message, args)

    def _log(
        self,
        level: LogLevel,
        message: Any,
        args: Sequence[Any],
        duration: Optional[DurationContext] = None,
    ) -> None:
        if level < self._log_level:
            return

        entry = LogEntry(
            level=level,
            message=message,
            args=tuple(args),
            module=self._module,
            duration=duration,
            native_stack=capture_native_stack() if level.is_error else None,
        )
        for line in self._formatter.format(entry):
            self._writer.write_line(level, line)

        if level is LogLevel.FATAL:
            self._config.terminate()

    def log_debug(self, message: Any, *args: Any) -> None:
        """Log debug message."""
        self._log(LogLevel.DEBUG, message, args)

    def log_info(self, message: Any, *args: Any) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, message, args)

    def log_warn(self, message: Any, *args: Any) -> None:
        """Log warning message."""
        self._log(LogLevel.WARN, message, args)

    def log_error(self, message: Any, *args: Any) -> None:
        """Log error message with causes and stack traces."""
        self._log(LogLevel.ERROR, message, args)

    def log_fatal(self, message: Any, *args: Any) -> None:
        """Log fatal message, then terminate."""
        self._log(LogLevel.FATAL, message, args)

    debug = log_debug
    info = log_info
    warn = log_warn
    error = log_error
    fatal = log_fatal

    def timer(self, format: Union[TimerFormat, str] = TimerFormat.NARROW) -> Timer:
        """
        Create a timer that tags messages with the time elapsed since now.

        Example:
            timer = logger.timer()
            # ... do work ...
            timer.info("Operation complete")  # [1s 204ms] Operation complete
        """
        return Timer(self, format)

    def flush(self) -> None:
        """Flush the output streams."""
        self._writer.flush()

    def __repr__(self) -> str:
        return (
            f"Logger(level={self._log_level}, module={self._module!r}, "
            f"format={self._config.output_format})"
        )
