"""
Timer - elapsed-time tagging on top of a Logger
"""

from __future__ import annotations
import time
from typing import TYPE_CHECKING, Any, Union

from tagged_logger.core.log_entry import DurationContext
from tagged_logger.core.log_level import LogLevel
from tagged_logger.formatters.duration_formatter import TimerFormat, format_duration

if TYPE_CHECKING:
    from tagged_logger.core.logger import Logger


class Timer:
    """
    Stopwatch sharing its owner's level filter, format and streams.

    Elapsed time is measured from creation on every call, so successive
    calls report cumulative durations. Text lines get a "[<duration>]" tag
    before the message; JSON records get duration and durationMs fields.
    """

    def __init__(self, logger: "Logger", format: Union[TimerFormat, str] = TimerFormat.NARROW):
        self._format = TimerFormat.from_string(format)
        self._logger = logger
        self._start = time.perf_counter()

    @property
    def format(self) -> TimerFormat:
        return self._format

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._start) * 1000

    def _duration(self) -> DurationContext:
        elapsed = self.elapsed_ms()
        return DurationContext(
            formatted=format_duration(elapsed, self._format),
            elapsed_ms=int(round(elapsed)),
        )

    def log(self, level: Union[LogLevel, str], message: Any, *args: Any) -> None:
        self._logger._log(LogLevel.from_string(level), message, args, self._duration())

    def log_debug(self, message: Any, *args: Any) -> None:
        self.log(LogLevel.DEBUG, message, *args)

    def log_info(self, message: Any, *args: Any) -> None:
        self.log(LogLevel.INFO, message, *args)

    def log_warn(self, message: Any, *args: Any) -> None:
        self.log(LogLevel.WARN, message, *args)

    def log_error(self, message: Any, *args: Any) -> None:
        self.log(LogLevel.ERROR, message, *args)

    def log_fatal(self, message: Any, *args: Any) -> None:
        self.log(LogLevel.FATAL, message, *args)

    debug = log_debug
    info = log_info
    warn = log_warn
    error = log_error
    fatal = log_fatal

    def __repr__(self) -> str:
        return f"Timer(format={self._format}, elapsed_ms={self.elapsed_ms():.0f})"
