"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Leveled logging facade
- Timer: Elapsed-time tagging bound to a Logger
- LoggerBuilder: Builder pattern for logger construction
- LogEntry: Per-call log data
- LogLevel / OutputFormat: Level and format enumerations
- LoggerConfig: Configuration management
"""

from tagged_logger.core.log_level import LogLevel, OutputFormat
from tagged_logger.core.log_entry import DurationContext, LogEntry
from tagged_logger.core.logger_config import LoggerConfig
from tagged_logger.core.timer import Timer
from tagged_logger.core.logger import Logger
from tagged_logger.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "Timer",
    "LoggerBuilder",
    "LogEntry",
    "DurationContext",
    "LogLevel",
    "OutputFormat",
    "LoggerConfig",
]
