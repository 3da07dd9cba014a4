"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Tagged Logger - leveled, module-tagged logging to colored text or JSON lines
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from tagged_logger.core.logger import Logger
from tagged_logger.core.logger_builder import LoggerBuilder
from tagged_logger.core.log_entry import LogEntry
from tagged_logger.core.log_level import LogLevel, OutputFormat
from tagged_logger.core.logger_config import LoggerConfig
from tagged_logger.core.timer import Timer
from tagged_logger.formatters.duration_formatter import TimerFormat

# Import submodules (not all classes by default)
from tagged_logger import formatters
from tagged_logger import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "LogLevel",
    "OutputFormat",
    "LoggerConfig",
    "Timer",
    "TimerFormat",
    "formatters",
    "writers",
]
