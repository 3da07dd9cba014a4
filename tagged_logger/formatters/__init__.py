"""
Log formatters module

Provides the text and JSON line formatters and the value, error and
duration helpers they share.
"""

from tagged_logger.formatters.base_formatter import BaseFormatter
from tagged_logger.formatters.text_formatter import TextFormatter
from tagged_logger.formatters.json_formatter import JSONFormatter
from tagged_logger.formatters.value_formatter import format_value, inspect_value
from tagged_logger.formatters.error_inspector import (
    cause_chain,
    display_message,
    serialize_error,
)
from tagged_logger.formatters.duration_formatter import TimerFormat, format_duration

__all__ = [
    "BaseFormatter",
    "TextFormatter",
    "JSONFormatter",
    "format_value",
    "inspect_value",
    "cause_chain",
    "display_message",
    "serialize_error",
    "TimerFormat",
    "format_duration",
]
