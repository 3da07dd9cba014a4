"""
Human-readable text formatter

Line shape:
    <timestamp>  [LEVEL]  [module] <message> <arg1> <arg2> ...

Error and fatal entries are followed by "Caused by:" lines, the stack of
every logged exception and the stack of the logging call site, each on its
own prefixed line.
"""

from typing import List

from tagged_logger.core.log_entry import LogEntry
from tagged_logger.formatters.base_formatter import BaseFormatter
from tagged_logger.formatters.colors import COLORS, LEVEL_COLORS, Colorizer
from tagged_logger.formatters.error_inspector import (
    cause_chain,
    display_message,
    error_stack,
    is_error,
    split_stack,
)
from tagged_logger.formatters.value_formatter import format_value

LEVEL_TAG_WIDTH = 7
INDENT = "  "


class TextFormatter(BaseFormatter):
    """Format log entries as prefixed, optionally colored text lines."""

    def __init__(self, colorizer: Colorizer = None):
        """
        Initialize text formatter.

        Args:
            colorizer: Colorizer deciding whether escapes are emitted
                       (default: monochrome)
        """
        self.colorizer = colorizer or Colorizer()

    def build_prefix(self, entry: LogEntry) -> str:
        """
        Build the line prefix: timestamp, level tag and module tag.

        The level tag is right-padded to a fixed width so messages line up.
        """
        colorize = self.colorizer.colorize
        timestamp = colorize(entry.iso_timestamp, COLORS["dim"])
        level_tag = colorize(
            f"[{entry.level.name}]".ljust(LEVEL_TAG_WIDTH), LEVEL_COLORS[entry.level]
        )
        module_tag = ""
        if entry.module:
            module_color = self.colorizer.module_color(entry.module)
            module_tag = colorize(f"[{entry.module}]", module_color) + " "
        return f"{timestamp}  {level_tag}  {module_tag}"

    def format_duration_tag(self, formatted: str) -> str:
        return self.colorizer.colorize(f"[{formatted}]", COLORS["blue"])

    def format_message(self, entry: LogEntry) -> str:
        """Message and args joined by single spaces, after the duration tag."""
        text = format_value(entry.message)
        if entry.duration is not None:
            text = f"{self.format_duration_tag(entry.duration.formatted)} {text}"
        if entry.args:
            text += " " + " ".join(format_value(arg) for arg in entry.args)
        return text

    def format(self, entry: LogEntry) -> List[str]:
        """
        Format log entry as text lines.

        Args:
            entry: Log entry to format

        Returns:
            The main line, followed for error levels by cause and stack lines
        """
        prefix = self.build_prefix(entry)
        lines = [prefix + self.format_message(entry)]

        if not entry.level.is_error:
            return lines

        for error in filter(is_error, entry.values):
            for cause in cause_chain(error):
                lines.append(f"{prefix}{INDENT}Caused by: {display_message(cause)}")
            lines.extend(prefix + INDENT + line for line in split_stack(error_stack(error)))

        if entry.native_stack:
            lines.append(f"{prefix}{INDENT}Stack trace:")
            lines.extend(prefix + INDENT + line for line in split_stack(entry.native_stack))

        return lines

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter({self.colorizer!r})"
