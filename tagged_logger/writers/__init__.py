"""Writers module - Log output handlers"""

from tagged_logger.writers.console_writer import ConsoleWriter
from tagged_logger.writers.null_writer import NullStream

__all__ = ["ConsoleWriter", "NullStream"]
