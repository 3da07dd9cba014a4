"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from typing import List

from tagged_logger.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert a LogEntry into the lines written for it, without
    trailing newlines.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> List[str]:
        """
        Format a log entry.

        Args:
            entry: The log entry to format

        Returns:
            Output lines, in write order
        """
        pass

    def __call__(self, entry: LogEntry) -> List[str]:
        """Allow formatters to be callable."""
        return self.format(entry)
