"""
Log entry data structure

A LogEntry lives for a single log call: it is built by the Logger, handed to
the active formatter and dropped once the lines are written.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, List, Optional, Tuple

from tagged_logger.core.log_level import LogLevel


@dataclass(frozen=True)
class DurationContext:
    """Elapsed time supplied by a Timer."""

    formatted: str
    elapsed_ms: int


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains all information about a single log call. The message and args
    keep their original Python values; formatters decide how to render them.
    """

    level: LogLevel
    message: Any
    args: Tuple[Any, ...] = ()
    module: str = ""
    timestamp: datetime = field(default_factory=_utc_now)
    duration: Optional[DurationContext] = None
    native_stack: Optional[str] = None

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        self.args = tuple(self.args)

    @property
    def values(self) -> List[Any]:
        """The message followed by every extra argument."""
        return [self.message, *self.args]

    @property
    def iso_timestamp(self) -> str:
        """Timestamp as ISO-8601 UTC with millisecond precision and a Z suffix."""
        return self.timestamp.astimezone(timezone.utc).isoformat(
            timespec="milliseconds"
        ).replace("+00:00", "Z")
