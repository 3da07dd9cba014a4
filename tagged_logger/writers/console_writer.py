"""Console writer routing lines to stdout or stderr by level"""

import sys
from typing import Any

from tagged_logger.core.log_level import LogLevel

# Levels written to the primary stream when streams are split
STDOUT_LEVELS = frozenset({LogLevel.DEBUG, LogLevel.INFO})


class ConsoleWriter:
    """
    Write log lines to a pair of streams.

    With split routing, debug/info go to stdout and warn/error/fatal to
    stderr. Without it (the jsonl default) every level goes to stdout.
    """

    def __init__(self, stdout: Any = None, stderr: Any = None, split_streams: bool = True):
        """
        Initialize console writer.

        Args:
            stdout: Primary stream (default: sys.stdout)
            stderr: Secondary stream (default: sys.stderr)
            split_streams: Route warn and above to the secondary stream
        """
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr
        self.split_streams = split_streams

    def route(self, level: LogLevel) -> Any:
        """Stream that receives lines of the given level."""
        if not self.split_streams or level in STDOUT_LEVELS:
            return self.stdout
        return self.stderr

    def write_line(self, level: LogLevel, line: str) -> None:
        """Write one line followed by a newline."""
        stream = self.route(level)
        stream.write(line + "\n")
        if hasattr(stream, "flush"):
            stream.flush()

    def flush(self):
        """Flush both streams."""
        for stream in (self.stdout, self.stderr):
            if hasattr(stream, "flush"):
                stream.flush()

    def __repr__(self) -> str:
        return f"ConsoleWriter(split_streams={self.split_streams})"
