"""Logger builder pattern"""

from typing import Any, Callable, Mapping, Optional, Union

from tagged_logger.core.log_level import LogLevel, OutputFormat
from tagged_logger.core.logger import Logger
from tagged_logger.core.logger_config import LoggerConfig


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Settings are collected as plain values and validated once, when build()
    creates the LoggerConfig.
    """

    def __init__(self):
        self._options = {}

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        self._options["log_level"] = level
        return self

    def with_module(self, module: str) -> "LoggerBuilder":
        """Set module name shown in log prefixes."""
        self._options["module"] = module
        return self

    def with_output_format(self, output_format: Union[OutputFormat, str]) -> "LoggerBuilder":
        """Set output format ("text" or "jsonl")."""
        self._options["output_format"] = output_format
        return self

    def with_jsonl(self, split_streams: bool = False) -> "LoggerBuilder":
        """
        Enable newline-delimited JSON output.

        Args:
            split_streams: Keep debug/info on stdout and send warn and above
                           to stderr instead of one unified stdout stream

        Returns:
            Self for method chaining
        """
        self._options["output_format"] = OutputFormat.JSONL
        self._options["jsonl_split_streams"] = split_streams
        return self

    def with_streams(self, stdout: Any = None, stderr: Any = None) -> "LoggerBuilder":
        """
        Set output streams.

        Args:
            stdout: Stream for debug/info (and every level in unified jsonl mode)
            stderr: Stream for warn/error/fatal

        Returns:
            Self for method chaining

        Example:
            buffer = io.StringIO()
            logger = (LoggerBuilder()
                .with_streams(stdout=buffer, stderr=buffer)
                .build())
        """
        if stdout is not None:
            self._options["stdout"] = stdout
        if stderr is not None:
            self._options["stderr"] = stderr
        return self

    def with_color(self, enabled: Optional[bool] = True, truecolor: Optional[bool] = None) -> "LoggerBuilder":
        """Force color on or off; None restores environment detection."""
        self._options["color"] = enabled
        self._options["truecolor"] = truecolor
        return self

    def with_environ(self, environ: Mapping[str, str]) -> "LoggerBuilder":
        """Read color and test-context signals from this mapping instead of os.environ."""
        self._options["environ"] = environ
        return self

    def with_terminate(self, terminate: Callable[[], Any]) -> "LoggerBuilder":
        """Set the callback invoked after a fatal entry is written."""
        self._options["terminate"] = terminate
        return self

    def build_config(self) -> LoggerConfig:
        """Validate collected settings."""
        return LoggerConfig(**self._options)

    def build(self) -> Logger:
        """Build and return configured logger."""
        return Logger(self.build_config())
