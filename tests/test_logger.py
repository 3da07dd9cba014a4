"""Tests for the Logger facade in text mode"""

import re
from unittest.mock import Mock

import pytest

from conftest import strip_ansi
from tagged_logger import Logger, LoggerBuilder, LoggerConfig, LogLevel, OutputFormat
from tagged_logger.writers import NullStream

LINE_PATTERN = re.compile(
    r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z  \[(DEBUG|INFO|WARN|ERROR|FATAL)\]\s+"
)


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.WARN
        assert LogLevel.WARN < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.FATAL

    def test_from_string(self):
        assert LogLevel.from_string("debug") == LogLevel.DEBUG
        assert LogLevel.from_string("warn") == LogLevel.WARN
        assert LogLevel.from_string(LogLevel.FATAL) is LogLevel.FATAL

    def test_from_string_invalid(self):
        with pytest.raises(ValueError, match="debug, info, warn, error, fatal"):
            LogLevel.from_string("verbose")

    def test_from_string_exact_names(self):
        for name in ["INFO", "Debug", " warn"]:
            with pytest.raises(ValueError, match="Invalid log level"):
                LogLevel.from_string(name)

    def test_logger_rejects_uppercase_level(self, stdout, stderr):
        with pytest.raises(ValueError, match=re.escape('Invalid log level: "INFO"')):
            Logger(log_level="INFO", stdout=stdout, stderr=stderr)

    def test_label(self):
        assert LogLevel.INFO.label == "info"
        assert str(LogLevel.ERROR) == "error"

    def test_output_format(self):
        assert OutputFormat.from_string("jsonl") is OutputFormat.JSONL
        with pytest.raises(ValueError, match='Invalid output format: "xml"'):
            OutputFormat.from_string("xml")


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.log_level == LogLevel.INFO
        assert config.module == ""
        assert config.output_format is OutputFormat.TEXT
        assert config.jsonl_split_streams is False

    def test_debug_config(self):
        assert LoggerConfig.debug_config().log_level == LogLevel.DEBUG

    def test_json_config(self):
        config = LoggerConfig.json_config(split_streams=True)
        assert config.output_format is OutputFormat.JSONL
        assert config.jsonl_split_streams is True

    def test_names_converted_to_enums(self):
        config = LoggerConfig(log_level="warn", output_format="jsonl")
        assert config.log_level is LogLevel.WARN
        assert config.output_format is OutputFormat.JSONL

    def test_null_streams_under_test_runner(self):
        config = LoggerConfig(environ={"PYTEST_CURRENT_TEST": "test_x"})
        assert isinstance(config.stdout, NullStream)
        assert isinstance(config.stderr, NullStream)

    def test_terminate_must_be_callable(self):
        with pytest.raises(TypeError):
            LoggerConfig(terminate="exit")


class TestBasicLogging:
    """Test stream routing and line content."""

    def test_info_to_stdout(self, logger, stdout, stderr):
        logger.info("Hello world")
        assert len(stdout.lines) == 1
        assert stderr.lines == []
        line = strip_ansi(stdout.lines[0])
        assert "[INFO]" in line
        assert "[Test]" in line
        assert "Hello world" in line

    def test_debug_to_stdout(self, logger, stdout):
        logger.debug("Debug message")
        assert len(stdout.lines) == 1
        assert "[DEBUG]" in strip_ansi(stdout.lines[0])

    def test_warn_to_stderr(self, logger, stdout, stderr):
        logger.warn("Warning message")
        assert len(stderr.lines) == 1
        assert stdout.lines == []
        assert "[WARN]" in strip_ansi(stderr.lines[0])

    def test_error_to_stderr(self, logger, stdout, stderr):
        logger.error("Error message")
        assert len(stderr.lines) > 0
        assert stdout.lines == []
        assert "[ERROR]" in strip_ansi(stderr.lines[0])

    def test_line_shape(self, logger, stdout):
        logger.info("hello", 42, "world")
        line = strip_ansi(stdout.lines[0])
        assert re.match(
            r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z  \[INFO\]   \[Test\] hello 42 world$",
            line,
        )

    def test_level_tag_padding(self, make_logger, stdout):
        logger = make_logger()
        logger.debug("a")
        logger.info("b")
        debug_line, info_line = (strip_ansi(line) for line in stdout.lines)
        assert debug_line.index("a") == info_line.index("b")

    def test_one_newline_per_write(self, logger, stderr):
        inner = ValueError("Inner error")
        outer = RuntimeError("Outer error")
        outer.__cause__ = inner
        logger.error("Failed:", outer)
        assert len(stderr.writes) > 3
        for chunk in stderr.writes:
            assert chunk.endswith("\n")
            assert chunk.count("\n") == 1

    def test_generic_log(self, logger, stdout, stderr):
        logger.log("info", "generic")
        logger.log(LogLevel.WARN, "typed")
        assert "generic" in stdout.lines[0]
        assert "typed" in stderr.lines[0]

    def test_generic_log_invalid_level(self, logger, stdout):
        with pytest.raises(ValueError):
            logger.log("loud", "x")
        assert stdout.output == ""


class TestLevelFiltering:
    """Test minimum level filtering."""

    def test_filters_debug_at_info(self, make_logger, stdout):
        logger = make_logger(log_level="info")
        logger.debug("Should not appear")
        logger.info("Should appear")
        assert len(stdout.lines) == 1
        assert "Should appear" in stdout.lines[0]

    def test_filters_below_warn(self, make_logger, stdout, stderr):
        logger = make_logger(log_level="warn")
        logger.debug("No")
        logger.info("No")
        logger.warn("Yes")
        assert stdout.lines == []
        assert len(stderr.lines) == 1

    @pytest.mark.parametrize("minimum", ["debug", "info", "warn", "error", "fatal"])
    def test_threshold_is_inclusive(self, make_logger, stdout, stderr, minimum):
        logger = make_logger(log_level=minimum, terminate=Mock())
        for level in LogLevel:
            logger.log(level, f"at {level.label}")
        output = strip_ansi(stdout.output + stderr.output)
        for level in LogLevel:
            primary = f"[{level.name}]" in output and f"at {level.label}" in output
            assert primary is (level >= LogLevel.from_string(minimum))

    def test_set_log_level(self, logger, stdout, stderr):
        logger.set_log_level("error")
        logger.info("Should not appear")
        logger.error("Should appear")
        assert stdout.lines == []
        assert len(stderr.lines) > 0
        assert logger.log_level is LogLevel.ERROR

    def test_set_log_level_invalid_keeps_level(self, logger):
        with pytest.raises(ValueError, match=re.escape('Invalid log level: "bad"')):
            logger.set_log_level("bad")
        assert logger.log_level is LogLevel.DEBUG


class TestMethodAliases:
    """Test per-level convenience methods."""

    @pytest.mark.parametrize("level", ["debug", "info", "warn", "error"])
    def test_alias_matches_log_method(self, make_logger, stdout, stderr, level):
        logger = make_logger()
        getattr(logger, level)("short form")
        getattr(logger, f"log_{level}")("long form")
        output = strip_ansi(stdout.output + stderr.output)
        assert output.count(f"[{level.upper()}]") >= 2
        assert "short form" in output
        assert "long form" in output


class TestObjectFormatting:
    """Test rendering of non-string values."""

    def test_dict_argument(self, logger, stdout):
        logger.info("Data:", {"name": "John", "age": 30})
        output = strip_ansi(stdout.lines[0])
        assert "object at 0x" not in output
        assert "name" in output
        assert "John" in output

    def test_nested_dict(self, logger, stdout):
        logger.info("Nested:", {"a": {"b": {"c": 123}}})
        assert "123" in stdout.lines[0]

    def test_plain_object(self, logger, stdout):
        class Job:
            def __init__(self):
                self.id = 7
                self.state = "queued"

        logger.info(Job())
        output = strip_ansi(stdout.lines[0])
        assert "Job(id=7, state='queued')" in output

    def test_none_message(self, logger, stdout):
        logger.info(None)
        assert strip_ansi(stdout.lines[0]).endswith("None")


class TestErrorHandling:
    """Test error and fatal output."""

    def test_error_message_extracted(self, logger, stderr):
        logger.error("Failed:", ValueError("Something went wrong"))
        assert "Failed: Something went wrong" in strip_ansi(stderr.output)

    def test_cause_chain(self, logger, stderr):
        inner = ValueError("Inner error")
        outer = RuntimeError("Outer error")
        outer.__cause__ = inner

        logger.error("Operation failed:", outer)
        output = strip_ansi(stderr.output)
        assert "Outer error" in output
        assert "Caused by: Inner error" in output

    def test_cause_lines_prefixed(self, logger, stderr):
        outer = RuntimeError("Outer error")
        outer.__cause__ = ValueError("Inner error")
        logger.error(outer)
        cause_lines = [line for line in stderr.lines if "Caused by:" in line]
        assert len(cause_lines) == 1
        assert LINE_PATTERN.match(strip_ansi(cause_lines[0]))
        assert re.search(r"\[Test\]\s+Caused by: Inner error$", strip_ansi(cause_lines[0]))

    def test_raised_error_stack(self, logger, stderr):
        try:
            raise KeyError("missing")
        except KeyError as exc:
            logger.error("Lookup failed:", exc)
        output = strip_ansi(stderr.output)
        assert "Traceback (most recent call last):" in output
        assert "test_raised_error_stack" in output

    def test_native_stack_trace(self, logger, stderr):
        logger.error("Failed:", ValueError("Test error"))
        lines = [strip_ansi(line) for line in stderr.lines]
        header = next(i for i, line in enumerate(lines) if line.endswith("Stack trace:"))
        frames = lines[header + 1:]
        assert frames
        assert any("test_native_stack_trace" in line for line in frames)
        assert not any("tagged_logger" in line for line in frames)
        for line in lines:
            assert LINE_PATTERN.match(line)

    def test_stack_trace_without_errors(self, logger, stderr):
        logger.error("plain failure")
        assert "Stack trace:" in strip_ansi(stderr.output)

    def test_no_stack_for_warn(self, logger, stderr):
        logger.warn("careful", ValueError("not fatal"))
        assert len(stderr.lines) == 1
        assert "not fatal" in stderr.lines[0]

    def test_circular_cause_chain(self, make_logger, stderr):
        logger = make_logger()
        error1 = RuntimeError("Error 1")
        error2 = RuntimeError("Error 2")
        error1.__cause__ = error2
        error2.__cause__ = error1

        logger.error("Circular:", error1)
        output = strip_ansi(stderr.output)
        assert "Error 1" in output
        assert output.count("Caused by:") == 1
        assert "Caused by: Error 2" in output

    def test_self_referencing_cause(self, make_logger, stderr):
        logger = make_logger()
        error = RuntimeError("Self-ref")
        error.__cause__ = error

        logger.error("Self:", error)
        output = strip_ansi(stderr.output)
        assert "Self-ref" in output
        assert "Caused by:" not in output

    def test_empty_message_uses_name(self, make_logger, stderr):
        logger = make_logger()
        logger.error("Empty:", Exception(""))
        output = strip_ansi(stderr.output)
        assert "Empty: Exception" in output
        assert "object at 0x" not in output

    def test_type_error_empty_message(self, make_logger, stderr):
        logger = make_logger()
        logger.error("Type:", TypeError(""))
        assert "Type: TypeError" in strip_ansi(stderr.output)

    def test_custom_error_empty_message(self, make_logger, stderr):
        class CustomError(Exception):
            pass

        logger = make_logger()
        logger.error("Custom:", CustomError())
        assert "Custom: CustomError" in strip_ansi(stderr.output)

    def test_unprintable_error(self, make_logger, stderr):
        class Unprintable(Exception):
            def __str__(self):
                raise RuntimeError("boom")

        outer = RuntimeError("outer")
        outer.__cause__ = Unprintable()
        logger = make_logger()
        logger.error("bad", Unprintable(), outer)
        output = strip_ansi(stderr.output)
        assert "bad Unprintable outer" in output
        assert "Caused by: Unprintable" in output
        assert "Stack trace:" in output

    def test_causes_and_stacks_in_order(self, logger, stderr):
        first = RuntimeError("first outer")
        first.__cause__ = ValueError("first inner")
        second = RuntimeError("second outer")
        second.__cause__ = ValueError("second inner")

        logger.error("two", first, second)
        lines = [strip_ansi(line) for line in stderr.lines]

        def position(suffix):
            return next(i for i, line in enumerate(lines) if line.endswith(suffix))

        assert lines[0].endswith("two first outer second outer")
        assert (
            position("Caused by: first inner")
            < position("RuntimeError: first outer")
            < position("Caused by: second inner")
            < position("RuntimeError: second outer")
            < position("Stack trace:")
            < len(lines) - 1
        )


class TestFatal:
    """Test fatal termination."""

    def test_terminate_called_after_output(self, make_logger, stderr):
        seen = []
        logger = make_logger(terminate=lambda: seen.append(len(stderr.lines)))
        logger.fatal("Going down", RuntimeError("disk full"))
        assert len(seen) == 1
        assert seen[0] == len(stderr.lines)
        assert seen[0] > 1
        assert "[FATAL]" in strip_ansi(stderr.lines[0])

    def test_error_does_not_terminate(self, make_logger):
        terminate = Mock()
        logger = make_logger(terminate=terminate)
        logger.error("not fatal")
        terminate.assert_not_called()

    def test_default_terminate_exits(self, stdout, stderr):
        logger = Logger(stdout=stdout, stderr=stderr, environ={})
        with pytest.raises(SystemExit) as excinfo:
            logger.fatal("bye")
        assert excinfo.value.code == 1
        assert "bye" in stderr.output


class TestModuleTag:
    """Test module tag placement."""

    def test_module_tag_present(self, logger, stdout):
        logger.info("With module")
        line = strip_ansi(stdout.lines[0])
        assert line.index("[INFO]") < line.index("[Test]") < line.index("With module")

    def test_no_module_tag(self, make_logger, stdout):
        logger = make_logger()
        logger.info("No module")
        output = strip_ansi(stdout.lines[0])
        assert re.search(r"\[INFO\]\s+No module", output)

    def test_set_module(self, logger, stdout):
        logger.set_module("NewModule")
        logger.info("Updated")
        assert "[NewModule]" in strip_ansi(stdout.lines[0])
        assert logger.module == "NewModule"


class TestConstruction:
    """Test configuration errors and construction paths."""

    def test_invalid_level(self, stdout, stderr):
        with pytest.raises(ValueError, match=re.escape('Invalid log level: "invalid"')):
            Logger(log_level="invalid", stdout=stdout, stderr=stderr)

    def test_invalid_level_lists_levels(self, stdout, stderr):
        with pytest.raises(ValueError, match="debug, info, warn, error, fatal"):
            Logger(log_level="invalid", stdout=stdout, stderr=stderr)

    def test_invalid_output_format(self, stdout, stderr):
        with pytest.raises(ValueError, match=re.escape('Invalid output format: "xml"')):
            Logger(output_format="xml", stdout=stdout, stderr=stderr)

    def test_config_and_options_conflict(self):
        with pytest.raises(TypeError):
            Logger(LoggerConfig(), module="x")

    def test_from_config(self, stdout, stderr):
        logger = Logger(LoggerConfig(log_level="warn", stdout=stdout, stderr=stderr))
        logger.info("hidden")
        assert stdout.output == ""
        assert not logger.is_jsonl_output


class TestLoggerBuilder:
    """Test builder pattern."""

    def test_builder_pattern(self, stdout, stderr):
        terminate = Mock()
        logger = (LoggerBuilder()
            .with_module("builder_test")
            .with_level(LogLevel.INFO)
            .with_streams(stdout=stdout, stderr=stderr)
            .with_color(False)
            .with_terminate(terminate)
            .build())

        logger.debug("hidden")
        logger.info("shown")
        logger.fatal("end")
        assert len(stdout.lines) == 1
        assert "[builder_test] shown" in stdout.lines[0]
        terminate.assert_called_once_with()

    def test_builder_jsonl(self, stdout, stderr):
        logger = (LoggerBuilder()
            .with_jsonl(split_streams=True)
            .with_streams(stdout=stdout, stderr=stderr)
            .build())
        assert logger.is_jsonl_output
        logger.warn("to stderr")
        assert stdout.output == ""
        assert '"level":"warn"' in stderr.output

    def test_builder_validates(self):
        builder = LoggerBuilder().with_level("loud")
        with pytest.raises(ValueError):
            builder.build()
