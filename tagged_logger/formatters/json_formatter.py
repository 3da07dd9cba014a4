"""
JSON formatter for structured logging

Formats log entries as one JSON object per line. Values are converted to
JSON-safe data before encoding: exceptions become structured error records
and a container nested inside itself becomes "[Circular]".
"""

import dataclasses
import json
import math
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Dict, List, Mapping

from tagged_logger.core.log_entry import LogEntry
from tagged_logger.formatters.base_formatter import BaseFormatter
from tagged_logger.formatters.error_inspector import is_error, serialize_error
from tagged_logger.formatters.value_formatter import (
    CIRCULAR,
    FUNCTION_TYPES,
    has_default_repr,
    object_fields,
    function_repr,
)

# Largest integer a double-based JSON reader keeps exactly
MAX_SAFE_INTEGER = 2 ** 53 - 1


class _JSONSafeConverter:
    """
    Converts a value tree to JSON-safe data.

    Only containers on the current path are tracked, so a value repeated in
    two sibling positions is written out in full both times; only a real
    back-edge to an enclosing container is replaced by CIRCULAR.
    """

    def __init__(self):
        self.ancestors: List[int] = []

    def convert(self, value: Any) -> Any:
        if value is None or isinstance(value, (bool, str)):
            return value
        if isinstance(value, int):
            return value if abs(value) <= MAX_SAFE_INTEGER else str(value)
        if isinstance(value, float):
            return value if math.isfinite(value) else str(value)
        if is_error(value):
            return self.convert(serialize_error(value))
        if isinstance(value, Enum):
            return self.convert(value.value)
        if isinstance(value, (datetime, date, time)):
            return value.isoformat()
        if isinstance(value, (type,) + FUNCTION_TYPES):
            return function_repr(value)

        if isinstance(value, Mapping):
            return self._enter(value, lambda: {
                key if isinstance(key, str) else str(key): self.convert(item)
                for key, item in value.items()
            })
        if isinstance(value, (list, tuple, set, frozenset)):
            return self._enter(value, lambda: [self.convert(item) for item in value])
        if dataclasses.is_dataclass(value) or (
            has_default_repr(value) and object_fields(value)
        ):
            return self._enter(value, lambda: {
                name: self.convert(item) for name, item in object_fields(value).items()
            })

        # Left to json.dumps(default=str)
        return value

    def _enter(self, container: Any, build):
        if id(container) in self.ancestors:
            return CIRCULAR
        self.ancestors.append(id(container))
        try:
            return build()
        finally:
            self.ancestors.pop()


class JSONFormatter(BaseFormatter):
    """
    Format log entries as newline-delimited JSON records.

    Record keys, in order: timestamp, level, message, module, args,
    duration, durationMs, errors, nativeStack. module, args and the duration
    keys only appear when set; errors and nativeStack only for error and
    fatal entries.
    """

    def __init__(self, ensure_ascii: bool = False):
        """
        Initialize JSON formatter.

        Args:
            ensure_ascii: Escape non-ASCII characters
        """
        self.ensure_ascii = ensure_ascii

    def build_record(self, entry: LogEntry) -> Dict[str, Any]:
        """
        Build the record for a log entry.

        Message and args are kept as raw values; conversion happens in
        stringify().
        """
        record: Dict[str, Any] = {
            "timestamp": entry.iso_timestamp,
            "level": entry.level.label,
            "message": entry.message,
        }

        if entry.module:
            record["module"] = entry.module
        if entry.args:
            record["args"] = list(entry.args)
        if entry.duration is not None:
            record["duration"] = entry.duration.formatted
            record["durationMs"] = entry.duration.elapsed_ms

        if entry.level.is_error:
            errors = [serialize_error(value) for value in entry.values if is_error(value)]
            if errors:
                record["errors"] = errors
            record["nativeStack"] = entry.native_stack or ""

        return record

    def stringify(self, record: Dict[str, Any]) -> str:
        """Encode a record as a single line of JSON."""
        return json.dumps(
            _JSONSafeConverter().convert(record),
            ensure_ascii=self.ensure_ascii,
            separators=(",", ":"),
            check_circular=False,
            default=str,
        )

    def format(self, entry: LogEntry) -> List[str]:
        """
        Format log entry as JSON.

        Args:
            entry: Log entry to format

        Returns:
            A single JSON line
        """
        return [self.stringify(self.build_record(entry))]

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(ensure_ascii={self.ensure_ascii})"
