"""
Value formatting for text output

Renders arbitrary values as readable text. Containers and plain objects are
expanded field by field so nothing ends up as a bare "<Foo object at 0x...>".
"""

import dataclasses
import types
from enum import Enum
from typing import Any, Callable, List, Mapping, Set

from tagged_logger.formatters.error_inspector import display_message, is_error

MAX_DEPTH = 10
CIRCULAR = "[Circular]"

FUNCTION_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
)


def format_value(value: Any) -> str:
    """
    Format a log message or argument.

    Strings pass through, exceptions become their display message and
    anything else is rendered by inspect_value.
    """
    if isinstance(value, str):
        return value
    if is_error(value):
        return display_message(value)
    return inspect_value(value)


def inspect_value(value: Any, depth: int = MAX_DEPTH) -> str:
    """
    Structural text representation of a value.

    Args:
        value: Any Python value
        depth: Container levels expanded before collapsing to "..."

    Returns:
        Representation close to repr(), with cycles shown as "[Circular]"
    """
    return _Inspector(depth).render(value, 0)


def function_repr(func: Callable) -> str:
    """Short description of a function or class, without its address."""
    name = getattr(func, "__qualname__", None) or getattr(func, "__name__", None)
    if isinstance(func, type):
        return f"<class {name}>"
    if name is None:
        return repr(func)
    return f"<function {name}>"


def has_default_repr(value: Any) -> bool:
    return type(value).__repr__ is object.__repr__


def object_fields(value: Any) -> Mapping[str, Any]:
    if dataclasses.is_dataclass(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    fields = dict(getattr(value, "__dict__", {}))
    for cls in type(value).__mro__:
        slots = getattr(cls, "__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot not in fields and hasattr(value, slot):
                fields[slot] = getattr(value, slot)
    return fields


class _Inspector:
    """Depth-limited renderer tracking the containers currently open."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        self.ancestors: Set[int] = set()

    def render(self, value: Any, depth: int) -> str:
        if isinstance(value, Enum):
            return f"{type(value).__name__}.{value.name}"
        if value is None or isinstance(value, (bool, int, float, complex, str, bytes)):
            return repr(value)
        if is_error(value):
            return f"{type(value).__name__}({display_message(value)!r})"
        if isinstance(value, (type,) + FUNCTION_TYPES):
            return function_repr(value)

        if isinstance(value, Mapping):
            return self._container(value, depth, "{", "}", self._mapping_items)
        if isinstance(value, list):
            return self._container(value, depth, "[", "]", self._sequence_items)
        if isinstance(value, tuple):
            if len(value) == 1:
                return self._container(value, depth, "(", ",)", self._sequence_items)
            return self._container(value, depth, "(", ")", self._sequence_items)
        if isinstance(value, (set, frozenset)):
            if not value:
                return f"{type(value).__name__}()"
            return self._container(value, depth, "{", "}", self._sequence_items)
        if dataclasses.is_dataclass(value) or has_default_repr(value):
            name = type(value).__name__
            return self._container(value, depth, f"{name}(", ")", self._field_items)

        return repr(value)

    def _container(
        self,
        value: Any,
        depth: int,
        opener: str,
        closer: str,
        items: Callable[[Any, int], List[str]],
    ) -> str:
        if id(value) in self.ancestors:
            return CIRCULAR
        if depth >= self.max_depth:
            return f"{opener}...{closer}"
        self.ancestors.add(id(value))
        try:
            return opener + ", ".join(items(value, depth + 1)) + closer
        finally:
            self.ancestors.discard(id(value))

    def _mapping_items(self, value: Mapping, depth: int) -> List[str]:
        return [
            f"{self.render(key, depth)}: {self.render(item, depth)}"
            for key, item in value.items()
        ]

    def _sequence_items(self, value: Any, depth: int) -> List[str]:
        return [self.render(item, depth) for item in value]

    def _field_items(self, value: Any, depth: int) -> List[str]:
        return [
            f"{name}={self.render(item, depth)}"
            for name, item in object_fields(value).items()
        ]
