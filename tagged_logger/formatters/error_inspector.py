"""
Error inspection helpers

Exceptions passed to the logger are data: these helpers pull a display
message, a cause chain and stack text out of them without ever raising on
odd input such as empty messages or cyclic cause links.
"""

import os
import traceback
from typing import Any, Dict, List, Optional

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def is_error(value: Any) -> bool:
    """True for exception instances."""
    return isinstance(value, BaseException)


def error_name(error: BaseException) -> str:
    return type(error).__name__ or "Error"


def display_message(error: BaseException) -> str:
    """
    Get the text shown for an exception.

    Returns the exception message when non-empty, otherwise the exception
    class name, otherwise "Error". An exception whose __str__ fails is shown
    by its class name.
    """
    try:
        message = str(error)
    except Exception:
        return error_name(error)
    if message:
        return message
    return error_name(error)


def next_cause(error: BaseException) -> Optional[BaseException]:
    """
    Follow one "caused by" link.

    Explicit causes (raise ... from ...) win; otherwise the implicit context
    is used unless it was suppressed, matching the interpreter's own
    traceback output.
    """
    if error.__cause__ is not None:
        return error.__cause__
    if not error.__suppress_context__:
        return error.__context__
    return None


def cause_chain(error: BaseException) -> List[BaseException]:
    """
    Collect the cause chain of an exception.

    Walks cause links starting at error, stopping at the first missing or
    non-exception cause or at the first exception already visited (the root
    included). A self-referencing error gives [] and A -> B -> A gives [B].
    """
    causes: List[BaseException] = []
    seen = {id(error)}
    current = next_cause(error)
    while is_error(current):
        if id(current) in seen:
            break
        seen.add(id(current))
        causes.append(current)
        current = next_cause(current)
    return causes


def error_stack(error: BaseException) -> str:
    """
    Stack text for an exception, without chained exceptions.

    Raised exceptions give the full "Traceback (most recent call last)"
    block; exceptions that were never raised give just "Name: message".
    """
    return "".join(
        traceback.format_exception(type(error), error, error.__traceback__, chain=False)
    ).rstrip("\n")


def _error_details(error: BaseException) -> Dict[str, Any]:
    return {
        "name": error_name(error),
        "message": display_message(error),
        "stack": error_stack(error),
    }


def serialize_error(error: BaseException) -> Dict[str, Any]:
    """
    Structured form of an exception for JSON output.

    Returns:
        {"name", "message", "stack"} plus "causes" (same shape, not nested
        further) when the cause chain is non-empty
    """
    details = _error_details(error)
    causes = cause_chain(error)
    if causes:
        details["causes"] = [_error_details(cause) for cause in causes]
    return details


def capture_native_stack() -> str:
    """
    Stack of the current call site.

    Frames that belong to this package are dropped so the last frame is the
    code that called the logging API.
    """
    frames = [
        frame for frame in traceback.extract_stack()
        if not os.path.abspath(frame.filename).startswith(_PACKAGE_DIR + os.sep)
    ]
    return "".join(traceback.format_list(frames)).rstrip("\n")


def split_stack(stack: str) -> List[str]:
    """Non-blank lines of a stack text."""
    return [line for line in stack.splitlines() if line.strip()]
