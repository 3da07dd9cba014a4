"""
Environment-derived capability flags

Color support is resolved once, when a logger is constructed, from an
injected environment mapping. Formatting code only ever sees the resulting
booleans.
"""

from typing import Any, Mapping, Optional

TRUECOLOR_VALUES = ("truecolor", "24bit")


def detect_color_support(environ: Mapping[str, str], stream: Any = None) -> bool:
    """
    Decide whether ANSI colors should be emitted.

    Args:
        environ: Environment variables
        stream: Primary output stream, probed with isatty() when present

    Returns:
        False if NO_COLOR is set, True if FORCE_COLOR is set, otherwise
        whether the stream is an interactive terminal
    """
    if "NO_COLOR" in environ:
        return False
    if "FORCE_COLOR" in environ:
        return True
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    return bool(isatty())


def detect_truecolor_support(environ: Mapping[str, str], use_color: bool) -> bool:
    """Truecolor needs color support and COLORTERM=truecolor|24bit."""
    if not use_color:
        return False
    return environ.get("COLORTERM") in TRUECOLOR_VALUES


def is_test_context(environ: Mapping[str, str]) -> bool:
    """True while pytest is running a test."""
    return "PYTEST_CURRENT_TEST" in environ


def resolve_flag(explicit: Optional[bool], detected: bool) -> bool:
    """Tri-state override: None keeps the detected value."""
    return detected if explicit is None else bool(explicit)
