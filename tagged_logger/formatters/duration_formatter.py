"""
Duration formatting for timer output

Styles:
    raw      "1234ms"
    long     "1 second, 234 milliseconds"
    short    "1 sec, 234 ms"
    narrow   "1s 234ms"
    digital  "0:00:01.234"
"""

from enum import Enum
from typing import Dict, List, NamedTuple, Tuple, Union


class TimerFormat(str, Enum):
    """Duration style for timer tags and JSON duration fields."""

    RAW = "raw"
    LONG = "long"
    SHORT = "short"
    NARROW = "narrow"
    DIGITAL = "digital"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, style: Union["TimerFormat", str]) -> "TimerFormat":
        if isinstance(style, cls):
            return style
        for member in cls:
            if member.value == style:
                return member
        raise ValueError(
            f'Invalid timer format: "{style}". '
            f'Valid formats: {", ".join(m.value for m in cls)}'
        )


class Duration(NamedTuple):
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


# (singular, plural) per unit and style
_UNIT_NAMES: Dict[TimerFormat, Tuple[Tuple[str, str], ...]] = {
    TimerFormat.LONG: (
        ("hour", "hours"),
        ("minute", "minutes"),
        ("second", "seconds"),
        ("millisecond", "milliseconds"),
    ),
    TimerFormat.SHORT: (("hr", "hr"), ("min", "min"), ("sec", "sec"), ("ms", "ms")),
    TimerFormat.NARROW: (("h", "h"), ("m", "m"), ("s", "s"), ("ms", "ms")),
}

_SEPARATORS: Dict[TimerFormat, str] = {
    TimerFormat.LONG: ", ",
    TimerFormat.SHORT: ", ",
    TimerFormat.NARROW: " ",
}


def ms_to_duration(ms: float) -> Duration:
    """Split milliseconds (rounded to a whole number) into clock units."""
    total = int(round(max(ms, 0)))
    hours, rest = divmod(total, 3_600_000)
    minutes, rest = divmod(rest, 60_000)
    seconds, milliseconds = divmod(rest, 1000)
    return Duration(hours, minutes, seconds, milliseconds)


def format_duration(ms: float, style: Union[TimerFormat, str] = TimerFormat.NARROW) -> str:
    """
    Format a duration in milliseconds.

    Args:
        ms: Elapsed milliseconds
        style: TimerFormat or its name

    Returns:
        Formatted duration; zero units are left out except when every unit
        is zero, which gives the millisecond unit ("0ms")
    """
    style = TimerFormat.from_string(style)
    if style is TimerFormat.RAW:
        return f"{int(round(ms))}ms"

    duration = ms_to_duration(ms)
    if style is TimerFormat.DIGITAL:
        return (
            f"{duration.hours}:{duration.minutes:02d}:"
            f"{duration.seconds:02d}.{duration.milliseconds:03d}"
        )

    names = _UNIT_NAMES[style]
    parts: List[str] = []
    for amount, (singular, plural) in zip(duration, names):
        if amount:
            parts.append(_unit(amount, singular if amount == 1 else plural, style))
    if not parts:
        parts.append(_unit(0, names[-1][1], style))
    return _SEPARATORS[style].join(parts)


def _unit(amount: int, name: str, style: TimerFormat) -> str:
    if style is TimerFormat.NARROW:
        return f"{amount}{name}"
    return f"{amount} {name}"
