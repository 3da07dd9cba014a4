"""
ANSI colors for text output

Module tags get a fixed magenta, or, on truecolor terminals, an RGB color
derived from a hash of the module name so every module keeps its own hue.
"""

import math
from functools import lru_cache
from typing import Dict, Tuple

from tagged_logger.core.log_level import LogLevel

COLORS: Dict[str, str] = {
    "reset": "\033[0m",
    "dim": "\033[2m",           # timestamp
    "gray": "\033[90m",         # debug
    "cyan": "\033[36m",         # info
    "yellow": "\033[33m",       # warn
    "red": "\033[31m",          # error
    "bright_red": "\033[91m",   # fatal
    "magenta": "\033[35m",      # module (fallback)
    "blue": "\033[34m",         # duration tag
}

LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: COLORS["gray"],
    LogLevel.INFO: COLORS["cyan"],
    LogLevel.WARN: COLORS["yellow"],
    LogLevel.ERROR: COLORS["red"],
    LogLevel.FATAL: COLORS["bright_red"],
}


def hash_string(text: str) -> int:
    """31-multiplier string hash wrapped to a signed 32-bit int, then made positive."""
    value = 0
    for char in text:
        value = ((value << 5) - value + ord(char)) & 0xFFFFFFFF
    if value & 0x80000000:
        value -= 0x100000000
    return abs(value)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[int, int, int]:
    """
    Convert HSL to RGB.

    Args:
        h: Hue in degrees, 0-360
        s: Saturation, 0-1
        l: Lightness, 0-1

    Returns:
        (r, g, b) with each channel in 0-255
    """
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return (
        _round_half_up((r + m) * 255),
        _round_half_up((g + m) * 255),
        _round_half_up((b + m) * 255),
    )


@lru_cache(maxsize=256)
def module_to_truecolor(module: str) -> str:
    """24-bit foreground escape for a module name."""
    hue = hash_string(module) % 360
    r, g, b = hsl_to_rgb(hue, 0.7, 0.6)
    return f"\033[38;2;{r};{g};{b}m"


class Colorizer:
    """Wraps text in ANSI escapes when color output is enabled."""

    def __init__(self, use_color: bool = False, use_truecolor: bool = False):
        self.use_color = use_color
        self.use_truecolor = use_color and use_truecolor

    def colorize(self, text: str, color: str) -> str:
        if not self.use_color or not color:
            return text
        return f"{color}{text}{COLORS['reset']}"

    def module_color(self, module: str) -> str:
        """Color for a module tag; empty when there is no module."""
        if not module:
            return ""
        return module_to_truecolor(module) if self.use_truecolor else COLORS["magenta"]

    def __repr__(self) -> str:
        return f"Colorizer(color={self.use_color}, truecolor={self.use_truecolor})"
