#
# Copyright (C) 2026 TextScaler Developers — LGPL-3.0-or-later
#
"""
Value mapping

Pure conversions between the setting's own range, the unit interval
used by slider widgets, the integer range understood by monitors and
the fixed-decimal text shown in the entry field.

None of these functions validate bounds: degenerate ranges are
rejected by ScalerConfig before a mapper call can ever see them.
"""

from __future__ import annotations

import math
import re

from .util import clamp, scale


__all__ = [
    "clamp",
    "format_value",
    "from_slider_position",
    "is_default",
    "parse_value",
    "snap",
    "to_device_value",
    "to_slider_position",
]


# Plain decimal or scientific notation, no locale separators,
# no digit grouping, no inf/nan spellings.
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


def to_slider_position(value: float, min_: float, max_: float) -> float:
    """
    Project a value onto the unit interval.

    :param value: Value in the setting's range (clamped if outside)
    :param min_: Range minimum
    :param max_: Range maximum

    :return: Position in [0, 1]
    """
    return scale(value, min_, max_, 0.0, 1.0)


def from_slider_position(position: float, min_: float, max_: float) -> float:
    """
    Inverse of to_slider_position().

    :param position: Position in [0, 1] (clamped if outside)
    :param min_: Range minimum
    :param max_: Range maximum

    :return: Value in [min_, max_]
    """
    return scale(position, 0.0, 1.0, min_, max_)


def snap(value: float, decimals: int) -> float:
    """Round a value to the display precision."""
    return round(value, decimals)


def format_value(value: float, decimals: int) -> str:
    """
    Render a value with a fixed number of decimals.

    The output always uses '.' as separator and never shows a negative
    zero, so -0.001 at two decimals renders as "0.00".
    """
    text = f"{value:.{decimals}f}"
    if text.startswith("-") and float(text) == 0.0:
        text = text[1:]
    return text


def parse_value(text) -> float | None:
    """
    Parse user input.

    :param text: Raw entry text
    :return: The number, or None when the text is empty, not numeric,
             or not finite
    """
    if not isinstance(text, str):
        return None

    text = text.strip()
    if not _NUMBER_RE.match(text):
        return None

    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def is_default(value: float, default: float, decimals: int) -> bool:
    """
    Check whether a value is indistinguishable from the default at
    the given display precision.
    """
    return abs(value - default) < (10 ** -decimals) / 2


def to_device_value(value: float, min_: float, max_: float,
                    device_min: int = 0, device_max: int = 100) -> int:
    """
    Convert a value to the integer range of an external device.

    Halves round away from zero; the result is never truncated.

    :return: Integer in [device_min, device_max]
    """
    scaled = scale(value, min_, max_, device_min, device_max)
    rounded = int(math.floor(abs(scaled) + 0.5))
    if scaled < 0:
        rounded = -rounded
    return clamp(rounded, device_min, device_max)
