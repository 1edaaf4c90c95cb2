"""Text and numeric helpers for game-client message handling.

Rounding here is half-up (``2.5 -> 3``, ``-2.5 -> -2``), not Python's
round-half-to-even.
"""

from __future__ import annotations

import math
import re

__all__ = [
    "class_from_template",
    "clear_string",
    "decimal",
    "degrees",
    "race_from_template",
    "split_string",
]

_FONT = re.compile(r"<FONT>(.*?)</FONT>")

# templateId = 10101 + race * 100 + class
_TEMPLATE_BASE = 10101


def _round_half_up(x: float) -> float:
    # NaN and infinities pass through unchanged.
    if not math.isfinite(x):
        return x
    return math.floor(x + 0.5)


def clear_string(raw: str) -> str | None:
    """Return the text inside the first ``<FONT>...</FONT>`` element, if any."""
    match = _FONT.search(raw)
    if match is None:
        return None
    return match.group(1)


def split_string(text: str) -> list[str]:
    """Strip and lowercase ``text``, then split it on single spaces."""
    return text.strip().lower().split(" ")


def degrees(radians: float) -> str:
    """Convert radians to a whole-degree string such as ``"90°"``.

    Non-finite input renders as ``"nan°"``, ``"inf°"`` or ``"-inf°"``.
    """
    value = _round_half_up(radians / math.pi * 180)
    if math.isfinite(value):
        value = int(value)
    return f"{value}\N{DEGREE SIGN}"


def decimal(number: float, places: int) -> float:
    """Round ``number`` half-up to ``places`` decimal places."""
    scale = 10**places
    return _round_half_up(number * scale) / scale


def race_from_template(template_id: int) -> int:
    """Return the race id encoded in a character templateId."""
    return math.trunc((template_id - _TEMPLATE_BASE) / 100)


def class_from_template(template_id: int) -> int:
    """Return the class id encoded in a character templateId."""
    # fmod keeps the dividend's sign, unlike the % operator.
    return int(math.fmod(template_id - _TEMPLATE_BASE, 100))
