"""Plain-text proportional bars."""
from __future__ import annotations

import math

from ..constants import GLYPH_BAR


def generate_bar(width: int, value: float, maximum: float, fill: str = GLYPH_BAR) -> str:
    """Build a bar of whole ``fill`` characters proportional to ``value / maximum``.

    Only full cells are drawn; any fractional remainder is left empty.

    Args:
        width: Number of cells a full bar occupies
        value: Current value (assumed non-negative)
        maximum: Value that fills the whole width

    Returns:
        ``floor(width * value / maximum)`` fill characters, or an empty string
        when ``maximum`` is not positive
    """
    if maximum <= 0:
        return ""

    length = width * (value / maximum)
    if not math.isfinite(length) or length <= 0:
        return ""

    return fill * math.floor(length)


__all__ = ["generate_bar"]
