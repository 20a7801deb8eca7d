"""Character-grid drawing primitives.

This package provides the drawing layer every page is built on:
- Position: signed grid coordinates
- Screen: fixed character and colour buffer with ANSI serialisation
- draw_box / draw_string: borders and text placement
- generate_bar: plain-text proportional bars
"""
from __future__ import annotations

from .bars import generate_bar
from .boxes import BoxCorner, BoxStyle, RandomSource, draw_box, draw_string
from .buffer import Screen
from .geometry import Position

__all__ = [
    "BoxCorner",
    "BoxStyle",
    "Position",
    "RandomSource",
    "Screen",
    "draw_box",
    "draw_string",
    "generate_bar",
]
