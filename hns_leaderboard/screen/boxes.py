"""Box borders and text placement on a screen."""
from __future__ import annotations

import random
from enum import Enum
from typing import Optional, Protocol

from ..constants import (
    COLOR_BORDER,
    COLOR_SPECKLE,
    GLYPH_CORNER,
    GLYPH_HORIZONTAL,
    GLYPH_SPECKLE,
    GLYPH_VERTICAL,
    SPECKLE_FAR_CHANCE,
    SPECKLE_NEAR_CHANCE,
)
from .buffer import Screen
from .geometry import Position


class RandomSource(Protocol):
    """Anything producing uniform floats in ``[0, 1)``."""

    def random(self) -> float: ...


class BoxStyle(str, Enum):
    """How box borders are drawn."""

    PLAIN = "plain"
    DECORATED = "decorated"


class BoxCorner(str, Enum):
    """Which corner of a box is being drawn."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


def _draw_speckles(screen: Screen, position: Position, outward: Position, rng: RandomSource) -> None:
    # Both rolls are always taken so a fixed sequence maps to fixed cells
    near = rng.random()
    far = rng.random()
    if near < SPECKLE_NEAR_CHANCE:
        screen.draw(GLYPH_SPECKLE, COLOR_SPECKLE, position + outward)
    if far < SPECKLE_FAR_CHANCE:
        screen.draw(GLYPH_SPECKLE, COLOR_SPECKLE, position + outward + outward)


def draw_horizontal_border(
    screen: Screen,
    position: Position,
    style: BoxStyle,
    top: bool,
    rng: RandomSource,
) -> None:
    """Draw one cell of a top or bottom edge."""
    screen.draw(GLYPH_HORIZONTAL, COLOR_BORDER, position)
    if style is BoxStyle.DECORATED:
        _draw_speckles(screen, position, Position(0, -1 if top else 1), rng)


def draw_vertical_border(
    screen: Screen,
    position: Position,
    style: BoxStyle,
    left: bool,
    rng: RandomSource,
) -> None:
    """Draw one cell of a left or right edge."""
    screen.draw(GLYPH_VERTICAL, COLOR_BORDER, position)
    if style is BoxStyle.DECORATED:
        _draw_speckles(screen, position, Position(-1 if left else 1, 0), rng)


def draw_corner(screen: Screen, position: Position, style: BoxStyle, corner: BoxCorner) -> None:
    """Draw a box corner.

    Every style and corner currently uses the same glyph.
    """
    screen.draw(GLYPH_CORNER, COLOR_BORDER, position)


def draw_box(
    screen: Screen,
    top_left: Position,
    size: Position,
    style: BoxStyle = BoxStyle.PLAIN,
    rng: Optional[RandomSource] = None,
) -> None:
    """Draw a rectangle from ``top_left`` to ``top_left + size``.

    Horizontal edges skip the corner columns; vertical edges cover
    ``[top, top + size.y)``. Corners are drawn last and overwrite whatever an
    edge put there.

    Args:
        screen: Target screen
        top_left: Corner of the box nearest the origin
        size: Offset from ``top_left`` to the opposite corner
        style: Border style
        rng: Source of speckle rolls for decorated boxes (module-level
            unseeded generator when omitted)
    """
    if rng is None:
        rng = random
    left, top = top_left.x, top_left.y
    right, bottom = left + size.x, top + size.y

    for x in range(left + 1, right):
        draw_horizontal_border(screen, Position(x, top), style, True, rng)
        draw_horizontal_border(screen, Position(x, bottom), style, False, rng)

    for y in range(top, bottom):
        draw_vertical_border(screen, Position(left, y), style, True, rng)
        draw_vertical_border(screen, Position(right, y), style, False, rng)

    draw_corner(screen, top_left, style, BoxCorner.TOP_LEFT)
    draw_corner(screen, Position(right, top), style, BoxCorner.TOP_RIGHT)
    draw_corner(screen, Position(left, bottom), style, BoxCorner.BOTTOM_LEFT)
    draw_corner(screen, Position(right, bottom), style, BoxCorner.BOTTOM_RIGHT)


def draw_string(screen: Screen, origin: Position, text: str, color: int) -> None:
    """Write ``text`` onto the screen starting one column right of ``origin``.

    The column is advanced before each character is placed. A newline
    returns to ``origin.x`` and moves down one row.
    """
    row = origin.y
    col = origin.x

    for char in text:
        if char == "\n":
            row += 1
            col = origin.x
            continue
        col += 1
        screen.draw(char, color, Position(col, row))


__all__ = [
    "BoxCorner",
    "BoxStyle",
    "RandomSource",
    "draw_box",
    "draw_corner",
    "draw_horizontal_border",
    "draw_string",
    "draw_vertical_border",
]
