"""Grid coordinates used when drawing onto a screen."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Signed cell coordinate.

    Coordinates may point outside the screen; clipping happens when drawing.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def __add__(self, other: Position) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def offset(self, dx: int = 0, dy: int = 0) -> Position:
        """Return a copy moved by ``dx`` columns and ``dy`` rows."""
        return Position(self.x + dx, self.y + dy)


__all__ = ["Position"]
