"""Fixed-size character and colour buffer."""
from __future__ import annotations

from typing import List, Tuple

from ..constants import (
    COLOR_DEFAULT,
    ESCAPE_COLOR,
    ESCAPE_RESET,
    GLYPH_BLANK,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)
from .geometry import Position


class Screen:
    """A write-once page of ``width`` x ``height`` character cells.

    Every cell holds one character and an SGR colour code. Draws that fall
    outside the page are dropped without error, so layouts may place
    decoration at or past the edges.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"screen dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._chars: List[str] = [GLYPH_BLANK] * (width * height)
        self._colors: List[int] = [COLOR_DEFAULT] * (width * height)

    def contains(self, position: Position) -> bool:
        """Check whether ``position`` lies on the page."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def _index(self, position: Position) -> int:
        return position.x + position.y * self.width

    def draw(self, character: str, color: int, position: Position) -> None:
        """Overwrite one cell; positions off the page are ignored.

        Args:
            character: Single character to place
            color: SGR colour code (0 resets to the terminal default)
            position: Target cell
        """
        if not self.contains(position):
            return

        index = self._index(position)
        self._chars[index] = character
        self._colors[index] = color

    def cell(self, position: Position) -> Tuple[str, int]:
        """Return the ``(character, color)`` stored at ``position``.

        Raises:
            IndexError: If ``position`` is off the page
        """
        if not self.contains(position):
            raise IndexError(f"position {position} is outside {self.width}x{self.height} screen")
        index = self._index(position)
        return self._chars[index], self._colors[index]

    def rows(self) -> List[str]:
        """Return the plain characters of each row, without colours."""
        return [
            "".join(self._chars[row * self.width:(row + 1) * self.width])
            for row in range(self.height)
        ]

    def serialize(self) -> str:
        """Render the page as text with ANSI colour escapes.

        An escape is emitted only where the colour changes from the previous
        cell, including across row ends. The first colour is the default, so
        a blank page contains no escapes at all.

        Returns:
            Row-major text with a newline after every row
        """
        parts: List[str] = []
        last_color = COLOR_DEFAULT

        for row in range(self.height):
            start = row * self.width
            for index in range(start, start + self.width):
                color = self._colors[index]
                if color != last_color:
                    parts.append(ESCAPE_RESET if color == COLOR_DEFAULT else ESCAPE_COLOR.format(color))
                    last_color = color
                parts.append(self._chars[index])
            parts.append("\n")

        return "".join(parts)


__all__ = ["Screen"]
