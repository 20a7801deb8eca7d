"""Plain text leaderboard screen generator for the Hack'n'Slash competition."""

from __future__ import annotations

__version__ = "0.1.0"
