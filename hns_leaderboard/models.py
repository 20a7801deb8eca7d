"""Domain models shared across the leaderboard screen generator."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, NonNegativeInt

from .constants import IMMORTAL_LEVEL_BONUS


class Player(BaseModel):
    """One entry of a player snapshot file."""

    model_config = ConfigDict(frozen=True)

    handle: str
    name: str
    level: NonNegativeInt
    experience: float
    immortal: NonNegativeInt
    start_immortal: Optional[NonNegativeInt] = None

    @property
    def immortal_gained(self) -> int:
        """Immortal tiers earned since the baseline snapshot."""
        if self.start_immortal is None:
            return self.immortal
        return self.immortal - self.start_immortal

    @property
    def total_level(self) -> int:
        """Level including the bonus for immortal tiers gained."""
        return self.level + self.immortal_gained * IMMORTAL_LEVEL_BONUS


__all__ = ["Player"]
