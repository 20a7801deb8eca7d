"""Assembling the leaderboard page from its input files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .config import Config
from .exceptions import EmptyLeaderboardError
from .layout import LeaderboardPage, render_page
from .players import attach_baselines, load_players
from .screen import RandomSource, Screen
from .timeline import CompetitionPeriod
from .utils import read_text_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RenderRequest:
    """Inputs for one leaderboard render."""

    start: str
    end: str
    greeting_path: Path
    logo_path: Path
    start_data: Path
    data: Path
    now: Optional[str] = None


def load_page(request: RenderRequest, config: Config) -> LeaderboardPage:
    """Read and validate every input before anything is drawn.

    Raises:
        LeaderboardError: If any input is missing, malformed or degenerate
    """
    period = CompetitionPeriod.from_strings(
        request.start,
        request.end,
        now=request.now,
        timezone=config.competition.timezone,
    )
    greeting = read_text_file(request.greeting_path, "greeting")
    logo = read_text_file(request.logo_path, "logo")

    baseline = load_players(request.start_data, "start data")
    current = load_players(request.data, "data")
    players = attach_baselines(current, baseline)
    if not players:
        raise EmptyLeaderboardError(f"No players to rank in {request.data}")

    logger.info(f"Loaded {len(players)} players for day {period.current_day} of {period.last_day}")
    return LeaderboardPage(greeting=greeting, logo=logo, period=period, players=players)


def generate_leaderboard(
    request: RenderRequest,
    config: Optional[Config] = None,
    rng: Optional[RandomSource] = None,
) -> str:
    """Render the leaderboard page and return it with ANSI colour escapes."""
    config = config or Config()
    page = load_page(request, config)
    screen = Screen(config.screen.width, config.screen.height)
    render_page(screen, page, config.layout, rng)
    return screen.serialize()


__all__ = ["RenderRequest", "generate_leaderboard", "load_page"]
