"""Fixed page layout for the leaderboard screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from .config import LayoutConfig
from .constants import (
    COLOR_DEFAULT,
    COLOR_GREEN,
    COLOR_MAGENTA,
    GLYPH_HORIZONTAL,
    PODIUM_COLORS,
    TIMESTAMP_DISPLAY_FORMAT,
)
from .models import Player
from .players import leaderboard, max_total_level
from .screen import BoxStyle, Position, RandomSource, Screen, draw_box, draw_string, generate_bar
from .timeline import CompetitionPeriod

# Page frame inset from every edge
FRAME_INSET = 3

GREETING_ORIGIN = Position(5, 7)
LOGO_ORIGIN = Position(4, 1)

STANDINGS_ORIGIN = Position(FRAME_INSET, 14)
STANDINGS_HEIGHT = 10
HEADER_HEIGHT = 2

UPDATED_COLUMN = 31
URL_COLUMN = 37

PROGRESS_ORIGIN = Position(52, 4)
PROGRESS_TRACK_INDENT = 5


@dataclass(frozen=True, slots=True)
class LeaderboardPage:
    """Everything drawn onto the page."""

    greeting: str
    logo: str
    period: CompetitionPeriod
    players: Sequence[Player]


def row_color(index: int) -> int:
    """Colour of the standings row at zero-based ``index``."""
    if index < len(PODIUM_COLORS):
        return PODIUM_COLORS[index]
    return COLOR_DEFAULT


def format_header(layout: LayoutConfig) -> str:
    """Column header above the standings."""
    return f"{layout.player_header:<{layout.handle_width + 2}} | {layout.level_header:>3}"


def format_player_row(rank: int, player: Player, max_level: int, layout: LayoutConfig) -> str:
    """One standings line: rank, handle, total level and a scaled bar."""
    bar = generate_bar(layout.player_bar_width, player.total_level, max_level)
    return f"{rank}) {player.handle:<{layout.handle_width - 1}} | {player.total_level:>4} {bar}"


def draw_frame(screen: Screen, rng: Optional[RandomSource] = None) -> None:
    draw_box(
        screen,
        Position(FRAME_INSET, FRAME_INSET),
        Position(screen.width - FRAME_INSET * 2, screen.height - FRAME_INSET * 2),
        BoxStyle.DECORATED,
        rng,
    )


def draw_standings(screen: Screen, page: LeaderboardPage, layout: LayoutConfig) -> None:
    """Draw the standings boxes, headings and player rows."""
    origin = STANDINGS_ORIGIN
    width = screen.width - origin.x * 2
    period = page.period

    draw_box(screen, origin, Position(width, STANDINGS_HEIGHT), BoxStyle.PLAIN)
    draw_box(screen, origin.offset(dy=-HEADER_HEIGHT), Position(width, HEADER_HEIGHT), BoxStyle.PLAIN)

    title = layout.title.format(current_day=period.current_day, last_day=period.last_day)
    draw_string(screen, Position(origin.x + 1, origin.y - 3), title, COLOR_GREEN)

    updated = f"            {layout.updated_label} {period.now.strftime(TIMESTAMP_DISPLAY_FORMAT)}"
    draw_string(screen, Position(UPDATED_COLUMN, origin.y - 3), updated, COLOR_MAGENTA)

    draw_string(screen, Position(origin.x + 1, origin.y - 1), format_header(layout), COLOR_DEFAULT)

    max_level = max_total_level(page.players)
    for index, player in enumerate(leaderboard(page.players, layout.max_rows)):
        draw_string(
            screen,
            Position(origin.x + 1, origin.y + 1 + index),
            format_player_row(index + 1, player, max_level, layout),
            row_color(index),
        )


def draw_footer(screen: Screen, layout: LayoutConfig) -> None:
    row = screen.height - 2
    draw_string(screen, Position(UPDATED_COLUMN, row), layout.visit_label, COLOR_GREEN)
    draw_string(screen, Position(URL_COLUMN, row), layout.footer_url, COLOR_DEFAULT)


def draw_progress(screen: Screen, period: CompetitionPeriod, layout: LayoutConfig) -> None:
    """Draw the competition progress percentage over a dashed track."""
    width = layout.progress_bar_width
    track = " " * PROGRESS_TRACK_INDENT + GLYPH_HORIZONTAL * width
    draw_string(screen, PROGRESS_ORIGIN, track, COLOR_MAGENTA)

    bar = generate_bar(width, period.current_day, period.last_day)
    draw_string(screen, PROGRESS_ORIGIN, f" {period.percentage}% {bar}", COLOR_DEFAULT)


def render_page(
    screen: Screen,
    page: LeaderboardPage,
    layout: Optional[LayoutConfig] = None,
    rng: Optional[RandomSource] = None,
) -> Screen:
    """Draw the complete leaderboard page onto ``screen``.

    Raises:
        EmptyLeaderboardError: If ``page`` has no players
    """
    layout = layout or LayoutConfig()

    draw_frame(screen, rng)
    draw_string(screen, GREETING_ORIGIN, page.greeting, COLOR_DEFAULT)
    draw_string(screen, LOGO_ORIGIN, page.logo, COLOR_GREEN)
    draw_standings(screen, page, layout)
    draw_footer(screen, layout)
    draw_progress(screen, page.period, layout)
    return screen


__all__ = [
    "LeaderboardPage",
    "draw_frame",
    "draw_footer",
    "draw_progress",
    "draw_standings",
    "format_header",
    "format_player_row",
    "render_page",
    "row_color",
]
