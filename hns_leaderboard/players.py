"""Player snapshot loading and ranking."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple

from pydantic import TypeAdapter, ValidationError

from .exceptions import EmptyLeaderboardError, PlayerDataError
from .models import Player
from .utils import read_text_file

logger = logging.getLogger(__name__)

_PLAYER_LIST = TypeAdapter(List[Player])


def parse_players(payload: str, source: str = "<string>") -> List[Player]:
    """Parse a JSON array of player records.

    Args:
        payload: Raw JSON text
        source: Where the payload came from, used in error messages

    Raises:
        PlayerDataError: If the payload is not valid JSON or a record has
            missing or mistyped fields
    """
    try:
        return _PLAYER_LIST.validate_json(payload)
    except ValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc']) or '<root>'}: {error['msg']}"
            for error in exc.errors()
        )
        raise PlayerDataError(f"Invalid player data in {source}: {details}", source=source) from exc


def load_players(path: Path, role: str = "player data") -> List[Player]:
    """Read and parse a player snapshot file."""
    players = parse_players(read_text_file(path, role), source=str(path))
    logger.debug(f"Loaded {len(players)} players from {path}")
    return players


def attach_baselines(current: Iterable[Player], baseline: Iterable[Player]) -> List[Player]:
    """Copy each baseline immortal tier onto the current player with the same name.

    Names must match exactly. Players without a baseline keep
    ``start_immortal`` unset; any value the current snapshot carried is
    replaced.
    """
    start_immortal: Dict[str, int] = {}
    for player in baseline:
        start_immortal.setdefault(player.name, player.immortal)

    joined = [
        player.model_copy(update={"start_immortal": start_immortal.get(player.name)})
        for player in current
    ]

    unmatched = sum(1 for player in joined if player.start_immortal is None)
    if unmatched:
        logger.debug(f"{unmatched} players have no baseline snapshot entry")
    return joined


def _experience_key(experience: float) -> float:
    # NaN ranks below every real value
    return -math.inf if math.isnan(experience) else experience


def _sort_key(player: Player) -> Tuple[int, float]:
    return (player.total_level, _experience_key(player.experience))


def rank_players(players: Iterable[Player]) -> List[Player]:
    """Order players by total level, then experience, both descending."""
    return sorted(players, key=_sort_key, reverse=True)


def leaderboard(players: Iterable[Player], limit: int = 9) -> List[Player]:
    """Return the top ``limit`` ranked players."""
    return rank_players(players)[:limit]


def max_total_level(players: Sequence[Player]) -> int:
    """Return the highest total level, used to scale every player's bar.

    Raises:
        EmptyLeaderboardError: If there are no players
    """
    if not players:
        raise EmptyLeaderboardError("No players to rank")
    return max(player.total_level for player in players)


__all__ = [
    "attach_baselines",
    "leaderboard",
    "load_players",
    "max_total_level",
    "parse_players",
    "rank_players",
]
