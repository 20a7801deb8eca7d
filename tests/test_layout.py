"""Tests for the leaderboard page layout."""

from __future__ import annotations

import pytest

from hns_leaderboard.config import LayoutConfig
from hns_leaderboard.exceptions import EmptyLeaderboardError
from hns_leaderboard.layout import (
    LeaderboardPage,
    format_header,
    format_player_row,
    render_page,
    row_color,
)
from hns_leaderboard.models import Player
from hns_leaderboard.players import rank_players
from hns_leaderboard.screen import Position, Screen
from hns_leaderboard.timeline import CompetitionPeriod


class NoSpeckles:
    def random(self) -> float:
        return 0.99


@pytest.fixture
def period() -> CompetitionPeriod:
    return CompetitionPeriod.from_strings(
        "2024-03-01T00:00:00+01:00",
        "2024-03-03T00:00:00+01:00",
        now="2024-03-02T00:00:00+01:00",
    )


@pytest.fixture
def players() -> list[Player]:
    return rank_players(
        Player(handle=f"player{i}", name=f"Player {i}", level=10 * i, experience=float(i), immortal=0)
        for i in range(1, 12)
    )


@pytest.fixture
def rendered(period, players) -> Screen:
    page = LeaderboardPage(greeting="Hej!\nVälkommen", logo="LOGO", period=period, players=players)
    return render_page(Screen(), page, rng=NoSpeckles())


def test_frame_and_standings_boxes(rendered):
    assert rendered.cell(Position(3, 3)) == ("+", 0)
    assert rendered.cell(Position(72, 24)) == ("+", 0)
    assert rendered.cell(Position(3, 12)) == ("+", 0)
    assert rendered.cell(Position(72, 14)) == ("+", 0)
    assert rendered.rows()[12][4:72] == "-" * 68


def test_greeting_and_logo(rendered):
    rows = rendered.rows()

    assert rows[7][6:10] == "Hej!"
    assert rows[8][6:15] == "Välkommen"
    assert rows[1][5:9] == "LOGO"
    assert rendered.cell(Position(5, 1)) == ("L", 32)


def test_title_and_update_time(rendered):
    row = rendered.rows()[11]

    assert row[5:30] == "[Topplistan - Dag 1 av 2]"
    assert "Uppdaterad 2024-03-02 00:00" in row
    assert rendered.cell(Position(5, 11)) == ("[", 32)
    assert rendered.cell(Position(44, 11)) == ("U", 35)


def test_standings_header(rendered):
    assert rendered.rows()[13][5:41] == "SPELARE" + " " * 21 + " | LEVEL"


def test_standings_rows_are_ranked_and_limited(rendered):
    rows = rendered.rows()

    assert rows[15][5:71] == f"1) {'player11':<25} |  110 " + "|" * 30
    assert rows[23][5:].startswith("9) player3")
    assert "player2" not in rows[24]


def test_standings_row_colors(rendered):
    assert rendered.cell(Position(5, 15)) == ("1", 33)
    assert rendered.cell(Position(5, 16)) == ("2", 36)
    assert rendered.cell(Position(5, 17)) == ("3", 31)
    assert rendered.cell(Position(5, 18)) == ("4", 0)


def test_competition_progress(rendered):
    assert rendered.rows()[4][53:70] == " 50% ||||||------"
    assert rendered.cell(Position(58, 4)) == ("|", 0)
    assert rendered.cell(Position(64, 4)) == ("-", 35)


def test_footer(rendered):
    rows = rendered.rows()

    assert rows[25][32:38] == "Besök "
    assert rows[25][38:72] == "http://hacknslash.thisoldcabin.net"
    assert rows[26][47:72] == "för en komplett topplista"
    assert rendered.cell(Position(38, 25)) == ("h", 0)
    assert rendered.cell(Position(32, 25)) == ("B", 32)


def test_layout_config_overrides(period, players):
    layout = LayoutConfig(max_rows=3, title="[Day {current_day}/{last_day}]", footer_url="example.org")
    page = LeaderboardPage(greeting="", logo="", period=period, players=players)

    rows = render_page(Screen(), page, layout, NoSpeckles()).rows()

    assert rows[11][5:15] == "[Day 1/2] "
    assert rows[17][5:].startswith("3) ")
    assert rows[18][5:71].strip() == ""
    assert "example.org" in rows[25]


def test_render_page_without_players_fails(period):
    page = LeaderboardPage(greeting="", logo="", period=period, players=[])

    with pytest.raises(EmptyLeaderboardError):
        render_page(Screen(), page, rng=NoSpeckles())


def test_format_helpers():
    layout = LayoutConfig()
    player = Player(handle="ace", name="Alice", level=50, experience=1.0, immortal=1)

    assert format_header(layout) == f"{'SPELARE':<28} | LEVEL"
    assert format_player_row(2, player, 300, layout) == f"2) {'ace':<25} |  150 " + "|" * 15
    assert row_color(0) == 33
    assert row_color(8) == 0
