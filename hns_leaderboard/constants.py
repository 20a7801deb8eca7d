"""Constants shared across the leaderboard screen generator."""

from __future__ import annotations

# =============================================================================
# Screen Dimensions
# =============================================================================

SCREEN_WIDTH = 75
SCREEN_HEIGHT = 27

# Longest handle the standings column is laid out for
MAX_HANDLE_LENGTH = 26

# =============================================================================
# Colours (SGR parameters)
# =============================================================================

COLOR_DEFAULT = 0
COLOR_RED = 31
COLOR_GREEN = 32
COLOR_YELLOW = 33
COLOR_MAGENTA = 35
COLOR_CYAN = 36

# Row colours for the podium places, first place first
PODIUM_COLORS = (COLOR_YELLOW, COLOR_CYAN, COLOR_RED)

ESCAPE_RESET = "\x1b[0m"
ESCAPE_COLOR = "\x1b[{}m"

# =============================================================================
# Glyphs
# =============================================================================

GLYPH_BLANK = " "
GLYPH_HORIZONTAL = "-"
GLYPH_VERTICAL = "|"
GLYPH_CORNER = "+"
GLYPH_SPECKLE = "."
GLYPH_BAR = "|"

COLOR_BORDER = COLOR_DEFAULT
COLOR_SPECKLE = COLOR_MAGENTA

# Probability of a speckle one and two cells outside a decorated border
SPECKLE_NEAR_CHANCE = 0.50
SPECKLE_FAR_CHANCE = 0.25

# =============================================================================
# Page Layout
# =============================================================================

LAYOUT_DEFAULTS = {
    "max_rows": 9,
    "handle_width": MAX_HANDLE_LENGTH,
    "player_bar_width": 30,
    "progress_bar_width": 12,
    "title": "[Topplistan - Dag {current_day} av {last_day}]",
    "updated_label": "Uppdaterad",
    "player_header": "SPELARE",
    "level_header": "LEVEL",
    "visit_label": "Besök \n               för en komplett topplista",
    "footer_url": "http://hacknslash.thisoldcabin.net",
}

TIMESTAMP_DISPLAY_FORMAT = "%Y-%m-%d %H:%M"

# =============================================================================
# Competition & Output
# =============================================================================

DEFAULT_TIMEZONE = "Europe/Stockholm"
DEFAULT_OUTPUT_ENCODING = "cp1252"
DEFAULT_OUTPUT_ERRORS = "xmlcharrefreplace"

# Bonus levels granted per immortal tier gained
IMMORTAL_LEVEL_BONUS = 100
