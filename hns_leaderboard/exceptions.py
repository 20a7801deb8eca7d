"""Custom exceptions for the leaderboard screen generator."""

from __future__ import annotations


class LeaderboardError(Exception):
    """Base exception for all leaderboard generation errors."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(LeaderboardError):
    """Raised when there's a configuration problem."""
    pass


class InvalidDateRangeError(ConfigurationError):
    """Raised when the competition period does not span at least one day."""
    pass


class EmptyLeaderboardError(ConfigurationError):
    """Raised when there are no players to rank."""
    pass


# =============================================================================
# Input Errors
# =============================================================================


class InputError(LeaderboardError):
    """Base exception for unusable input data."""
    pass


class InputFileError(InputError):
    """Raised when an input file is missing or unreadable."""

    def __init__(self, message: str, role: str | None = None):
        """Initialize input file error.

        Args:
            message: Error message
            role: What the file is used for (e.g., 'greeting', 'logo')
        """
        super().__init__(message)
        self.role = role


class InvalidDateError(InputError):
    """Raised when a timestamp is not valid RFC3339."""
    pass


class PlayerDataError(InputError):
    """Raised when a player snapshot is not valid JSON or has a bad shape."""

    def __init__(self, message: str, source: str | None = None):
        """Initialize player data error.

        Args:
            message: Error message
            source: Path of the snapshot that failed to load
        """
        super().__init__(message)
        self.source = source


# =============================================================================
# Output Errors
# =============================================================================


class OutputWriteError(LeaderboardError):
    """Raised when the rendered screen cannot be written."""
    pass
