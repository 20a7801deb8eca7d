"""Rich console pre-configured for the leaderboard CLI."""

from __future__ import annotations

from typing import Any

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.text import Text
from rich.theme import Theme

_default_theme = Theme(
    {
        "accent": "bold rgb(255,149,0)",
        "muted": "dim",
        "title": "bold rgb(120,200,255)",
        "label": "bold rgb(160,160,160)",
        "value": "rgb(240,240,240)",
        "info": "rgb(120,200,255)",
        "success": "bold rgb(104,255,203)",
        "warning": "bold rgb(255,213,128)",
        "danger": "bold rgb(255,128,128)",
        "frame": "rgb(112,141,242)",
    }
)


class Console(RichConsole):
    """Rich console with quiet/verbose switches and a custom theme."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:  # noqa: D401 - mirror rich API
        theme = kwargs.pop("theme", None) or _default_theme
        super().__init__(*args, theme=theme, **kwargs)
        self._verbose = False
        self._quiet = False

    def set_verbose(self, verbose: bool) -> None:
        """Enable or disable verbose output."""
        self._verbose = verbose

    def set_quiet(self, quiet: bool) -> None:
        """Enable or disable quiet mode."""
        self._quiet = quiet

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print with respect to quiet mode."""
        if not self._quiet:
            super().print(*args, **kwargs)

    def log(self, *args: Any, **kwargs: Any) -> None:
        """Log with respect to verbose mode."""
        if self._verbose and not self._quiet:
            super().log(*args, **kwargs)

    def print_ansi(self, text: str) -> None:
        """Print text that already carries ANSI colour escapes.

        The escapes are written through unchanged, even when the output is
        redirected. With colour disabled they are stripped instead.

        Args:
            text: Pre-rendered text with SGR escape sequences
        """
        if self._quiet:
            return
        if self.no_color:
            super().print(Text.from_ansi(text), highlight=False, soft_wrap=True)
            return
        self.file.write(text)
        self.file.flush()

    def print_error(self, error: Exception | str, context: str = "") -> None:
        """Print error message with consistent formatting.

        Errors are shown even in quiet mode.

        Args:
            error: Exception instance or error message string
            context: Optional context prefix (e.g., "Configuration error:")
        """
        label = context or "Error:"
        super().print(f"[danger]{label}[/] {escape(str(error))}")

    def print_success(self, message: str) -> None:
        """Print success message with consistent formatting."""
        self.print(f"[success]{message}[/]")

    def print_warning(self, message: str) -> None:
        """Print warning message with consistent formatting."""
        self.print(f"[warning]{message}[/]")


__all__ = ["Console"]
