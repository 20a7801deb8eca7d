"""Command line interface for the leaderboard screen generator."""

from __future__ import annotations

import logging
import os
import random
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import CONFIG_FILE, Config
from .console import Console
from .exceptions import LeaderboardError
from .generator import RenderRequest, generate_leaderboard
from .output import print_screen, write_output

app = typer.Typer(help="Render a plain text leaderboard screen for the Hack'n'Slash competition.")
config_app = typer.Typer(help="Manage configuration settings")
app.add_typer(config_app, name="config")

console = Console()
logger = logging.getLogger(__name__)


def _load_config(path: Path) -> Config:
    """Load configuration, exiting with a message when it is invalid."""
    try:
        return Config.load(path)
    except ValueError as exc:
        console.print_error(exc, "Configuration error:")
        raise typer.Exit(code=1) from exc


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output for debugging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress the terminal rendition and other non-essential output",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored terminal output",
    ),
) -> None:
    """CLI entry-point callback for shared initialisation."""
    console.set_verbose(verbose)
    console.set_quiet(quiet)

    if no_color:
        os.environ["NO_COLOR"] = "1"
    console.no_color = no_color or bool(os.environ.get("NO_COLOR"))

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )


@app.command()
def render(
    start: str = typer.Option(
        ...,
        "--start",
        help="RFC3339 date for when the competition starts (e.g 2024-03-01T00:00:00+01:00)",
    ),
    end: str = typer.Option(
        ...,
        "--end",
        help="RFC3339 date for when the competition ends (e.g 2024-04-01T00:00:00+01:00)",
    ),
    greeting_path: Path = typer.Option(..., "--greeting-path", help="Greeting text file path"),
    logo_path: Path = typer.Option(..., "--logo-path", help="Logo text file path"),
    start_data: Path = typer.Option(
        ...,
        "--start-data",
        help="Path to initial player JSON data, used to calculate total level",
    ),
    data: Path = typer.Option(..., "--data", help="Path to current player JSON data"),
    output_path: Path = typer.Option(
        ...,
        "--output-path",
        "-o",
        help="The output path (e.g ./output.txt)",
    ),
    now: Optional[str] = typer.Option(
        None,
        "--now",
        help="RFC3339 timestamp to render as the current time (default: the clock)",
    ),
    seed: Optional[int] = typer.Option(
        None,
        "--seed",
        help="Seed for the border decoration, for reproducible output",
    ),
    config_path: Path = typer.Option(CONFIG_FILE, "--config", help="Configuration file path"),
) -> None:
    """Generate the leaderboard screen and write it in the legacy codepage.

    Examples:
        hns-leaderboard render --start 2024-03-01T00:00:00+01:00 \\
            --end 2024-04-01T00:00:00+01:00 --greeting-path greeting.txt \\
            --logo-path logo.txt --start-data start.json --data players.json \\
            -o output.txt
    """
    config = _load_config(config_path)
    request = RenderRequest(
        start=start,
        end=end,
        greeting_path=greeting_path,
        logo_path=logo_path,
        start_data=start_data,
        data=data,
        now=now,
    )
    rng = random.Random(seed) if seed is not None else None

    try:
        text = generate_leaderboard(request, config, rng)
        print_screen(console, text)
        written = write_output(output_path, text, config.output.encoding, config.output.errors)
    except LeaderboardError as exc:
        logger.debug("Render failed", exc_info=True)
        console.print_error(exc)
        raise typer.Exit(code=1) from exc

    console.log(f"Wrote {written} bytes to {output_path}")


# ============================================================================
# Configuration Commands
# ============================================================================


@config_app.command("show")
def config_show(
    config_path: Path = typer.Option(CONFIG_FILE, "--config", help="Configuration file path"),
) -> None:
    """Display current configuration settings."""
    config = _load_config(config_path)

    table = Table(
        title="Leaderboard Configuration",
        box=box.ROUNDED,
        title_style="title",
        border_style="frame",
        expand=True,
        show_lines=True,
    )
    table.add_column("Section", style="label", no_wrap=True)
    table.add_column("Values", style="value")

    for section, values in config.to_display_dict().items():
        if not isinstance(values, dict):
            continue
        rendered_values = "\n".join(
            f"[label]{k}[/]: [value]{escape(repr(v) if isinstance(v, str) else str(v))}[/]"
            for k, v in values.items()
        )
        table.add_row(f"[accent]{section}[/]", rendered_values)

    console.print(table)


@config_app.command("get")
def config_get(
    key: str = typer.Argument(..., help="Configuration key in dot notation (e.g. layout.max_rows)"),
    config_path: Path = typer.Option(CONFIG_FILE, "--config", help="Configuration file path"),
) -> None:
    """Get a configuration value.

    Examples:
        hns-leaderboard config get layout.max_rows
        hns-leaderboard config get competition.timezone
    """
    config = _load_config(config_path)
    try:
        value = config.get_value(key)
    except ValueError as exc:
        console.print_error(exc)
        raise typer.Exit(code=1) from exc
    console.print(f"{key} = {escape(str(value))}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key in dot notation (e.g. layout.max_rows)"),
    value: str = typer.Argument(..., help="Value to set"),
    config_path: Path = typer.Option(CONFIG_FILE, "--config", help="Configuration file path"),
) -> None:
    """Set a configuration value.

    Examples:
        hns-leaderboard config set layout.max_rows 5
        hns-leaderboard config set output.encoding latin-1
    """
    config = _load_config(config_path)
    try:
        config.set_value(key, value)
        config.dump(config_path)
    except ValueError as exc:
        console.print_error(exc)
        raise typer.Exit(code=1) from exc
    console.print_success(f"✓ Configuration updated: {escape(key)} = {escape(value)}")


@config_app.command("init")
def config_init(
    config_path: Path = typer.Option(CONFIG_FILE, "--config", help="Configuration file path"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing configuration file"),
) -> None:
    """Write a configuration file with the default settings."""
    if config_path.exists() and not force:
        console.print_warning(f"Configuration already exists at {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    Config().dump(config_path)
    console.print_success(f"✓ Configuration written to {config_path}")


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "main"]
