"""Configuration utilities for the leaderboard CLI."""

from __future__ import annotations

import codecs
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

try:
    import tomllib as tomli  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover - fallback for older runtimes
    import tomli  # type: ignore[no-redef]
from pydantic import BaseModel, ValidationError, field_validator
from tomli_w import dump as toml_dump

from .constants import (
    DEFAULT_OUTPUT_ENCODING,
    DEFAULT_OUTPUT_ERRORS,
    DEFAULT_TIMEZONE,
    LAYOUT_DEFAULTS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
)

CONFIG_DIR = Path.home() / ".config" / "hns_leaderboard"
CONFIG_FILE = CONFIG_DIR / "config.toml"
CONFIG_VERSION = "1.0.0"

_ENCODE_ERROR_HANDLERS = ("strict", "replace", "ignore", "xmlcharrefreplace", "backslashreplace")


class ScreenConfig(BaseModel):
    """Dimensions of the rendered page."""

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT

    @field_validator("width", "height")
    @classmethod
    def validate_positive(cls, v: int, info) -> int:
        """Validate that dimensions are positive."""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive, got {v}")
        return v


class CompetitionConfig(BaseModel):
    """Settings for interpreting competition dates."""

    timezone: str = DEFAULT_TIMEZONE

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate that the timezone is a known IANA zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone: {v}") from exc
        return v


class LayoutConfig(BaseModel):
    """Text and sizing of the leaderboard page."""

    max_rows: int = LAYOUT_DEFAULTS["max_rows"]
    handle_width: int = LAYOUT_DEFAULTS["handle_width"]
    player_bar_width: int = LAYOUT_DEFAULTS["player_bar_width"]
    progress_bar_width: int = LAYOUT_DEFAULTS["progress_bar_width"]
    title: str = LAYOUT_DEFAULTS["title"]
    updated_label: str = LAYOUT_DEFAULTS["updated_label"]
    player_header: str = LAYOUT_DEFAULTS["player_header"]
    level_header: str = LAYOUT_DEFAULTS["level_header"]
    visit_label: str = LAYOUT_DEFAULTS["visit_label"]
    footer_url: str = LAYOUT_DEFAULTS["footer_url"]

    @field_validator("max_rows", "handle_width", "player_bar_width", "progress_bar_width")
    @classmethod
    def validate_positive(cls, v: int, info) -> int:
        """Validate that numeric fields are positive."""
        if v <= 0:
            raise ValueError(f"{info.field_name} must be positive, got {v}")
        return v

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate that the title only uses known placeholders."""
        try:
            v.format(current_day=0, last_day=0)
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(f"title may only use {{current_day}} and {{last_day}}: {v}") from exc
        return v


class OutputConfig(BaseModel):
    """How the rendered page is written to disk."""

    encoding: str = DEFAULT_OUTPUT_ENCODING
    errors: str = DEFAULT_OUTPUT_ERRORS

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate that Python knows the codec."""
        try:
            codecs.lookup(v)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {v}") from exc
        return v

    @field_validator("errors")
    @classmethod
    def validate_errors(cls, v: str) -> str:
        """Validate the encode error handler name."""
        if v not in _ENCODE_ERROR_HANDLERS:
            raise ValueError(f"errors must be one of {', '.join(_ENCODE_ERROR_HANDLERS)}, got {v}")
        return v


@dataclass(slots=True)
class Config:
    """Top-level configuration container."""

    version: str = CONFIG_VERSION
    screen: ScreenConfig = field(default_factory=ScreenConfig)
    competition: CompetitionConfig = field(default_factory=CompetitionConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def load(cls, path: Path = CONFIG_FILE) -> "Config":
        """Load configuration data from disk.

        Args:
            path: Optional override for the configuration file path.

        Returns:
            Config: The loaded configuration, or defaults if the file is absent.

        Raises:
            ValueError: If configuration file is corrupted or invalid.
        """

        if not path.exists():
            return cls()

        try:
            with path.open("rb") as handle:
                raw: Dict[str, Any] = tomli.load(handle)
        except (OSError, tomli.TOMLDecodeError) as exc:
            raise ValueError(f"Failed to parse configuration file: {exc}") from exc

        try:
            screen = ScreenConfig(**raw.get("screen", {}))
            competition = CompetitionConfig(**raw.get("competition", {}))
            layout = LayoutConfig(**raw.get("layout", {}))
            output = OutputConfig(**raw.get("output", {}))
        except (ValidationError, TypeError) as exc:
            raise ValueError(f"Invalid configuration: {exc}") from exc

        return cls(
            version=raw.get("version", CONFIG_VERSION),
            screen=screen,
            competition=competition,
            layout=layout,
            output=output,
        )

    def dump(self, path: Path = CONFIG_FILE, backup: bool = True) -> None:
        """Persist the configuration to disk.

        Args:
            path: Path to save the configuration file.
            backup: If True and config file exists, create a backup before overwriting.
        """

        path.parent.mkdir(parents=True, exist_ok=True)

        if backup and path.exists():
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            backup_path = path.parent / f"{path.stem}.{timestamp}.bak"
            shutil.copy2(path, backup_path)

        with path.open("wb") as handle:
            toml_dump(self.to_display_dict(), handle)

    def to_display_dict(self) -> Dict[str, Any]:
        """Return a serialisable representation of every section."""

        return {
            "version": self.version,
            "screen": self.screen.model_dump(),
            "competition": self.competition.model_dump(),
            "layout": self.layout.model_dump(),
            "output": self.output.model_dump(),
        }

    def _sections(self) -> Dict[str, BaseModel]:
        return {
            "screen": self.screen,
            "competition": self.competition,
            "layout": self.layout,
            "output": self.output,
        }

    def _resolve(self, key: str) -> tuple[BaseModel, str]:
        parts = key.split(".")
        if len(parts) != 2:
            raise ValueError(f"Invalid key format '{key}'. Expected format: section.field")

        section, field_name = parts
        sections = self._sections()

        if section not in sections:
            valid_sections = ", ".join(sections.keys())
            raise ValueError(f"Invalid section '{section}'. Valid sections: {valid_sections}")

        config_obj = sections[section]
        if field_name not in type(config_obj).model_fields:
            valid_fields = ", ".join(type(config_obj).model_fields.keys())
            raise ValueError(f"Invalid field '{field_name}' for section '{section}'. Valid fields: {valid_fields}")

        return config_obj, field_name

    def set_value(self, key: str, value: str) -> None:
        """Set a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., 'layout.max_rows')
            value: Value to set (converted to the field's type)

        Raises:
            ValueError: If key is invalid or value cannot be converted
        """
        config_obj, field_name = self._resolve(key)
        field_type = type(config_obj).model_fields[field_name].annotation

        try:
            converted_value: Any = int(value) if field_type is int else value
        except ValueError as exc:
            raise ValueError(f"Cannot convert '{value}' to {field_type} for {key}") from exc

        current_data = config_obj.model_dump()
        current_data[field_name] = converted_value
        try:
            validated_model = type(config_obj).model_validate(current_data)
        except ValidationError as exc:
            error_msg = "; ".join(
                f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}" for e in exc.errors()
            )
            raise ValueError(f"Validation error for {key}: {error_msg}") from exc

        setattr(self, key.split(".")[0], validated_model)

    def get_value(self, key: str) -> Any:
        """Get a configuration value using dot notation.

        Raises:
            ValueError: If key is invalid
        """
        config_obj, field_name = self._resolve(key)
        return getattr(config_obj, field_name)


__all__ = [
    "CONFIG_FILE",
    "CompetitionConfig",
    "Config",
    "LayoutConfig",
    "OutputConfig",
    "ScreenConfig",
]
