"""Shared utility helpers for the leaderboard screen generator."""

from __future__ import annotations

import logging
from pathlib import Path

from .exceptions import InputFileError

logger = logging.getLogger(__name__)

__all__ = ["read_text_file"]


def read_text_file(path: Path, role: str) -> str:
    """Read a UTF-8 input file in full.

    Args:
        path: File to read
        role: What the file is used for, shown in error messages

    Returns:
        File contents

    Raises:
        InputFileError: If the file is missing, unreadable or not UTF-8
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise InputFileError(f"{role.capitalize()} file not found: {path}", role=role) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"{role.capitalize()} file could not be read: {path} ({exc})", role=role) from exc

    logger.debug(f"Read {role} file {path} ({len(text)} characters)")
    return text
