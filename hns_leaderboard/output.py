"""Writing a rendered page to the terminal and to disk."""

from __future__ import annotations

import codecs
import logging
from pathlib import Path

from .console import Console
from .constants import DEFAULT_OUTPUT_ENCODING, DEFAULT_OUTPUT_ERRORS
from .exceptions import OutputWriteError

logger = logging.getLogger(__name__)

# Undefined in Python's cp1252 table, passed through as raw bytes by WHATWG windows-1252
_CP1252_PASSTHROUGH = frozenset("\x81\x8d\x8f\x90\x9d")


def _passthrough_errors(errors: str) -> str:
    """Register and name an error handler that writes the cp1252 gaps as raw bytes."""
    name = f"hns-cp1252-{errors}"
    try:
        codecs.lookup_error(name)
        return name
    except LookupError:
        pass

    fallback = codecs.lookup_error(errors)

    def handler(exc: UnicodeError):
        if not isinstance(exc, UnicodeEncodeError):
            return fallback(exc)
        source = exc.object
        end = exc.start
        while end < exc.end and source[end] in _CP1252_PASSTHROUGH:
            end += 1
        if end > exc.start:
            return source[exc.start : end].encode("latin-1"), end
        while end < exc.end and source[end] not in _CP1252_PASSTHROUGH:
            end += 1
        return fallback(UnicodeEncodeError(exc.encoding, source, exc.start, end, exc.reason))

    codecs.register_error(name, handler)
    return name


def encode_screen(
    text: str,
    encoding: str = DEFAULT_OUTPUT_ENCODING,
    errors: str = DEFAULT_OUTPUT_ERRORS,
) -> bytes:
    """Transcode rendered text to the legacy single-byte codepage.

    With the default error handler, characters the codepage cannot represent
    become numeric character references such as ``&#9608;``. The five code
    points windows-1252 leaves undefined are written as their raw bytes.
    """
    if codecs.lookup(encoding).name == "cp1252":
        errors = _passthrough_errors(errors)
    return text.encode(encoding, errors=errors)


def write_output(
    path: Path,
    text: str,
    encoding: str = DEFAULT_OUTPUT_ENCODING,
    errors: str = DEFAULT_OUTPUT_ERRORS,
) -> int:
    """Encode ``text`` and write it to ``path`` in a single write.

    Returns:
        Number of bytes written

    Raises:
        OutputWriteError: If encoding fails or the file cannot be written
    """
    try:
        payload = encode_screen(text, encoding, errors)
    except UnicodeEncodeError as exc:
        raise OutputWriteError(f"Cannot encode output as {encoding}: {exc}") from exc

    try:
        path.write_bytes(payload)
    except OSError as exc:
        raise OutputWriteError(f"Failed to write output file {path}: {exc}") from exc

    logger.debug(f"Wrote {len(payload)} bytes to {path}")
    return len(payload)


def print_screen(console: Console, text: str) -> None:
    """Show the ANSI-coloured page on the terminal."""
    console.print_ansi(text)


__all__ = ["encode_screen", "print_screen", "write_output"]
