"""Typed error hierarchy for glottis.

Every error raised on purpose by the package derives from ``GlottisError`` so
callers (and the CLI) can catch the whole family in one place.  The split
between kinds decides how far a failure propagates:

- ``ParseError`` / ``LocaleIOError``: fatal for the reference file, per-file
  skip for candidates.
- ``InvalidPathError``: a key path that cannot be walked or built.
- ``SnapshotError``: a preview artifact could not be written; aborts only
  the affected file.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "GlottisError",
    "InvalidKeyError",
    "InvalidPathError",
    "LocaleIOError",
    "ParseError",
    "SnapshotError",
    "format_error",
]


class GlottisError(Exception):
    """Base class for all errors raised by glottis."""


class ParseError(GlottisError):
    """A locale file is not valid JSON, or its root is not an object.

    Attributes:
        path:   File that failed to parse.
        detail: Human-readable reason.
        line:   1-based line of the failure when the decoder reports one.
        column: 1-based column of the failure when the decoder reports one.
    """

    def __init__(
        self,
        path: str | Path,
        detail: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.path = Path(path)
        self.detail = detail
        self.line = line
        self.column = column
        where = f"{self.path}:{line}:{column}" if line is not None else str(self.path)
        super().__init__(f"{where}: {detail}")


class LocaleIOError(GlottisError):
    """A locale file could not be read."""

    def __init__(self, path: str | Path, detail: str) -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"{self.path}: {detail}")


class InvalidPathError(GlottisError, ValueError):
    """A key path is empty or contains an empty segment."""


class InvalidKeyError(InvalidPathError):
    """A tree key cannot be expressed as a path segment.

    Raised for empty keys and for keys that contain the path separator,
    which would otherwise be indistinguishable from a nesting boundary.
    """

    def __init__(self, key: str, location: str, separator: str) -> None:
        self.key = key
        self.location = location
        self.separator = separator
        if key == "":
            reason = "empty key"
        else:
            reason = f"key {key!r} contains the path separator {separator!r}"
        where = location if location else "<root>"
        super().__init__(f"{reason} under {where}")


class SnapshotError(GlottisError):
    """A before/after snapshot pair could not be written."""

    def __init__(self, path: str | Path, detail: str) -> None:
        self.path = Path(path)
        self.detail = detail
        super().__init__(f"{self.path}: {detail}")


def format_error(e: BaseException) -> str:
    """Return a short uniform message like ``'ParseError: en.json:3:1: ...'``."""
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name
