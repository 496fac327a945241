"""Exceptions raised by jsdoc_scaffold."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base exception for jsdoc_scaffold operations."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


class MalformedArgumentsError(ScaffoldError):
    """Raised when command-line arguments cannot be parsed (usage is shown)."""

    pass


class PathAccessError(ScaffoldError):
    """Raised when a path cannot be stat'ed, listed, read, created or written."""

    pass
