"""Error kinds raised by style collection persistence."""
from __future__ import annotations

from pathlib import Path


class StyleError(Exception):
    """Base class for style registry failures."""


class StyleIOError(StyleError, OSError):
    """A styles file could not be read or written."""

    def __init__(self, path: str | Path, message: str, missing: bool = False) -> None:
        super().__init__(f"{path}: {message}")
        self.path = str(path)
        self.missing = missing


class StyleDecodeError(StyleError, ValueError):
    """A styles file is not valid JSON or holds an unusable style document."""

    def __init__(self, path: str | Path | None, message: str) -> None:
        prefix = f"{path}: " if path is not None else ""
        super().__init__(f"{prefix}{message}")
        self.path = str(path) if path is not None else None


class StyleEncodeError(StyleError, ValueError):
    """A collection could not be serialized."""


__all__ = ["StyleError", "StyleIOError", "StyleDecodeError", "StyleEncodeError"]
