"""Exceptions raised while building the site."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SiteError(Exception):
    """Base exception for all build errors."""


class InputError(SiteError):
    """Raised when the post list or the config file cannot be used."""

    def __init__(self, message: str, field: Optional[str] = None, index: Optional[int] = None) -> None:
        self.field = field
        self.index = index
        if index is not None and field:
            message = f"post #{index}, field '{field}': {message}"
        elif index is not None:
            message = f"post #{index}: {message}"
        super().__init__(message)


class ParseError(InputError):
    """Raised when the post list is not a JSON array."""


class WriteError(SiteError):
    """Raised when an output file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot write {path}: {reason}")
