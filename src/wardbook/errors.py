"""Exception types raised by Wardbook."""

from __future__ import annotations

from pathlib import Path


class WardbookError(Exception):
    """Base class for all Wardbook errors."""


class PersistenceError(WardbookError):
    """Raised when a record or report file cannot be read or written."""

    def __init__(self, message: str, path: str | Path):
        super().__init__(f"{message}: {path}")
        self.path = Path(path)
