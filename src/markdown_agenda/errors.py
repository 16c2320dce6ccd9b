# src/markdown_agenda/errors.py

from __future__ import annotations

from pathlib import Path
from typing import Any


class AgendaError(Exception):
    """Base class for errors raised by the agenda package."""


class WorkspaceReadError(AgendaError):
    """A discovered file could not be opened or decoded."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to read {path}: {cause}")
        self.path = path
        self.cause = cause


class InvalidLocationError(AgendaError):
    def __init__(self, link: str) -> None:
        super().__init__(f"Not a task location: {link!r}")
        self.link = link


class UnknownMessageError(AgendaError):
    def __init__(self, payload: Any) -> None:
        super().__init__(f"Unknown view message: {payload!r}")
        self.payload = payload
