# src/markdown_agenda/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on Protocols instead of concrete implementations.
This keeps file sources, views and editors swappable and makes testing easier.
"""

from collections.abc import Sequence
from pathlib import Path
from typing import Awaitable, Protocol

from ..tasks.task_models import Task
from .location import ResolvedLocation


class FileSource(Protocol):
    """Where the scan gets its files from (a workspace on disk, or a fake in tests)."""

    def discover(self) -> Awaitable[list[Path]]: ...

    def read_lines(self, path: Path) -> Awaitable[list[str]]: ...

    def file_id(self, path: Path) -> str: ...


class AgendaView(Protocol):
    """
    Host-side display of the agenda.

    The view owns presentation only; it reports user closes back to the
    controller through the callback passed at creation time.
    """

    def set_content(self, tasks: Sequence[Task], *, show_subtasks: bool) -> None: ...

    def close(self) -> None: ...


class LocationOpener(Protocol):
    def open(self, location: ResolvedLocation) -> None: ...
