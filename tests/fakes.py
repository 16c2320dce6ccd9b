# tests/fakes.py

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from markdown_agenda.core.location import ResolvedLocation
from markdown_agenda.tasks.task_models import Task


class FakeFileSource:
    """
    In-memory FileSource.

    - files are discovered in insertion order
    - a value that is an exception instance is raised from read_lines
    """

    def __init__(self, files: dict[str, list[str] | BaseException]) -> None:
        self.files = files
        self.reads: list[str] = []

    async def discover(self) -> list[Path]:
        return [Path(name) for name in self.files]

    async def read_lines(self, path: Path) -> list[str]:
        self.reads.append(path.name)
        content = self.files[path.name]
        if isinstance(content, BaseException):
            raise content
        return list(content)

    def file_id(self, path: Path) -> str:
        return f"file:///{path.name}"


@dataclass
class Render:
    tasks: list[Task]
    show_subtasks: bool


@dataclass
class FakeView:
    """Records every render; close() notifies the controller like a host would."""

    on_closed: Callable[[], None]
    renders: list[Render] = field(default_factory=list)
    closed: bool = False

    def set_content(self, tasks: Sequence[Task], *, show_subtasks: bool) -> None:
        self.renders.append(Render(tasks=list(tasks), show_subtasks=show_subtasks))

    def close(self) -> None:
        self.closed = True
        self.on_closed()


@dataclass
class FakeViewFactory:
    views: list[FakeView] = field(default_factory=list)

    def __call__(self, on_closed: Callable[[], None]) -> FakeView:
        view = FakeView(on_closed=on_closed)
        self.views.append(view)
        return view


@dataclass
class FakeOpener:
    opened: list[ResolvedLocation] = field(default_factory=list)

    def open(self, location: ResolvedLocation) -> None:
        self.opened.append(location)
