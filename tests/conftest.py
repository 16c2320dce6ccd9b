# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from markdown_agenda.core.controller import AgendaController
from markdown_agenda.core.state import AppState

from .fakes import FakeFileSource, FakeOpener, FakeViewFactory

NOTES = [
    "# Week",
    "@TODO write spec @P1",
    "  [ ] outline",
    "",
    "  [x] draft",
    "some notes",
    "@DONE ship release @P0",
    "@WAIT review from ops",
]

BACKLOG = [
    "@TODO fix login @P0",
    "- [-] reproduce",
]


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and commands.

    A SimpleNamespace keeps unit tests independent of the process environment.
    """
    return SimpleNamespace(
        app_name="agenda",
        log_level="INFO",
        data_dir=tmp_path / "data",
        workspace_root=tmp_path / "ws",
        include_glob="**/*.*",
        exclude_dirs=[".git"],
        encoding="utf-8",
        skip_unreadable=False,
        show_subtasks=True,
        html_path=None,
        editor=None,
    )


@pytest.fixture()
def source() -> FakeFileSource:
    return FakeFileSource({"notes.md": list(NOTES), "backlog.txt": list(BACKLOG)})


@pytest.fixture()
def views() -> FakeViewFactory:
    return FakeViewFactory()


@pytest.fixture()
def opener() -> FakeOpener:
    return FakeOpener()


@pytest.fixture()
def controller(source: FakeFileSource, views: FakeViewFactory, opener: FakeOpener) -> AgendaController:
    return AgendaController(source, views, opener)


@pytest.fixture()
def state(settings: SimpleNamespace, controller: AgendaController) -> AppState:
    return AppState(settings=settings, controller=controller)
