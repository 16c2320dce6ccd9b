# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from markdown_agenda.config import DEFAULT_EXCLUDE_DIRS, Settings

_VARS = (
    "AGENDA_APP_NAME",
    "AGENDA_WORKSPACE",
    "AGENDA_INCLUDE_GLOB",
    "AGENDA_EXCLUDE_DIRS",
    "AGENDA_SKIP_UNREADABLE",
    "AGENDA_SHOW_SUBTASKS",
    "AGENDA_HTML_PATH",
    "AGENDA_EDITOR",
    "EDITOR",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env: pytest.MonkeyPatch) -> None:
    s = Settings.from_env()

    assert s.app_name == "agenda"
    assert s.workspace_root == Path(".")
    assert s.include_glob == "**/*.*"
    assert s.exclude_dirs == DEFAULT_EXCLUDE_DIRS
    assert s.skip_unreadable is False
    assert s.show_subtasks is True
    assert s.html_path is None
    assert s.editor is None


def test_overrides(clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
    clean_env.setenv("AGENDA_WORKSPACE", str(tmp_path))
    clean_env.setenv("AGENDA_EXCLUDE_DIRS", ".git, build dist")
    clean_env.setenv("AGENDA_SKIP_UNREADABLE", "yes")
    clean_env.setenv("AGENDA_SHOW_SUBTASKS", "off")
    clean_env.setenv("AGENDA_HTML_PATH", str(tmp_path / "agenda.html"))
    clean_env.setenv("EDITOR", "vim")

    s = Settings.from_env()

    assert s.workspace_root == tmp_path
    assert s.exclude_dirs == [".git", "build", "dist"]
    assert s.skip_unreadable is True
    assert s.show_subtasks is False
    assert s.html_path == tmp_path / "agenda.html"
    assert s.editor == "vim"


def test_agenda_editor_wins_over_editor(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("EDITOR", "nano")
    clean_env.setenv("AGENDA_EDITOR", "code -g")

    assert Settings.from_env().editor == "code -g"
