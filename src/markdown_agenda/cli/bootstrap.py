# src/markdown_agenda/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the workspace source, console view and location opener into the controller.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..config import get_settings
from ..connectors.console_view import ConsoleAgendaView
from ..connectors.openers import EditorOpener, PrintOpener
from ..core.controller import AgendaController
from ..core.ports import AgendaView, LocationOpener
from ..core.state import AppState
from ..workspace.file_source import WorkspaceFileSource

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, emit: Callable[[str], None] = print) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    source = WorkspaceFileSource(
        settings.workspace_root,
        include_glob=settings.include_glob,
        exclude_dirs=settings.exclude_dirs,
        encoding=settings.encoding,
    )

    opener: LocationOpener
    if settings.editor:
        opener = EditorOpener(settings.editor)
    else:
        opener = PrintOpener(emit)

    def view_factory(on_closed: Callable[[], None]) -> AgendaView:
        return ConsoleAgendaView(
            on_closed,
            emit=emit,
            html_path=settings.html_path,
            title=str(settings.app_name).capitalize(),
        )

    controller = AgendaController(
        source,
        view_factory,
        opener,
        show_subtasks=settings.show_subtasks,
        skip_unreadable=settings.skip_unreadable,
    )
    logger.debug("Workspace root: %s", settings.workspace_root)
    return AppState(settings=settings, controller=controller)
