# src/markdown_agenda/connectors/console_view.py

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Sequence
from pathlib import Path

from ..render.agenda_renderer import render_html, render_text
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)


class ConsoleAgendaView:
    """
    Agenda view printed to the terminal.

    If html_path is set, every render is also written there as a standalone page
    (atomic replace, so a browser reload never sees a half-written file).
    """

    def __init__(
        self,
        on_closed: Callable[[], None],
        *,
        emit: Callable[[str], None] = print,
        html_path: Path | None = None,
        title: str = "Agenda",
    ) -> None:
        self._on_closed = on_closed
        self._emit = emit
        self._html_path = html_path
        self._title = title
        self.closed = False

    def set_content(self, tasks: Sequence[Task], *, show_subtasks: bool) -> None:
        mode = "shown" if show_subtasks else "hidden"
        self._emit(f"== {self._title} ({len(tasks)} tasks, subtasks {mode}) ==")
        self._emit(render_text(tasks, show_subtasks))

        if self._html_path is not None:
            self._write_html(self._html_path, render_html(tasks, show_subtasks, title=self._title))

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self._on_closed()

    @staticmethod
    def _write_html(path: Path, page: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_suffix(".tmp")
        tmp.write_text(page, "utf-8")
        os.replace(tmp, path)
        logger.debug("Wrote HTML agenda to %s", path)
