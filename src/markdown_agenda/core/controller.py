# src/markdown_agenda/core/controller.py

"""
Agenda controller.

Owns the only long-lived state of the app:
- the optional handle to the open view (at most one per process),
- the last sorted task list and the current subtask display mode.

show_agenda() re-scans and reuses the open view if there is one.
View messages are dispatched by handle_message().
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..tasks.task_api import build_agenda
from ..tasks.task_models import Task
from .location import resolve_location
from .messages import FilterSubtasksMessage, OpenMessage, ShowSubtasksMessage, ViewMessage
from .ports import AgendaView, FileSource, LocationOpener

logger = logging.getLogger(__name__)

# Called with the controller's close callback; returns a fresh view.
ViewFactory = Callable[[Callable[[], None]], AgendaView]


class AgendaController:
    def __init__(
        self,
        source: FileSource,
        view_factory: ViewFactory,
        opener: LocationOpener,
        *,
        show_subtasks: bool = True,
        skip_unreadable: bool = False,
    ) -> None:
        self._source = source
        self._view_factory = view_factory
        self._opener = opener
        self._initial_show_subtasks = show_subtasks
        self._skip_unreadable = skip_unreadable

        self._view: AgendaView | None = None
        self.tasks: list[Task] = []
        self.show_subtasks = show_subtasks

    @property
    def view(self) -> AgendaView | None:
        return self._view

    async def show_agenda(self) -> None:
        """Scan the workspace and (re)render the agenda. Fails before touching the view."""
        tasks = await build_agenda(self._source, skip_unreadable=self._skip_unreadable)

        self.tasks = tasks
        self.show_subtasks = self._initial_show_subtasks

        if self._view is None:
            self._view = self._view_factory(self.on_view_closed)
            logger.debug("Agenda view created.")
        self._render()

    def handle_message(self, message: ViewMessage) -> None:
        if isinstance(message, OpenMessage):
            target = resolve_location(message.link)
            logger.debug("Opening %s line=%d", target.path, target.line)
            self._opener.open(target)
        elif isinstance(message, FilterSubtasksMessage):
            self.show_subtasks = False
            self._render()
        elif isinstance(message, ShowSubtasksMessage):
            self.show_subtasks = True
            self._render()
        else:
            raise TypeError(f"Unsupported message: {message!r}")

    def on_view_closed(self) -> None:
        """Host notification: the view is gone; the next show_agenda creates a new one."""
        if self._view is not None:
            logger.debug("Agenda view closed.")
        self._view = None

    def close(self) -> None:
        if self._view is not None:
            self._view.close()
        self._view = None

    def _render(self) -> None:
        if self._view is None:
            logger.debug("No open view; render skipped.")
            return
        self._view.set_content(self.tasks, show_subtasks=self.show_subtasks)
