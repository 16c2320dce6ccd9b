# src/markdown_agenda/cli/commands.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..core.messages import parse_message
from ..core.state import AppState
from ..errors import InvalidLocationError, WorkspaceReadError

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /open, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _post(state: AppState, payload: dict[str, str]) -> None:
    """Deliver a view payload the same way a rendered agenda page would post it."""
    state.controller.handle_message(parse_message(payload))


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_agenda(state: AppState, args: list[str]) -> str:
    try:
        asyncio.run(state.controller.show_agenda())
    except WorkspaceReadError as e:
        logger.error("Agenda scan aborted: %s", e)
        return f"Scan failed, agenda not updated: {e}"
    return f"{len(state.controller.tasks)} task(s)."


def cmd_open(state: AppState, args: list[str]) -> str:
    """
    /open 3                 -> open the 3rd row of the agenda
    /open file:///x.md#L4   -> open a location reference directly
    """
    if len(args) != 1:
        return "Usage: /open <row> or /open <location>."

    target = args[0]
    if target.isdigit():
        tasks = state.controller.tasks
        row = int(target)
        if row < 1 or row > len(tasks):
            return f"No row {row} (agenda has {len(tasks)} task(s))."
        link = tasks[row - 1].location
    else:
        link = target

    try:
        _post(state, {"command": "open", "link": link})
    except InvalidLocationError as e:
        return str(e)
    return f"Opened {link}"


def cmd_filter_subtasks(state: AppState, args: list[str]) -> str:
    _post(state, {"command": "filter-subtasks"})
    return "Subtasks hidden."


def cmd_show_subtasks(state: AppState, args: list[str]) -> str:
    _post(state, {"command": "show-subtasks"})
    return "Subtasks shown."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "agenda", cmd_agenda, help_text="Re-scan the workspace and redraw.", aliases=["refresh"]
)
registry.register("open", cmd_open, help_text="Open a task: /open <row> | /open <location>.")
registry.register(
    "filter-subtasks", cmd_filter_subtasks, help_text="Hide subtasks.", aliases=["hide"]
)
registry.register("show-subtasks", cmd_show_subtasks, help_text="Show subtasks.", aliases=["show"])
