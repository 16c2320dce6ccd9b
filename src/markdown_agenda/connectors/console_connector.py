# src/markdown_agenda/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState, *, prompt: str = "agenda> ") -> None:
    """
    Read slash commands until /exit, EOF or Ctrl+C.

    Leaving the loop closes the agenda view (the host-side close notification).
    """
    logger.info("Console connector started.")
    print("Use /help for commands, /open <row> to jump to a task, /exit to quit.\n")

    while True:
        try:
            user_input = input(prompt).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            response = "Not a command. Use /help to list available commands."
        print(response)

    state.controller.close()
    logger.info("Console connector finished.")
