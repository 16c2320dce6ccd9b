# src/markdown_agenda/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, shows the agenda once, then hands
the terminal to the console connector for navigation and redraws.
"""

from __future__ import annotations

import asyncio
import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..errors import WorkspaceReadError
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    log_file = setup_logging(
        log_dir=settings.data_dir,
        log_name=f"{settings.app_name}.log",
        console_level=level_from_name(settings.log_level),
    )

    logger.info("Starting %s (workspace=%s)...", settings.app_name, settings.workspace_root)
    logger.debug("Logging to %s", log_file)

    state = create_initial_state(settings=settings)

    try:
        asyncio.run(state.controller.show_agenda())
    except WorkspaceReadError as e:
        # No partial agenda: a file that cannot be read fails the whole scan.
        logger.error("Agenda scan aborted: %s", e)
        sys.exit(1)

    run_console_loop(state)
    logger.info("Bye.")


if __name__ == "__main__":
    main()
