# src/markdown_agenda/tasks/task_api.py

from __future__ import annotations

import logging

from ..core.ports import FileSource
from ..errors import WorkspaceReadError
from .task_models import Task
from .task_scanner import scan_lines, sort_tasks

logger = logging.getLogger(__name__)


async def read_tasks(source: FileSource, *, skip_unreadable: bool = False) -> list[Task]:
    """
    Scan every discovered file, one at a time, in discovery order.

    A file that cannot be read aborts the whole scan with WorkspaceReadError,
    unless skip_unreadable is set (then it is logged and left out).
    """
    tasks: list[Task] = []
    paths = await source.discover()

    for path in paths:
        try:
            lines = await source.read_lines(path)
        except (OSError, UnicodeDecodeError) as e:
            if not skip_unreadable:
                raise WorkspaceReadError(path, e) from e
            logger.warning("Skipping unreadable file %s: %s", path, e)
            continue

        tasks.extend(scan_lines(lines, source.file_id(path)))

    logger.info("Scanned %d file(s), found %d task(s).", len(paths), len(tasks))
    return tasks


async def build_agenda(source: FileSource, *, skip_unreadable: bool = False) -> list[Task]:
    return sort_tasks(await read_tasks(source, skip_unreadable=skip_unreadable))
