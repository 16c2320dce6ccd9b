# src/markdown_agenda/tasks/task_scanner.py

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from ..core.location import encode_location
from .task_models import Task
from .task_parser import build_task, has_task, is_subtask

logger = logging.getLogger(__name__)


def scan_lines(lines: Sequence[str], file_id: str) -> list[Task]:
    """
    Extract tasks from one file's lines, in header order.

    After a header line, following subtask lines are collected; blank lines
    are skipped without ending the run, and the first other non-blank line
    ends it (that line is then checked as a header itself).
    """
    tasks: list[Task] = []
    i = 0
    while i < len(lines):
        if has_task(lines[i]):
            task = build_task(lines[i], encode_location(file_id, i))
            tasks.append(task)

            while i + 1 < len(lines):
                nxt = lines[i + 1]
                if is_subtask(nxt):
                    task.subtasks.append(nxt)
                elif nxt.strip():
                    break
                i += 1
        i += 1

    if tasks:
        logger.debug("Scanned %s: %d task(s)", file_id, len(tasks))
    return tasks


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Rank by status then priority; equal scores keep input order (sorted() is stable)."""
    return sorted(tasks, key=lambda t: t.score())
