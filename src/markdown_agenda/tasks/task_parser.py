# src/markdown_agenda/tasks/task_parser.py

"""
Line-level parsing: tag tokens, status/priority classification, Task construction.

Everything here is a pure function of the input line.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .task_models import (
    PRIORITY_DETECTION_ORDER,
    STATUS_DETECTION_ORDER,
    SUBTASK_MARKERS,
    Priority,
    Task,
    TaskStatus,
)

TOKEN_REGEX = re.compile(r"@\w+")


def tokenize(line: str) -> frozenset[str]:
    return frozenset(token.strip() for token in TOKEN_REGEX.findall(line))


def extract_status(tokens: Iterable[str]) -> TaskStatus:
    present = set(tokens)
    for status in STATUS_DETECTION_ORDER:
        if status.value in present:
            return status
    return TaskStatus.NONE


def extract_priority(tokens: Iterable[str]) -> Priority:
    present = set(tokens)
    for priority in PRIORITY_DETECTION_ORDER:
        if priority.value in present:
            return priority
    return Priority.NONE


def has_task(line: str) -> bool:
    return extract_status(tokenize(line)) != TaskStatus.NONE


def is_subtask(line: str) -> bool:
    return line.strip().startswith(SUBTASK_MARKERS)


def strip_tags(line: str) -> str:
    """Replace every tag with a single space (spacing around words is kept)."""
    return TOKEN_REGEX.sub(" ", line)


def build_task(line: str, location: str) -> Task:
    """
    Build a Task from a header line.

    Raises ValueError for lines without a status tag: a Task is never NONE.
    """
    tokens = tokenize(line)
    status = extract_status(tokens)
    if status == TaskStatus.NONE:
        raise ValueError(f"Line has no status tag: {line!r}")

    return Task(
        status=status,
        priority=extract_priority(tokens),
        text=strip_tags(line),
        location=location,
    )
