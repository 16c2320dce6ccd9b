# src/markdown_agenda/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task status, identified by a literal tag in the source line.

    NONE is never stored on a Task; it only means "this line is not a task".
    """

    TODO = "@TODO"
    WAIT = "@WAIT"
    DONE = "@DONE"
    NONE = "--"


class Priority(StrEnum):
    P0 = "@P0"
    P1 = "@P1"
    P2 = "@P2"
    NONE = "--"


# Which tag wins when several co-occur on one line (first match wins).
STATUS_DETECTION_ORDER: tuple[TaskStatus, ...] = (
    TaskStatus.TODO,
    TaskStatus.DONE,
    TaskStatus.WAIT,
)
PRIORITY_DETECTION_ORDER: tuple[Priority, ...] = (
    Priority.P0,
    Priority.P1,
    Priority.P2,
)

# Agenda ranking; lower index sorts first.
STATUS_SCORE_ORDER: tuple[TaskStatus, ...] = (
    TaskStatus.TODO,
    TaskStatus.WAIT,
    TaskStatus.DONE,
    TaskStatus.NONE,
)
PRIORITY_SCORE_ORDER: tuple[Priority, ...] = (
    Priority.P0,
    Priority.P1,
    Priority.P2,
    Priority.NONE,
)

SUBTASK_MARKERS: tuple[str, ...] = ("[ ]", "[-]", "[x]")


# Fields are fixed at construction; the scanner only appends to `subtasks`.
@dataclass(frozen=True, slots=True)
class Task:
    status: TaskStatus
    priority: Priority
    text: str
    location: str

    subtasks: list[str] = field(default_factory=list)
    project: str = ""

    def score(self) -> int:
        return STATUS_SCORE_ORDER.index(self.status) * 10 + PRIORITY_SCORE_ORDER.index(
            self.priority
        )
