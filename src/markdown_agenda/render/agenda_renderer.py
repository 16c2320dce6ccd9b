# src/markdown_agenda/render/agenda_renderer.py

"""
Agenda formatting.

Pure functions of (tasks, show_subtasks):
- build_rows: one AgendaRow per task (the column contract),
- render_text: numbered console listing,
- render_html: standalone HTML table with links back to each location.

The HTML page is a read-only export: it carries no controls or script, so
the subtask mode is fixed at render time (the console posts the toggles).
"""

from __future__ import annotations

import html
from collections.abc import Sequence
from dataclasses import dataclass

from ..tasks.task_models import Task

HIDDEN_PLACEHOLDER = "hidden"
COLUMNS: tuple[str, ...] = ("Link", "Status", "Priority", "Project", "Task", "Subtasks")

CELL_STYLE = "border: 1px solid gray;"
DIV_STYLE = "margin: 10px 20px;"


@dataclass(slots=True, frozen=True)
class AgendaRow:
    link: str
    status: str
    priority: str
    project: str
    text: str
    subtasks: tuple[str, ...] | None  # None -> hidden


def build_rows(tasks: Sequence[Task], show_subtasks: bool) -> list[AgendaRow]:
    return [
        AgendaRow(
            link=t.location,
            status=t.status.value,
            priority=t.priority.value,
            project=t.project,
            text=t.text,
            subtasks=tuple(t.subtasks) if show_subtasks else None,
        )
        for t in tasks
    ]


def render_text(tasks: Sequence[Task], show_subtasks: bool) -> str:
    rows = build_rows(tasks, show_subtasks)
    if not rows:
        return "Agenda is empty."

    width = len(str(len(rows)))
    lines: list[str] = []
    for n, row in enumerate(rows, start=1):
        head = f"{n:>{width}}. {row.status:<5} {row.priority:<3} "
        if row.project:
            head += f"[{row.project}] "
        lines.append(head + " ".join(row.text.split()))
        pad = " " * (width + 2)
        if row.subtasks is None:
            if tasks[n - 1].subtasks:
                lines.append(f"{pad}({HIDDEN_PLACEHOLDER})")
        else:
            lines.extend(f"{pad}{sub.strip()}" for sub in row.subtasks)
        lines.append(f"{pad}{row.link}")
    return "\n".join(lines)


def _cell(content: str) -> str:
    return f'<td style="{CELL_STYLE}"><div style="{DIV_STYLE}">{content}</div></td>'


def _row_html(row: AgendaRow) -> str:
    if row.subtasks is None:
        subtasks_cell = f'<td style="{CELL_STYLE}">{HIDDEN_PLACEHOLDER}</td>'
    else:
        subtasks_cell = _cell("<br>".join(html.escape(s) for s in row.subtasks))

    link = html.escape(row.link, quote=True)
    cells = [
        f'<td style="{CELL_STYLE}"><div style="margin: 10px 10px;"><a href="{link}">link</a></div></td>',
        _cell(html.escape(row.status)),
        _cell(html.escape(row.priority)),
        _cell(html.escape(row.project)),
        _cell(html.escape(row.text)),
        subtasks_cell,
    ]
    return f'<tr style="{CELL_STYLE}">' + "".join(cells) + "</tr>"


def render_html(tasks: Sequence[Task], show_subtasks: bool, *, title: str = "Agenda") -> str:
    header = "".join(f'<th style="{CELL_STYLE}">{name}</th>' for name in COLUMNS)
    body = "\n".join(_row_html(row) for row in build_rows(tasks, show_subtasks))
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '<meta charset="UTF-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"<title>{html.escape(title)}</title>\n"
        "</head>\n"
        "<body>\n"
        f'<table style="{CELL_STYLE} border-collapse: collapse;">\n'
        f'<tr style="{CELL_STYLE}">{header}</tr>\n'
        f"{body}\n"
        "</table>\n"
        "</body>\n"
        "</html>\n"
    )
