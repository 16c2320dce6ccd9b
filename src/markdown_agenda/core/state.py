# src/markdown_agenda/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .controller import AgendaController


@dataclass
class AppState:
    # Settings are kept on the state so commands can read them without globals.
    settings: object
    controller: AgendaController
