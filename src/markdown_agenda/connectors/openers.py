# src/markdown_agenda/connectors/openers.py

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable

from ..core.location import ResolvedLocation

logger = logging.getLogger(__name__)


class PrintOpener:
    """Fallback when no editor is configured: print "path:line" (1-based)."""

    def __init__(self, emit: Callable[[str], None] = print) -> None:
        self._emit = emit

    def open(self, location: ResolvedLocation) -> None:
        self._emit(f"{location.path}:{location.line + 1}")


class EditorOpener:
    """Open a location with `<editor> +<line> <path>` (vim, nano and emacs accept "+N")."""

    def __init__(self, editor: str) -> None:
        self._argv = shlex.split(editor)

    def open(self, location: ResolvedLocation) -> None:
        argv = [*self._argv, f"+{location.line + 1}", str(location.path)]
        logger.debug("Launching editor: %s", argv)
        subprocess.run(argv, check=False)
