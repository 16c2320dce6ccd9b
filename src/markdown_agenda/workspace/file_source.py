# src/markdown_agenda/workspace/file_source.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import aiofiles

from ..core.location import file_identity

logger = logging.getLogger(__name__)


class WorkspaceFileSource:
    """
    Files under a workspace root.

    Discovery:
    - matches `include_glob` relative to the root
    - skips anything below a directory named in `exclude_dirs`
    - returns paths sorted, so agenda order is stable across runs

    Loading decodes strictly and splits on "\\n" only ("\\r" stays in the line).
    """

    def __init__(
        self,
        root: str | Path,
        *,
        include_glob: str = "**/*.*",
        exclude_dirs: Iterable[str] = (),
        encoding: str = "utf-8",
    ) -> None:
        self.root = Path(root)
        self.include_glob = include_glob
        self.exclude_dirs = frozenset(exclude_dirs)
        self.encoding = encoding

    def _excluded(self, path: Path) -> bool:
        rel_parts = path.relative_to(self.root).parts[:-1]
        return any(part in self.exclude_dirs for part in rel_parts)

    async def discover(self) -> list[Path]:
        found = [
            p for p in self.root.glob(self.include_glob) if p.is_file() and not self._excluded(p)
        ]
        found.sort()
        logger.debug("Discovered %d file(s) under %s", len(found), self.root)
        return found

    async def read_lines(self, path: Path) -> list[str]:
        async with aiofiles.open(path, "r", encoding=self.encoding, newline="") as f:
            text = await f.read()
        return text.split("\n")

    def file_id(self, path: Path) -> str:
        return file_identity(path)
