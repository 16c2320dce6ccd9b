# src/markdown_agenda/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Every value has a default; running with no environment scans the current directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

ENV_PREFIX = "AGENDA"

DEFAULT_EXCLUDE_DIRS = [".git", "node_modules", "__pycache__", ".venv", ".local"]

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.replace(",", " ").split() if p.strip()]
    return parts


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    data_dir: Path

    # ---- Workspace scan ----
    workspace_root: Path
    include_glob: str
    exclude_dirs: List[str]
    encoding: str
    skip_unreadable: bool

    # ---- View ----
    show_subtasks: bool
    html_path: Optional[Path]
    editor: Optional[str]

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "agenda") or "agenda"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        data_dir = _env_path(_k("DATA_DIR"), Path(".local/agenda"))

        workspace_root = _env_path(_k("WORKSPACE"), Path("."))
        include_glob = _env(_k("INCLUDE_GLOB"), "**/*.*") or "**/*.*"
        exclude_dirs = _env_list(_k("EXCLUDE_DIRS"), DEFAULT_EXCLUDE_DIRS)
        encoding = _env(_k("ENCODING"), "utf-8") or "utf-8"
        skip_unreadable = _env_bool(_k("SKIP_UNREADABLE"), False)

        show_subtasks = _env_bool(_k("SHOW_SUBTASKS"), True)
        raw_html = _first_env(_k("HTML_PATH"), default=None)
        html_path = Path(raw_html).expanduser() if raw_html else None
        editor = _first_env(_k("EDITOR"), "EDITOR", default=None)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            workspace_root=workspace_root,
            include_glob=include_glob,
            exclude_dirs=exclude_dirs,
            encoding=encoding,
            skip_unreadable=skip_unreadable,
            show_subtasks=show_subtasks,
            html_path=html_path,
            editor=editor,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
