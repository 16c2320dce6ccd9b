# src/markdown_agenda/core/location.py

"""
Location references: "<file-uri>#L<n>".

Encoding stores the zero-based line index of the header line.
Decoding hands the opener `n - 1`, so a link lands one line above the
encoded index. Both halves must stay as they are or existing links shift.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote, urlsplit

from ..errors import InvalidLocationError

FRAGMENT_PREFIX = "L"


@dataclass(slots=True, frozen=True)
class ResolvedLocation:
    path: Path
    line: int  # zero-based line handed to the opener


def file_identity(path: Path) -> str:
    return path.resolve().as_uri()


def encode_location(file_id: str, line_index: int) -> str:
    return f"{file_id}#{FRAGMENT_PREFIX}{line_index}"


def resolve_location(link: str) -> ResolvedLocation:
    parts = urlsplit(link)
    fragment = parts.fragment
    if parts.scheme != "file" or not fragment.startswith(FRAGMENT_PREFIX):
        raise InvalidLocationError(link)
    digits = fragment[len(FRAGMENT_PREFIX) :]
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidLocationError(link)

    return ResolvedLocation(path=Path(unquote(parts.path)), line=int(digits) - 1)
