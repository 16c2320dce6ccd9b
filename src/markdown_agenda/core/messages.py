# src/markdown_agenda/core/messages.py

"""
Inbound view messages.

Views post plain payloads such as {"command": "open", "link": "..."};
parse_message turns them into one of the three message types below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..errors import UnknownMessageError


@dataclass(slots=True, frozen=True)
class OpenMessage:
    link: str


@dataclass(slots=True, frozen=True)
class FilterSubtasksMessage:
    pass


@dataclass(slots=True, frozen=True)
class ShowSubtasksMessage:
    pass


ViewMessage = OpenMessage | FilterSubtasksMessage | ShowSubtasksMessage


def parse_message(payload: Mapping[str, Any]) -> ViewMessage:
    command = payload.get("command")
    if command == "open":
        link = payload.get("link")
        if not isinstance(link, str) or not link:
            raise UnknownMessageError(payload)
        return OpenMessage(link=link)
    if command == "filter-subtasks":
        return FilterSubtasksMessage()
    if command == "show-subtasks":
        return ShowSubtasksMessage()
    raise UnknownMessageError(payload)
