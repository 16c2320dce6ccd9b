# tests/test_messages.py

from __future__ import annotations

import pytest

from markdown_agenda.core.messages import (
    FilterSubtasksMessage,
    OpenMessage,
    ShowSubtasksMessage,
    parse_message,
)
from markdown_agenda.errors import UnknownMessageError


def test_parse_known_commands() -> None:
    assert parse_message({"command": "open", "link": "file:///a.md#L2"}) == OpenMessage(
        link="file:///a.md#L2"
    )
    assert parse_message({"command": "filter-subtasks"}) == FilterSubtasksMessage()
    assert parse_message({"command": "show-subtasks"}) == ShowSubtasksMessage()


@pytest.mark.parametrize(
    "payload",
    [{}, {"command": "close"}, {"command": "open"}, {"command": "open", "link": 3}],
)
def test_parse_rejects_unknown_payloads(payload: dict) -> None:
    with pytest.raises(UnknownMessageError):
        parse_message(payload)
