"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MessageHandle(Protocol):
    """Reply/react handle bound to a single chat message."""

    async def send(self, text: str) -> Any: ...
    async def react(self, emoji: str) -> None: ...


@dataclass(frozen=True)
class IncomingMessage:
    """Discord/Slack/CLI-agnostic message representation.

    Built by the gateway adapter for one event dispatch and dropped afterwards.
    """

    content: str
    channel_id: int
    author_id: int
    author_name: str
    message_id: int
    handle: MessageHandle = field(repr=False, compare=False)
