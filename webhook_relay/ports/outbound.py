"""Outbound ports — interfaces for external system adapters."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


class WebhookError(RuntimeError):
    """The webhook request did not produce an HTTP response."""


@dataclass
class WebhookResponse:
    """Result of a webhook call that reached the server."""

    status: int
    reason: str = ""
    text: str = ""


@runtime_checkable
class WebhookPort(Protocol):
    """Interface for the outbound webhook caller."""

    async def get(self, url: str) -> WebhookResponse: ...
