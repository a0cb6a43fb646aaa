"""Port interfaces (Hexagonal Architecture)."""

from webhook_relay.ports.inbound import IncomingMessage, MessageHandle
from webhook_relay.ports.outbound import WebhookPort, WebhookResponse, WebhookError

__all__ = [
    "IncomingMessage",
    "MessageHandle",
    "WebhookPort",
    "WebhookResponse",
    "WebhookError",
]
