"""Discord webhook relay — calls a webhook when a target message appears."""

__version__ = "0.1.0"

from webhook_relay.config import RelayConfig, ConfigError
from webhook_relay.ports.inbound import IncomingMessage, MessageHandle
from webhook_relay.ports.outbound import WebhookPort, WebhookResponse, WebhookError
from webhook_relay.domain.relay import Decision, RelayHandler, classify

__all__ = [
    "RelayConfig",
    "ConfigError",
    "IncomingMessage",
    "MessageHandle",
    "WebhookPort",
    "WebhookResponse",
    "WebhookError",
    "Decision",
    "RelayHandler",
    "classify",
]
