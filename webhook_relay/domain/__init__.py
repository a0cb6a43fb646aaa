"""Domain layer — pure Python, no framework dependencies."""

from webhook_relay.domain.relay import Decision, RelayHandler, classify

__all__ = [
    "Decision",
    "RelayHandler",
    "classify",
]
