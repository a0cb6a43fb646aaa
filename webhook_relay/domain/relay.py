"""Relay decision and webhook round-trip for a single incoming message.

Platform-agnostic: receives IncomingMessage from any gateway adapter and talks
to the webhook only through WebhookPort.
"""

import enum
from typing import Callable, Optional

from loguru import logger

from webhook_relay.config import RelayConfig
from webhook_relay.ports.inbound import IncomingMessage
from webhook_relay.ports.outbound import WebhookError, WebhookPort

SUCCESS_REACTION = "✅"
FAILURE_REACTION = "❌"


class Decision(enum.Enum):
    NO_MATCH = "no_match"
    CONTENT_MISMATCH = "content_mismatch"
    TRIGGER = "trigger"


def classify(msg: IncomingMessage, config: RelayConfig) -> Decision:
    """Channel and author gate first; content is only looked at after both match."""
    if msg.channel_id != config.channel_id or msg.author_id != config.target_user_id:
        return Decision.NO_MATCH
    if msg.content.strip() != config.target_text:
        return Decision.CONTENT_MISMATCH
    return Decision.TRIGGER


class RelayHandler:
    """Calls the webhook when the target author posts the target text."""

    def __init__(
        self,
        config: RelayConfig,
        webhook_factory: Callable[[], WebhookPort],
    ):
        self.config = config
        # A fresh client per trigger
        self._webhook_factory = webhook_factory

    async def on_message(self, msg: IncomingMessage) -> None:
        decision = classify(msg, self.config)

        if decision is Decision.NO_MATCH:
            await msg.handle.react(FAILURE_REACTION)
            logger.error(
                "User not matched channel={} message_id={} author={} author_id={}",
                msg.channel_id, msg.message_id, msg.author_name, msg.author_id,
            )
            return

        if decision is Decision.CONTENT_MISMATCH:
            return

        logger.info(
            "Target message detected channel={} message_id={} author={}",
            msg.channel_id, msg.message_id, msg.author_name,
        )
        await self._relay(msg)

    async def _relay(self, msg: IncomingMessage) -> None:
        webhook = self._webhook_factory()
        try:
            resp = await webhook.get(self.config.webhook_url)
        except WebhookError as e:
            await self._react_quietly(msg, FAILURE_REACTION)
            logger.error("Failed to send webhook request error={!r}", e)
            return

        logger.info(
            "Webhook request sent successfully status={} {}", resp.status, resp.reason
        )
        logger.debug("Response {!r}", resp)

        sent = await self._send_response(msg, resp.text)
        await msg.handle.react(SUCCESS_REACTION)
        logger.info("Sent response result={!r}", sent)

    @staticmethod
    async def _send_response(msg: IncomingMessage, text: str) -> Optional[object]:
        """Post the webhook body; a failed send is reported, not raised."""
        try:
            return await msg.handle.send(text)
        except Exception as e:
            logger.warning("Failed to send response error={!r}", e)
            return None

    @staticmethod
    async def _react_quietly(msg: IncomingMessage, emoji: str) -> None:
        try:
            await msg.handle.react(emoji)
        except Exception as e:
            logger.debug("Ignoring failed reaction emoji={} error={!r}", emoji, e)
