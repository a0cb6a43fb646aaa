"""Tests for Discord adapter — IncomingMessage conversion and dispatch."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from webhook_relay.adapters.discord.adapter import (
    DiscordMessageHandle,
    RelayBot,
    relay_intents,
    to_incoming,
)
from webhook_relay.config import RelayConfig
from webhook_relay.domain.relay import FAILURE_REACTION, SUCCESS_REACTION, RelayHandler
from webhook_relay.ports.inbound import MessageHandle
from webhook_relay.ports.outbound import WebhookError, WebhookResponse


CHANNEL = 100
USER = 200
CONFIG = RelayConfig(
    channel_id=CHANNEL,
    target_user_id=USER,
    target_text="GO",
    webhook_url="http://x/hook",
    token="tok",
)


def _make_message(content: str, channel_id: int = CHANNEL, author_id: int = USER) -> MagicMock:
    """Create a fake discord.Message."""
    msg = MagicMock()
    msg.id = 42
    msg.content = content
    msg.channel = MagicMock()
    msg.channel.id = channel_id
    msg.channel.send = AsyncMock()
    msg.author = MagicMock()
    msg.author.id = author_id
    msg.author.name = "alice"
    msg.add_reaction = AsyncMock()
    return msg


def _make_bot(response=None, error=None) -> RelayBot:
    webhook = MagicMock()
    if error is not None:
        webhook.get = AsyncMock(side_effect=error)
    else:
        webhook.get = AsyncMock(return_value=response or WebhookResponse(status=200, text="ok"))
    handler = RelayHandler(CONFIG, webhook_factory=lambda: webhook)
    return RelayBot(handler)


class TestToIncoming:
    def test_fields(self):
        msg = _make_message(" GO ")
        incoming = to_incoming(msg)
        assert incoming.content == " GO "
        assert incoming.channel_id == CHANNEL
        assert incoming.author_id == USER
        assert incoming.author_name == "alice"
        assert incoming.message_id == 42
        assert isinstance(incoming.handle, DiscordMessageHandle)
        assert isinstance(incoming.handle, MessageHandle)


class TestDiscordMessageHandle:
    @pytest.mark.asyncio
    async def test_send_posts_in_same_channel(self):
        msg = _make_message("GO")
        await DiscordMessageHandle(msg).send("ok")
        msg.channel.send.assert_awaited_once_with("ok")

    @pytest.mark.asyncio
    async def test_react(self):
        msg = _make_message("GO")
        await DiscordMessageHandle(msg).react(SUCCESS_REACTION)
        msg.add_reaction.assert_awaited_once_with(SUCCESS_REACTION)


class TestIntents:
    def test_message_content_enabled(self):
        intents = relay_intents()
        assert intents.message_content is True
        assert intents.guild_messages is True
        assert intents.guilds is True

    def test_direct_messages_not_subscribed(self):
        intents = relay_intents()
        assert intents.dm_messages is False
        assert intents.dm_reactions is False


class TestRelayBotOnMessage:
    @pytest.mark.asyncio
    async def test_trigger_scenario(self):
        bot = _make_bot(response=WebhookResponse(status=200, reason="OK", text="ok"))
        msg = _make_message(" GO ")

        await bot.on_message(msg)

        msg.channel.send.assert_awaited_once_with("ok")
        msg.add_reaction.assert_awaited_once_with(SUCCESS_REACTION)

    @pytest.mark.asyncio
    async def test_content_mismatch_scenario(self):
        bot = _make_bot()
        msg = _make_message("NO")

        await bot.on_message(msg)

        msg.channel.send.assert_not_awaited()
        msg.add_reaction.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_wrong_channel_scenario(self):
        bot = _make_bot()
        msg = _make_message("GO", channel_id=999)

        await bot.on_message(msg)

        msg.channel.send.assert_not_awaited()
        msg.add_reaction.assert_awaited_once_with(FAILURE_REACTION)

    @pytest.mark.asyncio
    async def test_webhook_failure(self):
        bot = _make_bot(error=WebhookError("connection refused"))
        msg = _make_message("GO")

        await bot.on_message(msg)

        msg.channel.send.assert_not_awaited()
        msg.add_reaction.assert_awaited_once_with(FAILURE_REACTION)

    def test_config_exposed(self):
        assert _make_bot().config is CONFIG


class TestRelayBotEvents:
    @pytest.mark.asyncio
    async def test_on_error_logs_without_raising(self):
        bot = _make_bot()
        with patch("webhook_relay.adapters.discord.adapter.logger") as log:
            try:
                raise RuntimeError("reaction failed")
            except RuntimeError:
                await bot.on_error("on_message")
        log.opt.assert_called_once_with(exception=True)
        log.opt.return_value.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_on_ready_with_missing_channel(self):
        bot = _make_bot()
        with patch.object(RelayBot, "get_channel", return_value=None), \
                patch("webhook_relay.adapters.discord.adapter.logger") as log:
            await bot.on_ready()
        log.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_on_ready_with_channel(self):
        bot = _make_bot()
        channel = MagicMock()
        channel.id = CHANNEL
        with patch.object(RelayBot, "get_channel", return_value=channel) as get_channel, \
                patch("webhook_relay.adapters.discord.adapter.logger") as log:
            await bot.on_ready()
        get_channel.assert_called_once_with(CHANNEL)
        log.warning.assert_not_called()
