"""Discord adapter — bridges discord.Client to RelayHandler.

RelayBot converts every discord.Message into an IncomingMessage and hands it
to the platform-agnostic RelayHandler. discord.py runs each event in its own
task, so a handler that raises only ends that one dispatch.
"""

import discord
from loguru import logger

from webhook_relay.config import RelayConfig
from webhook_relay.domain.relay import RelayHandler
from webhook_relay.ports.inbound import IncomingMessage


class DiscordMessageHandle:
    """MessageHandle implementation for one discord.Message."""

    def __init__(self, message: discord.Message):
        self._message = message

    async def send(self, text: str) -> discord.Message:
        return await self._message.channel.send(text)

    async def react(self, emoji: str) -> None:
        await self._message.add_reaction(emoji)


def to_incoming(message: discord.Message) -> IncomingMessage:
    """Convert a Discord message to platform-agnostic IncomingMessage."""
    return IncomingMessage(
        content=message.content,
        channel_id=message.channel.id,
        author_id=message.author.id,
        author_name=message.author.name,
        message_id=message.id,
        handle=DiscordMessageHandle(message),
    )


def relay_intents() -> discord.Intents:
    """Guild messages plus the privileged message content intent."""
    return discord.Intents(guilds=True, guild_messages=True, message_content=True)


class RelayBot(discord.Client):
    """Thin Discord client that delegates every message to RelayHandler."""

    def __init__(self, handler: RelayHandler, **discord_kwargs):
        super().__init__(intents=relay_intents(), **discord_kwargs)
        self._handler = handler

    @property
    def config(self) -> RelayConfig:
        return self._handler.config

    async def on_ready(self):
        logger.info("Discord bot logged in user={}", self.user)
        channel = self.get_channel(self.config.channel_id)
        if channel is None:
            logger.warning("Channel not visible to bot channel_id={}", self.config.channel_id)
        else:
            logger.info("Watching channel={} id={}", channel, channel.id)

    async def on_message(self, message: discord.Message):
        await self._handler.on_message(to_incoming(message))

    async def on_error(self, event_method: str, *args, **kwargs) -> None:
        logger.opt(exception=True).error("Event handler aborted event={}", event_method)
