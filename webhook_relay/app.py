"""Process bootstrap: config, logging, Discord client lifecycle."""

import asyncio
import sys

import aiohttp
import discord
from loguru import logger

from webhook_relay.adapters.discord.adapter import RelayBot
from webhook_relay.adapters.http.webhook import AiohttpWebhookClient
from webhook_relay.config import ConfigError, RelayConfig, load_config
from webhook_relay.domain.relay import RelayHandler
from webhook_relay.log import setup_logging


def build_bot(config: RelayConfig) -> RelayBot:
    handler = RelayHandler(config, webhook_factory=AiohttpWebhookClient)
    return RelayBot(handler)


async def run(config: RelayConfig) -> None:
    """Connect and serve until the gateway connection ends.

    A gateway failure is logged, not raised; reconnection is left to discord.py.
    """
    bot = build_bot(config)
    logger.info("Bot starting... listening for target message in the configured channel")
    try:
        async with bot:
            await bot.start(config.token)
    except (discord.DiscordException, aiohttp.ClientError) as why:
        logger.error("Client ended with error why={!r}", why)


def main() -> int:
    setup_logging()
    try:
        config = load_config()
    except ConfigError as e:
        logger.error("Failed to load configuration: {}", e)
        return 1

    try:
        asyncio.run(run(config))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
