"""Webhook client using aiohttp."""

import asyncio

import aiohttp

from webhook_relay.ports.outbound import WebhookError, WebhookResponse


class AiohttpWebhookClient:
    """Unauthenticated GET-only client; one session per request, no retries."""

    async def get(self, url: str) -> WebhookResponse:
        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(url) as resp:
                    return WebhookResponse(
                        status=resp.status,
                        reason=resp.reason or "",
                        text=await self._read_text(resp),
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise WebhookError(str(e) or type(e).__name__) from e

    @staticmethod
    async def _read_text(resp: aiohttp.ClientResponse) -> str:
        try:
            return await resp.text()
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeDecodeError, LookupError):
            return ""
