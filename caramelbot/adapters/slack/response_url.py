"""Slash command response URL client using aiohttp."""

from typing import Optional

import aiohttp

from caramelbot.domain.errors import DeliveryFailure

RESPONSE_TYPES = ("in_channel", "ephemeral")


class ResponseUrlClient:
    """POSTs ``{text, response_type}`` to a slash command's response URL."""

    async def respond(
        self,
        response_url: str,
        text: str,
        response_type: Optional[str] = None,
    ) -> None:
        payload = {"text": text}
        if response_type:
            if response_type not in RESPONSE_TYPES:
                raise ValueError(f"Unsupported response_type: {response_type!r}")
            payload["response_type"] = response_type

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(response_url, json=payload) as resp:
                    if resp.status >= 400:
                        body = await resp.text()
                        raise DeliveryFailure(f"HTTP {resp.status}: {body}")
        except DeliveryFailure:
            raise
        except Exception as e:
            raise DeliveryFailure(str(e)) from e
