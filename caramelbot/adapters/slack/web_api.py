"""Slack Web API adapter: user lookup and chat.postMessage.

Implements UserDirectoryPort and ChatPort on top of slack_sdk's AsyncWebClient.
"""

from datetime import datetime
from typing import Optional

from slack_sdk.errors import SlackApiError
from slack_sdk.web.async_client import AsyncWebClient

from caramelbot.domain.errors import DeliveryFailure, UpstreamLookupFailure


class SlackWebAdapter:
    """Thin async wrapper; errors surface as relay error types."""

    def __init__(self, token: str, client: Optional[AsyncWebClient] = None):
        self._client = client or AsyncWebClient(token=token)

    async def lookup_name(self, user_id: str) -> str:
        try:
            result = await self._client.users_info(user=user_id)
        except SlackApiError as e:
            raise UpstreamLookupFailure(e.response.get("error", str(e))) from e
        except Exception as e:
            raise UpstreamLookupFailure(str(e)) from e

        user = result.get("user") or {}
        profile = user.get("profile") or {}
        name = profile.get("display_name") or user.get("real_name")
        if not name:
            raise UpstreamLookupFailure(f"No name on profile for {user_id}")
        return name

    async def post_message(self, channel: str, text: str) -> None:
        try:
            await self._client.chat_postMessage(channel=channel, text=text)
        except SlackApiError as e:
            raise DeliveryFailure(e.response.get("error", str(e))) from e
        except Exception as e:
            raise DeliveryFailure(str(e)) from e
        print(f"[{datetime.now().isoformat()}] Posted message to {channel}")
