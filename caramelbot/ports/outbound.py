"""Outbound ports: interfaces for external system adapters."""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class LLMPort(Protocol):
    """Interface for text generation backends."""

    async def generate(self, prompt: str, user_name: str) -> str: ...


@runtime_checkable
class UserDirectoryPort(Protocol):
    """Resolves a Slack user id to a display name."""

    async def lookup_name(self, user_id: str) -> str: ...


@runtime_checkable
class ChatPort(Protocol):
    """Posts a message into a Slack channel or DM."""

    async def post_message(self, channel: str, text: str) -> None: ...


@runtime_checkable
class ResponseUrlPort(Protocol):
    """Posts a delayed reply to a slash command's response URL."""

    async def respond(
        self,
        response_url: str,
        text: str,
        response_type: Optional[str] = None,
    ) -> None: ...
