"""Port interfaces (Hexagonal Architecture)."""

from caramelbot.ports.inbound import InboundRequest, SlackEvent, SlashCommand
from caramelbot.ports.outbound import ChatPort, LLMPort, ResponseUrlPort, UserDirectoryPort

__all__ = [
    "InboundRequest",
    "SlackEvent",
    "SlashCommand",
    "ChatPort",
    "LLMPort",
    "ResponseUrlPort",
    "UserDirectoryPort",
]
