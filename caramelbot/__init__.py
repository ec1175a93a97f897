"""CaramelBot: Slack to LLM webhook relay package."""

from caramelbot.config import AppConfig, __version__
from caramelbot.domain.auth import verify_slack_request
from caramelbot.domain.dispatcher import DispatchDecision, decide, extract_prompt
from caramelbot.domain.pipeline import FALLBACK_REPLY, ResponsePipeline
from caramelbot.ports.inbound import InboundRequest, SlackEvent, SlashCommand

__all__ = [
    "__version__",
    "AppConfig",
    "verify_slack_request",
    "DispatchDecision",
    "decide",
    "extract_prompt",
    "FALLBACK_REPLY",
    "ResponsePipeline",
    "InboundRequest",
    "SlackEvent",
    "SlashCommand",
]
