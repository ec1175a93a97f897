"""Domain layer: pure Python, no framework dependencies."""

from caramelbot.domain.auth import (
    REPLAY_WINDOW_SECONDS,
    compute_signature,
    verify_slack_request,
)
from caramelbot.domain.dispatcher import (
    DispatchDecision,
    challenge_response,
    decide,
    extract_prompt,
)
from caramelbot.domain.errors import (
    AuthenticationFailure,
    DeliveryFailure,
    RelayError,
    UpstreamGenerationFailure,
    UpstreamLookupFailure,
)
from caramelbot.domain.persona import BOT_PERSONA, build_system_prompt
from caramelbot.domain.pipeline import FALLBACK_REPLY, PLACEHOLDER_NAME, ResponsePipeline

__all__ = [
    "REPLAY_WINDOW_SECONDS",
    "compute_signature",
    "verify_slack_request",
    "DispatchDecision",
    "challenge_response",
    "decide",
    "extract_prompt",
    "AuthenticationFailure",
    "DeliveryFailure",
    "RelayError",
    "UpstreamGenerationFailure",
    "UpstreamLookupFailure",
    "BOT_PERSONA",
    "build_system_prompt",
    "FALLBACK_REPLY",
    "PLACEHOLDER_NAME",
    "ResponsePipeline",
]
