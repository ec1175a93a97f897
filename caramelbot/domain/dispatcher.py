"""Decides whether an inbound Slack event gets a reply.

Pure Python, no framework dependencies.
"""

import re
import sys
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from caramelbot.ports.inbound import SlackEvent

# Only the first match is stripped; later mentions stay in the prompt.
MENTION_RE = re.compile(r"<@\w+>", re.ASCII)


def _log(msg: str):
    print(msg, file=sys.stderr)


@dataclass
class DispatchDecision:
    """Outcome of ``decide``. Prompt fields are only set when responding."""

    should_respond: bool
    prompt: Optional[str] = None
    user_id: Optional[str] = None
    channel: Optional[str] = None


def extract_prompt(text: str) -> str:
    """Drop the first ``<@ID>`` mention token and trim."""
    return MENTION_RE.sub("", text or "", count=1).strip()


def challenge_response(body: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """Echo for Slack's URL verification handshake, or None."""
    challenge = body.get("challenge")
    if challenge:
        return {"challenge": challenge}
    return None


def decide(event: SlackEvent, bot_user_id: str) -> DispatchDecision:
    """Apply the reply rules in order; the first match wins."""
    _log(f"Event type: {event.type}, Channel type: {event.channel_type}")

    if event.type == "app_mention":
        _log("App mention detected in a channel or MPIM")
    elif event.channel_type == "im":
        _log("Direct message (1:1 DM) detected")
    elif (
        event.channel_type == "mpim"
        and bot_user_id
        and f"<@{bot_user_id}>" in (event.text or "")
    ):
        _log("Multi-person DM (MPIM) detected with bot mention")
    else:
        _log("Event ignored: bot was not mentioned or not in a DM")
        return DispatchDecision(should_respond=False)

    prompt = extract_prompt(event.text)
    _log(f'Prompt extracted: "{prompt}"')
    return DispatchDecision(
        should_respond=True,
        prompt=prompt,
        user_id=event.user,
        channel=event.channel,
    )
