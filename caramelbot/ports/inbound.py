"""Inbound port: Slack payloads as plain dataclasses."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union
from urllib.parse import parse_qsl


@dataclass
class InboundRequest:
    """A webhook call as received.

    ``raw_body`` is what Slack signed. ``body`` is the parsed form and is only
    re-serialized for signing when no raw body exists.
    """

    headers: Mapping[str, str]
    raw_body: Union[bytes, str]
    body: Dict[str, Any] = field(default_factory=dict)

    def fallback_body(self) -> str:
        # Lossy: key order and escaping may differ from what Slack sent
        if not self.body:
            return ""
        return json.dumps(self.body, separators=(",", ":"), ensure_ascii=False)


@dataclass
class SlackEvent:
    """The ``event`` object of an Events API callback."""

    type: Optional[str] = None
    channel_type: Optional[str] = None
    text: str = ""
    user: Optional[str] = None
    channel: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "SlackEvent":
        return cls(
            type=payload.get("type"),
            channel_type=payload.get("channel_type"),
            text=payload.get("text") or "",
            user=payload.get("user"),
            channel=payload.get("channel"),
        )


@dataclass
class SlashCommand:
    """Form fields Slack sends for a slash command invocation."""

    command: str = ""
    text: str = ""
    user_id: str = ""
    user_name: str = ""
    response_url: str = ""

    @classmethod
    def from_form(cls, raw_body: Union[bytes, str]) -> "SlashCommand":
        if isinstance(raw_body, bytes):
            raw_body = raw_body.decode("utf-8")
        form = dict(parse_qsl(raw_body, keep_blank_values=True))
        return cls(
            command=form.get("command", ""),
            text=form.get("text", ""),
            user_id=form.get("user_id", ""),
            user_name=form.get("user_name", ""),
            response_url=form.get("response_url", ""),
        )

    @property
    def display_command(self) -> str:
        """Command with exactly one leading slash."""
        return "/" + self.command.lstrip("/")
