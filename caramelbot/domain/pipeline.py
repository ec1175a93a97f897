"""Response pipeline: name lookup, generation, delivery.

Talks to the outside world only through the outbound ports, so it can be
tested with mock ports.
"""

import sys

from caramelbot.domain.dispatcher import DispatchDecision
from caramelbot.ports.inbound import SlashCommand
from caramelbot.ports.outbound import ChatPort, LLMPort, ResponseUrlPort, UserDirectoryPort

FALLBACK_REPLY = "Sorry, there was an error generating a response."
PLACEHOLDER_NAME = "there"


def _log(msg: str):
    print(msg, file=sys.stderr)


class ResponsePipeline:
    """Orchestrates one reply cycle per inbound request.

    Every upstream failure is absorbed here:
    - lookup failure -> placeholder name
    - generation failure or empty text -> FALLBACK_REPLY
    - delivery failure -> logged, never retried
    """

    def __init__(
        self,
        llm: LLMPort,
        directory: UserDirectoryPort,
        chat: ChatPort,
        responder: ResponseUrlPort,
    ):
        self.llm = llm
        self.directory = directory
        self.chat = chat
        self.responder = responder

    async def resolve_name(self, user_id: str) -> str:
        if not user_id:
            return PLACEHOLDER_NAME
        try:
            name = await self.directory.lookup_name(user_id)
        except Exception as e:
            _log(f"Error fetching user info: {e}")
            return PLACEHOLDER_NAME
        return name or PLACEHOLDER_NAME

    async def generate(self, prompt: str, user_name: str) -> str:
        try:
            text = await self.llm.generate(prompt, user_name)
        except Exception as e:
            _log(f"Error generating response: {e}")
            return FALLBACK_REPLY
        text = (text or "").strip()
        return text or FALLBACK_REPLY

    async def handle_event(self, decision: DispatchDecision) -> None:
        """Reply to an Events API message in its own channel."""
        if not decision.should_respond:
            return

        user_name = await self.resolve_name(decision.user_id)
        reply = await self.generate(decision.prompt or "", user_name)
        try:
            await self.chat.post_message(decision.channel, reply)
        except Exception as e:
            _log(f"Error sending response to Slack: {e}")
            return
        _log("Response sent to Slack")

    async def handle_slash_command(self, command: SlashCommand) -> None:
        """Reply via the response URL. Runs after the webhook was acknowledged."""
        if not command.response_url:
            _log(f"Slash command {command.display_command} has no response_url; ignoring")
            return

        prompt = f"{command.user_name} asks: {command.text}"
        try:
            await self.responder.respond(
                command.response_url,
                f"{command.display_command} {command.text}",
                response_type="in_channel",
            )
            reply = await self.generate(prompt, command.user_name)
            await self.responder.respond(
                command.response_url, reply, response_type="in_channel"
            )
            _log("Response sent via slash command")
        except Exception as e:
            _log(f"Error generating or sending slash command response: {e}")
            try:
                await self.responder.respond(
                    command.response_url, FALLBACK_REPLY, response_type="ephemeral"
                )
            except Exception as e2:
                _log(f"Error sending slash command fallback: {e2}")
