"""FastAPI application: Slack webhook routes and health check."""

import json
import sys
from typing import Optional

from fastapi import APIRouter, BackgroundTasks, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from caramelbot.adapters.llm import OpenAIAdapter
from caramelbot.adapters.slack import ResponseUrlClient, SlackWebAdapter
from caramelbot.config import AppConfig, __version__
from caramelbot.domain.auth import verify_slack_request
from caramelbot.domain.dispatcher import challenge_response, decide
from caramelbot.domain.errors import AuthenticationFailure
from caramelbot.domain.pipeline import ResponsePipeline
from caramelbot.ports.inbound import InboundRequest, SlackEvent, SlashCommand

HEALTH_TEXT = "CaramelBot server is running."

slack_router = APIRouter(prefix="/slack", tags=["Slack"])


def _log(msg: str):
    print(msg, file=sys.stderr)


def build_pipeline(config: AppConfig) -> ResponsePipeline:
    """Wire the production adapters into a pipeline."""
    slack = SlackWebAdapter(config.slack_bot_token)
    return ResponsePipeline(
        llm=OpenAIAdapter(config),
        directory=slack,
        chat=slack,
        responder=ResponseUrlClient(),
    )


def _authenticate(request: Request, inbound: InboundRequest) -> None:
    config: AppConfig = request.app.state.config
    if not verify_slack_request(
        inbound.headers,
        inbound.raw_body,
        inbound.fallback_body(),
        config.signing_secret,
    ):
        raise AuthenticationFailure(request.url.path)


@slack_router.post("/events")
async def slack_events(request: Request, background_tasks: BackgroundTasks):
    raw_body = await request.body()
    _authenticate(request, InboundRequest(headers=request.headers, raw_body=raw_body))

    try:
        body = json.loads(raw_body)
    except ValueError:
        return PlainTextResponse("Bad Request", status_code=400)
    if not isinstance(body, dict):
        return PlainTextResponse("Bad Request", status_code=400)
    _log(f"Received event from Slack: {json.dumps(body, indent=2)}")

    challenge = challenge_response(body)
    if challenge is not None:
        return JSONResponse(challenge)

    payload = body.get("event")
    if not isinstance(payload, dict):
        _log("Event ignored: no event payload")
        return Response(status_code=200)

    config: AppConfig = request.app.state.config
    decision = decide(SlackEvent.from_payload(payload), config.bot_user_id)
    if decision.should_respond:
        background_tasks.add_task(request.app.state.pipeline.handle_event, decision)
    return Response(status_code=200)


@slack_router.post("/commands")
async def slack_commands(request: Request, background_tasks: BackgroundTasks):
    raw_body = await request.body()
    _authenticate(request, InboundRequest(headers=request.headers, raw_body=raw_body))

    command = SlashCommand.from_form(raw_body)
    # Acknowledge now; everything else goes to the response URL
    background_tasks.add_task(request.app.state.pipeline.handle_slash_command, command)
    return Response(status_code=200)


async def _unauthorized(request: Request, exc: AuthenticationFailure):
    _log(f"Unauthorized request received: {exc}")
    return PlainTextResponse("Unauthorized", status_code=401)


def create_app(
    config: Optional[AppConfig] = None,
    pipeline: Optional[ResponsePipeline] = None,
) -> FastAPI:
    """Build the ASGI app. Tests pass their own config and pipeline."""
    config = config or AppConfig.from_env()
    app = FastAPI(title="CaramelBot", version=__version__)
    app.state.config = config
    app.state.pipeline = pipeline or build_pipeline(config)
    app.add_exception_handler(AuthenticationFailure, _unauthorized)
    app.include_router(slack_router)

    @app.get("/health", response_class=PlainTextResponse)
    async def health():
        return HEALTH_TEXT

    return app
