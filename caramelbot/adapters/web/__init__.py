"""Web adapter: FastAPI app and Slack routes."""

from caramelbot.adapters.web.server import HEALTH_TEXT, build_pipeline, create_app

__all__ = ["HEALTH_TEXT", "build_pipeline", "create_app"]
