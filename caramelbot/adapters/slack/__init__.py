"""Slack adapters."""

from caramelbot.adapters.slack.response_url import RESPONSE_TYPES, ResponseUrlClient
from caramelbot.adapters.slack.web_api import SlackWebAdapter

__all__ = ["RESPONSE_TYPES", "ResponseUrlClient", "SlackWebAdapter"]
