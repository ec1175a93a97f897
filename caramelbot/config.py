"""Configuration: loaded once from the environment at startup."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


@dataclass(frozen=True)
class AppConfig:
    """Read-only process configuration, passed explicitly to the core."""

    signing_secret: str = ""
    slack_bot_token: str = ""
    bot_user_id: str = ""
    openai_api_key: str = ""
    openai_model: str = "gpt-4o"
    openai_max_tokens: int = 4048
    openai_timeout_seconds: int = 60
    port: int = 3002

    # Fields the relay cannot work without
    REQUIRED = ("signing_secret", "slack_bot_token", "bot_user_id", "openai_api_key")

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            signing_secret=os.getenv("SLACK_SIGNING_SECRET", ""),
            slack_bot_token=os.getenv("SLACK_BOT_TOKEN", ""),
            bot_user_id=os.getenv("BOT_USER_ID", ""),
            openai_api_key=os.getenv("OPENAI_API_KEY", ""),
            openai_model=os.getenv("OPENAI_MODEL", "").strip() or "gpt-4o",
            openai_max_tokens=_env_int("OPENAI_MAX_TOKENS", 4048),
            openai_timeout_seconds=_env_int("OPENAI_TIMEOUT_SECONDS", 60),
            port=_env_int("PORT", 3002),
        )

    def missing(self) -> List[str]:
        """Names of required settings that are empty."""
        return [name for name in self.REQUIRED if not getattr(self, name)]
