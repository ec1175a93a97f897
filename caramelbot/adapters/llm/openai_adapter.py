"""OpenAI chat-completions adapter using aiohttp: implements LLMPort."""

from datetime import datetime
from typing import Optional

import aiohttp

from caramelbot.config import AppConfig
from caramelbot.domain.errors import UpstreamGenerationFailure
from caramelbot.domain.persona import build_system_prompt

OPENAI_API_BASE = "https://api.openai.com/v1"


class OpenAIAdapter:
    """Single-shot chat completion, no retries. Implements LLMPort protocol."""

    def __init__(self, config: AppConfig):
        self._api_key = config.openai_api_key
        self._model = config.openai_model
        self._max_tokens = config.openai_max_tokens
        self._timeout = aiohttp.ClientTimeout(total=config.openai_timeout_seconds)

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _payload(self, prompt: str, user_name: str) -> dict:
        return {
            "model": self._model,
            "messages": [
                {"role": "system", "content": build_system_prompt(user_name)},
                {"role": "user", "content": prompt},
            ],
            "max_tokens": self._max_tokens,
        }

    @staticmethod
    def _extract_text(data: dict) -> Optional[str]:
        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return None

    async def generate(self, prompt: str, user_name: str) -> str:
        print(f"[{datetime.now().isoformat()}] Requesting completion from {self._model}")
        url = f"{OPENAI_API_BASE}/chat/completions"
        headers = {"Authorization": f"Bearer {self._api_key}"}
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as session:
                async with session.post(
                    url, json=self._payload(prompt, user_name), headers=headers
                ) as resp:
                    data = await resp.json()
                    if resp.status != 200:
                        message = (data.get("error") or {}).get("message", str(data))
                        raise UpstreamGenerationFailure(f"HTTP {resp.status}: {message}")
        except UpstreamGenerationFailure:
            raise
        except Exception as e:
            raise UpstreamGenerationFailure(str(e)) from e

        text = self._extract_text(data)
        if not text or not text.strip():
            raise UpstreamGenerationFailure("Empty completion")
        print(f"[{datetime.now().isoformat()}] Completed")
        return text.strip()
