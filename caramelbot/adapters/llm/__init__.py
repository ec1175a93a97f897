"""LLM adapters."""

from caramelbot.adapters.llm.openai_adapter import OPENAI_API_BASE, OpenAIAdapter

__all__ = ["OPENAI_API_BASE", "OpenAIAdapter"]
