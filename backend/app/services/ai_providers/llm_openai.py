"""
OpenAI LLM provider (GPT models). Uses LiteLLM with openai/ model prefix.
"""

from app.services.ai_providers.base import LiteLLMProvider


class OpenAILLMProvider(LiteLLMProvider):
    """OpenAI provider; the default backend for grading."""

    PROVIDER = "openai"
    MODEL_PREFIX = "openai"
    DEFAULT_MODEL = "gpt-4o"
