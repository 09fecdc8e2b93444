"""
Anthropic LLM provider (Claude models). Uses LiteLLM with anthropic/ model prefix.
"""

from app.services.ai_providers.base import LiteLLMProvider


class AnthropicLLMProvider(LiteLLMProvider):
    PROVIDER = "anthropic"
    MODEL_PREFIX = "anthropic"
    DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
