"""
Google Gemini LLM provider. Uses LiteLLM with gemini/ model prefix.
"""

from app.services.ai_providers.base import LiteLLMProvider


class GeminiLLMProvider(LiteLLMProvider):
    PROVIDER = "gemini"
    MODEL_PREFIX = "gemini"
    DEFAULT_MODEL = "gemini-1.5-pro"
