"""
Factory for the generic LLM provider. Builds the implementation from config.
"""

from typing import Any, Dict, Optional, Union

from app.core.config import AIConfig, get_config
from app.services.ai_providers.interface import LLMProvider
from app.services.ai_providers.llm_anthropic import AnthropicLLMProvider
from app.services.ai_providers.llm_gemini import GeminiLLMProvider
from app.services.ai_providers.llm_openai import OpenAILLMProvider
from app.services.ai_providers.llm_zhipuai import ZhipuAILLMProvider

_LLM_PROVIDER_MAP = {
    "openai": OpenAILLMProvider,
    "anthropic": AnthropicLLMProvider,
    "google": GeminiLLMProvider,
    "gemini": GeminiLLMProvider,
    "zhipuai": ZhipuAILLMProvider,
    "zhipu": ZhipuAILLMProvider,
}


def get_llm_provider_for_config(config: Union[AIConfig, Dict[str, Any]]) -> LLMProvider:
    """
    Return an LLM provider instance for the given config.
    Config must include: provider, model, base_url (optional), api_key (optional), timeout (optional).
    """
    if isinstance(config, AIConfig):
        config = config.model_dump()
    provider = (config.get("provider") or "openai").strip().lower()
    cls = _LLM_PROVIDER_MAP.get(provider)
    if not cls:
        raise ValueError(
            f"Unknown AI provider: {provider}. "
            f"Available: {', '.join(sorted(_LLM_PROVIDER_MAP.keys()))}"
        )
    return cls(config)


def get_llm_provider(config: Optional[AIConfig] = None) -> LLMProvider:
    """Return the provider configured in the application's `ai` section."""
    return get_llm_provider_for_config(config or get_config().ai)


def list_llm_provider_names() -> list[str]:
    """Return list of registered LLM provider names (unique, sorted)."""
    return sorted(set(_LLM_PROVIDER_MAP.keys()))
