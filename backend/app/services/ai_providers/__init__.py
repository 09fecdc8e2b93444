"""
LLM providers used by the model invoker. Each provider is a LiteLLMProvider
subclass selected by the `ai.provider` setting; tests substitute any object
satisfying the LLMProvider protocol.
"""

from .base import LiteLLMProvider
from .interface import LLMProvider
from .llm_factory import get_llm_provider, get_llm_provider_for_config, list_llm_provider_names

__all__ = [
    "LiteLLMProvider",
    "LLMProvider",
    "get_llm_provider",
    "get_llm_provider_for_config",
    "list_llm_provider_names",
]
