"""
ZhipuAI LLM provider. OpenAI-compatible API with GLM models.
"""

from app.services.ai_providers.base import LiteLLMProvider


def _normalize_model(model: str) -> str:
    """Normalize ZhipuAI model to capitalized form (API is case-sensitive)."""
    if not model:
        return model
    lower = model.strip().lower()
    if lower.startswith("glm-"):
        return "GLM-" + lower[4:]
    return model.strip().upper()


class ZhipuAILLMProvider(LiteLLMProvider):
    PROVIDER = "zhipuai"
    MODEL_PREFIX = "openai"
    DEFAULT_MODEL = "glm-4-flash"
    DEFAULT_BASE_URL = "https://open.bigmodel.cn/api/paas/v4"

    def litellm_model(self) -> str:
        return f"{self.MODEL_PREFIX}/{_normalize_model(self._model)}"
