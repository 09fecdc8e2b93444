"""
Shared implementation for providers reached through LiteLLM.
"""

from typing import Any, Dict, Optional

from app.core.logging import get_logger
from app.services.ai_providers import _litellm

logger = get_logger()


class LiteLLMProvider:
    """
    Base class implementing the LLMProvider protocol over LiteLLM.

    Subclasses set PROVIDER, MODEL_PREFIX and DEFAULT_MODEL, and may override
    litellm_model() or DEFAULT_BASE_URL.
    """

    PROVIDER = ""
    MODEL_PREFIX = ""
    DEFAULT_MODEL = ""
    DEFAULT_BASE_URL: Optional[str] = None

    def __init__(self, config: Dict[str, Any]):
        self._config = config
        self._model = (config.get("model") or self.DEFAULT_MODEL).strip()
        self._api_key = config.get("api_key")
        self._base_url = (config.get("base_url") or self.DEFAULT_BASE_URL or "").strip() or None
        self._timeout = max(30, int(config.get("timeout") or 300))

    @property
    def model(self) -> str:
        return self._model

    def litellm_model(self) -> str:
        return f"{self.MODEL_PREFIX}/{self._model}"

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        *,
        timeout: Optional[int] = None,
        temperature: Optional[float] = None,
        top_p: Optional[float] = None,
        max_tokens: Optional[int] = None,
        json_output: bool = False,
    ) -> str:
        if not self._api_key:
            raise ValueError(f"No API key configured for provider: {self.PROVIDER}")
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})
        model = self.litellm_model()
        logger.debug("%s complete: model=%s json_output=%s", self.PROVIDER, model, json_output)
        return await _litellm.completion(
            model=model,
            messages=messages,
            api_base=self._base_url,
            api_key=self._api_key,
            timeout=timeout if timeout is not None else self._timeout,
            temperature=temperature,
            top_p=top_p,
            max_tokens=max_tokens,
            json_output=json_output,
        )
