"""
Calls the configured generative model with the fixed grading parameters.
"""

from typing import Optional

from app.core.config import AIConfig
from app.core.exceptions import UpstreamError
from app.core.logging import get_logger
from app.services.ai_prompts import SYSTEM_PROMPT
from app.services.ai_providers import LLMProvider

logger = get_logger()


class ModelInvoker:
    """
    Thin wrapper around an LLMProvider that pins temperature, top_p, max_tokens
    and the JSON response format from AIConfig.
    """

    def __init__(self, llm: LLMProvider, ai_config: AIConfig):
        self.llm = llm
        self.ai_config = ai_config

    async def generate(self, prompt: str, system_prompt: Optional[str] = SYSTEM_PROMPT) -> str:
        """
        Send one grading prompt and return the raw completion text.

        Raises:
            UpstreamError: the provider failed or returned an empty completion.
        """
        cfg = self.ai_config
        timeout = max(30, int(cfg.timeout)) if cfg.timeout is not None else 300
        logger.debug(
            "AI prompt invocation: provider=%s, model=%s, prompt_length=%d, temperature=%s, top_p=%s, max_tokens=%s, timeout=%d",
            cfg.provider,
            cfg.model,
            len(prompt),
            cfg.temperature,
            cfg.top_p,
            cfg.max_tokens,
            timeout,
        )
        logger.debug("Prompt content:\n%s", prompt)
        try:
            response = await self.llm.complete(
                prompt,
                system_prompt=system_prompt,
                timeout=timeout,
                temperature=cfg.temperature,
                top_p=cfg.top_p,
                max_tokens=cfg.max_tokens,
                json_output=cfg.json_output,
            )
        except Exception as e:
            raise UpstreamError(f"Model call failed: {type(e).__name__}") from e

        if not response or not response.strip():
            raise UpstreamError("Model returned an empty response")
        logger.debug("AI response length=%d", len(response))
        return response
