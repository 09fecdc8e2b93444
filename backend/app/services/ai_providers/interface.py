"""
Common interface for all AI/LLM providers.

The assessment pipeline talks to the model only through this protocol, so the
backend (LiteLLM, a test double...) can be swapped at the composition root.
"""

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class LLMProvider(Protocol):
    """
    Generic LLM provider interface.

    Implementations are created from resolved config (provider, model, api_key,
    base_url, timeout) and expose a single completion method.
    """

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
        """
        Send a prompt to the model and return the text of the top completion.

        Args:
            prompt: User message / main prompt.
            system_prompt: Optional system message.
            timeout: Request timeout in seconds; implementation default if None.
            temperature: Sampling temperature; provider default if None.
            top_p: Nucleus sampling parameter; provider default if None.
            max_tokens: Upper bound on generated tokens.
            json_output: Ask the backend for a JSON object response.

        Raises:
            ValueError: If API key or required config is missing.
            Exception: On network or API errors.
        """
        ...
