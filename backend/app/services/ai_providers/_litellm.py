"""
Internal helper for LiteLLM-based provider implementations.
Do not import from outside ai_providers package.
"""

from typing import Any, Dict, List, Optional


async def completion(
    model: str,
    messages: List[Dict[str, Any]],
    *,
    api_base: Optional[str] = None,
    api_key: Optional[str] = None,
    timeout: int = 300,
    temperature: Optional[float] = None,
    top_p: Optional[float] = None,
    max_tokens: Optional[int] = None,
    json_output: bool = False,
) -> str:
    """
    Run LiteLLM acompletion with the given model and messages.

    Args:
        model: LiteLLM model string (e.g. openai/gpt-4o, gemini/gemini-1.5-pro).
        messages: List of {"role": "user"|"system"|"assistant", "content": "..."}.
        api_base: Optional base URL for OpenAI-compatible endpoints.
        api_key: Optional API key, passed per request.
        timeout: Request timeout in seconds.
        temperature, top_p, max_tokens: Sampling controls; omitted when None.
        json_output: Request response_format={"type": "json_object"}.

    Returns:
        Content of the first choice ("" if the backend returned none).
    """
    import litellm

    kwargs: Dict[str, Any] = {
        "model": model,
        "messages": messages,
        "timeout": timeout,
    }
    if api_base:
        kwargs["api_base"] = api_base
    if api_key:
        kwargs["api_key"] = api_key
    if temperature is not None:
        kwargs["temperature"] = temperature
    if top_p is not None:
        kwargs["top_p"] = top_p
    if max_tokens is not None:
        kwargs["max_tokens"] = max_tokens
    if json_output:
        kwargs["response_format"] = {"type": "json_object"}

    response = await litellm.acompletion(**kwargs)
    return response.choices[0].message.content or ""
