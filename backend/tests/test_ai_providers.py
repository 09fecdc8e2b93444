"""
Tests for AI provider implementations (generic LLM interface).
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from app.core.config import AIConfig
from app.services.ai_providers import (
    LLMProvider,
    get_llm_provider_for_config,
    list_llm_provider_names,
)
from app.services.ai_providers import _litellm
from app.services.ai_providers.llm_anthropic import AnthropicLLMProvider
from app.services.ai_providers.llm_gemini import GeminiLLMProvider
from app.services.ai_providers.llm_openai import OpenAILLMProvider
from app.services.ai_providers.llm_zhipuai import ZhipuAILLMProvider, _normalize_model


class TestLLMProviderFactory:
    """Tests for LLM provider factory."""

    def test_get_openai_provider_from_ai_config(self):
        provider = get_llm_provider_for_config(AIConfig(api_key="test_key"))
        assert isinstance(provider, OpenAILLMProvider)
        assert provider.model == "gpt-4o"
        assert isinstance(provider, LLMProvider)

    def test_get_zhipuai_provider(self):
        provider = get_llm_provider_for_config({
            "provider": "zhipuai",
            "model": "glm-4.7",
            "api_key": "test_key",
        })
        assert isinstance(provider, ZhipuAILLMProvider)

    def test_get_gemini_provider(self):
        provider = get_llm_provider_for_config({
            "provider": "gemini",
            "model": "gemini-1.5-pro",
            "api_key": "test_key",
        })
        assert isinstance(provider, GeminiLLMProvider)

    def test_get_anthropic_provider(self):
        provider = get_llm_provider_for_config({"provider": "Anthropic", "api_key": "k"})
        assert isinstance(provider, AnthropicLLMProvider)
        assert provider.litellm_model().startswith("anthropic/")

    def test_get_unknown_provider_raises(self):
        with pytest.raises(ValueError, match="Unknown AI provider"):
            get_llm_provider_for_config({"provider": "unknown", "api_key": "x"})

    def test_list_llm_provider_names(self):
        names = list_llm_provider_names()
        assert "zhipuai" in names
        assert "openai" in names
        assert "gemini" in names
        assert names == sorted(names)


class TestZhipuAIModelNormalization:
    """Tests for ZhipuAI model name normalization."""

    def test_glm_47_to_GLM_47(self):
        assert _normalize_model("glm-4.7") == "GLM-4.7"

    def test_glm_4_flash(self):
        assert _normalize_model("glm-4-flash") == "GLM-4-flash"


class TestLiteLLMProviderComplete:
    """Tests for complete() on LiteLLM-backed providers."""

    @pytest.mark.asyncio
    async def test_complete_calls_litellm_with_correct_params(self):
        config = {
            "provider": "zhipuai",
            "model": "glm-4.7",
            "base_url": "https://open.bigmodel.cn/api/paas/v4",
            "api_key": "test_key",
            "timeout": 300,
        }
        provider = ZhipuAILLMProvider(config)
        with patch("app.services.ai_providers._litellm.completion", new_callable=AsyncMock) as mock_completion:
            mock_completion.return_value = "Hello from ZhipuAI"
            result = await provider.complete("Hello", system_prompt="You are helpful.")
        assert result == "Hello from ZhipuAI"
        mock_completion.assert_called_once()
        call_kw = mock_completion.call_args.kwargs
        assert call_kw["model"] == "openai/GLM-4.7"
        assert call_kw["api_base"] == "https://open.bigmodel.cn/api/paas/v4"
        assert call_kw["api_key"] == "test_key"
        assert call_kw["messages"] == [
            {"role": "system", "content": "You are helpful."},
            {"role": "user", "content": "Hello"},
        ]

    @pytest.mark.asyncio
    async def test_complete_forwards_sampling_parameters(self):
        provider = OpenAILLMProvider({"api_key": "test_key"})
        with patch("app.services.ai_providers._litellm.completion", new_callable=AsyncMock) as mock_completion:
            mock_completion.return_value = "{}"
            await provider.complete(
                "Grade", temperature=0.1, top_p=0.4, max_tokens=1000, json_output=True, timeout=60
            )
        call_kw = mock_completion.call_args.kwargs
        assert call_kw["model"] == "openai/gpt-4o"
        assert call_kw["api_base"] is None
        assert call_kw["temperature"] == 0.1
        assert call_kw["top_p"] == 0.4
        assert call_kw["max_tokens"] == 1000
        assert call_kw["json_output"] is True
        assert call_kw["timeout"] == 60
        assert call_kw["messages"] == [{"role": "user", "content": "Grade"}]

    @pytest.mark.asyncio
    async def test_complete_raises_without_api_key(self):
        provider = ZhipuAILLMProvider({"provider": "zhipuai", "model": "glm-4-flash"})
        with pytest.raises(ValueError, match="No API key"):
            await provider.complete("Hi")


class TestLiteLLMCompletion:
    """Tests for the litellm.acompletion call itself."""

    @pytest.mark.asyncio
    async def test_json_output_sets_response_format(self):
        response = MagicMock()
        response.choices = [MagicMock()]
        response.choices[0].message.content = '{"globalGrade": 9}'
        with patch("litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
            mock_acompletion.return_value = response
            text = await _litellm.completion(
                "openai/gpt-4o",
                [{"role": "user", "content": "x"}],
                api_key="k",
                temperature=0.1,
                top_p=0.4,
                max_tokens=1000,
                json_output=True,
            )
        assert text == '{"globalGrade": 9}'
        kwargs = mock_acompletion.call_args.kwargs
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["top_p"] == 0.4
        assert "api_base" not in kwargs

    @pytest.mark.asyncio
    async def test_unset_parameters_are_omitted(self):
        response = MagicMock()
        response.choices = [MagicMock()]
        response.choices[0].message.content = None
        with patch("litellm.acompletion", new_callable=AsyncMock) as mock_acompletion:
            mock_acompletion.return_value = response
            text = await _litellm.completion("openai/gpt-4o", [{"role": "user", "content": "x"}])
        assert text == ""
        kwargs = mock_acompletion.call_args.kwargs
        for key in ("temperature", "top_p", "max_tokens", "response_format", "api_key"):
            assert key not in kwargs
