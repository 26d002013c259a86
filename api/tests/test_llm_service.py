# api/tests/test_llm_service.py
"""
Tests for llm_service.py - provider selection and request/response mapping.

HTTP and SDK calls are mocked; no API keys are needed.
"""

import os
import sys
from unittest.mock import MagicMock, patch

import openai
import requests

# Add api directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from services import llm_service
from services.llm_service import (
    AnthropicProvider,
    GroqProvider,
    LLMError,
    ProviderNotConfiguredError,
    get_provider,
    provider_status,
    require_provider,
)

MESSAGES = [
    {"role": "system", "content": "You are helpful."},
    {"role": "user", "content": "Explain John 3:16"},
]


def _groq_completion(content="For God so loved...", with_usage=True):
    completion = MagicMock()
    completion.choices = [MagicMock()]
    completion.choices[0].message.content = content
    if with_usage:
        completion.usage.prompt_tokens = 10
        completion.usage.completion_tokens = 20
        completion.usage.total_tokens = 30
    else:
        completion.usage = None
    return completion


def _anthropic_response(data):
    response = MagicMock()
    response.json.return_value = data
    return response


def test_groq_complete():
    print("\n=== Testing Groq provider ===")

    provider = GroqProvider(api_key="test-key")
    provider._client = MagicMock()
    provider._client.chat.completions.create.return_value = _groq_completion()

    response = provider.complete(MESSAGES, temperature=0.2)

    assert response.text == "For God so loved..."
    assert response.model == provider.default_model
    assert response.usage == {"prompt_tokens": 10, "completion_tokens": 20, "total_tokens": 30}
    kwargs = provider._client.chat.completions.create.call_args[1]
    assert kwargs["messages"] == MESSAGES
    assert kwargs["temperature"] == 0.2
    assert kwargs["max_tokens"] == llm_service.DEFAULT_MAX_TOKENS
    assert "top_p" not in kwargs
    print("✓ Request parameters and usage")

    provider._client.chat.completions.create.return_value = _groq_completion("ok", with_usage=False)
    assert provider.chat_completion(MESSAGES, model="other-model") == "ok"
    assert provider._client.chat.completions.create.call_args[1]["model"] == "other-model"
    print("✓ chat_completion returns text, model override")


def test_groq_errors():
    print("\n=== Testing Groq errors ===")

    provider = GroqProvider(api_key="test-key")
    provider._client = MagicMock()
    provider._client.chat.completions.create.side_effect = openai.OpenAIError("boom")
    try:
        provider.complete(MESSAGES)
        assert False, "Should have raised LLMError"
    except LLMError as e:
        assert "boom" in str(e)
    print("✓ SDK errors wrapped")

    provider._client.chat.completions.create.side_effect = None
    provider._client.chat.completions.create.return_value = MagicMock(choices=[])
    try:
        provider.complete(MESSAGES)
        assert False, "Should have raised LLMError"
    except LLMError:
        pass
    print("✓ Empty choices rejected")

    with patch.object(llm_service.config, "GROQ_API_KEY", None):
        try:
            GroqProvider().complete(MESSAGES)
            assert False, "Should have raised LLMError"
        except LLMError:
            pass
    print("✓ Unconfigured provider refuses")


def test_anthropic_complete():
    print("\n=== Testing Anthropic provider ===")

    data = {
        "content": [
            {"type": "text", "text": "Hello"},
            {"type": "tool_use", "id": "x"},
            {"type": "text", "text": " there"},
        ],
        "usage": {"input_tokens": 7, "output_tokens": 3},
    }
    provider = AnthropicProvider(api_key="test-key")

    with patch("services.llm_service.requests.post", return_value=_anthropic_response(data)) as post:
        response = provider.complete(MESSAGES + [{"role": "tool", "content": "dropped"}], top_p=0.9)

    assert response.text == "Hello there"
    assert response.usage == {"input_tokens": 7, "output_tokens": 3}
    payload = post.call_args[1]["json"]
    headers = post.call_args[1]["headers"]
    assert payload["system"] == "You are helpful."
    assert payload["messages"] == [{"role": "user", "content": "Explain John 3:16"}]
    assert payload["top_p"] == 0.9
    assert headers["x-api-key"] == "test-key"
    assert headers["anthropic-version"] == AnthropicProvider.ANTHROPIC_VERSION
    print("✓ System prompt lifted, non-chat roles dropped, text blocks joined")


def test_anthropic_errors():
    print("\n=== Testing Anthropic errors ===")

    provider = AnthropicProvider(api_key="test-key")

    with patch("services.llm_service.requests.post", side_effect=requests.Timeout("slow")):
        try:
            provider.complete(MESSAGES)
            assert False, "Should have raised LLMError"
        except LLMError as e:
            assert "timed out" in str(e)
    print("✓ Timeout")

    error_response = MagicMock()
    error_response.json.return_value = {"error": {"message": "invalid x-api-key"}}
    response = _anthropic_response({})
    response.raise_for_status.side_effect = requests.HTTPError(response=error_response)
    with patch("services.llm_service.requests.post", return_value=response):
        try:
            provider.complete(MESSAGES)
            assert False, "Should have raised LLMError"
        except LLMError as e:
            assert "invalid x-api-key" in str(e)
    print("✓ API error message surfaced")

    with patch("services.llm_service.requests.post", return_value=_anthropic_response({"content": []})):
        try:
            provider.complete(MESSAGES)
            assert False, "Should have raised LLMError"
        except LLMError:
            pass
    print("✓ Empty content rejected")


def test_provider_selection():
    print("\n=== Testing provider selection ===")

    with patch.object(llm_service.config, "GROQ_API_KEY", "g-key"), \
            patch.object(llm_service.config, "ANTHROPIC_API_KEY", None), \
            patch.object(llm_service, "_groq_instance", None), \
            patch.object(llm_service, "_anthropic_instance", None):
        assert isinstance(get_provider(), GroqProvider)
        assert isinstance(get_provider(" GROQ "), GroqProvider)
        assert get_provider("claude") is None
        assert provider_status() == {"groq": True, "claude": False}

        try:
            require_provider("claude")
            assert False, "Should have raised ProviderNotConfiguredError"
        except ProviderNotConfiguredError as e:
            assert e.provider == "claude"
    print("✓ Configured and unconfigured providers")

    try:
        get_provider("gpt")
        assert False, "Should have raised ValueError"
    except ValueError:
        pass
    print("✓ Unknown provider name")


def main():
    """Run all tests."""
    print("=" * 60)
    print("LLM Service Test Suite")
    print("=" * 60)

    test_groq_complete()
    test_groq_errors()
    test_anthropic_complete()
    test_anthropic_errors()
    test_provider_selection()

    print("\n" + "=" * 60)
    print("ALL TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    main()
