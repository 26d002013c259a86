# api/services/llm_service.py
"""
LLM Provider Abstraction Layer

Unified interface over the two chat-completion backends used by the study
features and the chat endpoint.

Provider Architecture:
    - Groq ("groq"): default, fast and free tier. OpenAI-compatible API,
      called through the openai SDK pointed at Groq's base URL
    - Anthropic ("claude"): premium. Messages API called with requests

Usage:
    from services.llm_service import get_provider

    provider = get_provider("groq")
    if provider:
        reply = provider.chat_completion(
            messages=[{"role": "user", "content": "Explain John 3:16"}],
            temperature=0.7,
        )

        # With token usage
        response = provider.complete(messages)
        print(response.model, response.usage)
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

import openai
import requests

from core import config

logger = logging.getLogger(__name__)


PROVIDER_GROQ = "groq"
PROVIDER_CLAUDE = "claude"
PROVIDERS = (PROVIDER_GROQ, PROVIDER_CLAUDE)

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 2000


class LLMError(RuntimeError):
    """Raised when a provider request fails or returns an unusable reply."""
    pass


class ProviderNotConfiguredError(LLMError):
    """Raised when a known provider has no API key configured."""

    def __init__(self, name: str):
        self.provider = name
        super().__init__(f"Provider {name!r} is not configured")


@dataclass
class LLMResponse:
    """
    Assistant reply plus the metadata the chat endpoint passes through.

    Attributes:
        text: Assistant message content
        model: Model that produced it
        usage: Provider token-usage dict (shape differs per provider)
    """
    text: str
    model: str
    usage: Dict[str, Any] = field(default_factory=dict)


class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    name: str = ""
    default_model: str = ""

    @abstractmethod
    def complete(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        **kwargs: Any,
    ) -> LLMResponse:
        """
        Send a chat completion request.

        Args:
            messages: List of message dicts with 'role' and 'content' keys.
            model: Model identifier (provider-specific). Uses default if None.
            **kwargs: temperature, max_tokens, top_p, timeout

        Returns:
            LLMResponse

        Raises:
            LLMError: On any request failure
        """
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Return True if this provider is properly configured."""
        pass

    def chat_completion(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        **kwargs: Any,
    ) -> str:
        """Send a chat completion request and return the assistant's response text."""
        return self.complete(messages, model=model, **kwargs).text


class GroqProvider(LLMProvider):
    """
    Groq API provider implementation.

    Groq's API is OpenAI-compatible, so the openai SDK is used with
    Groq's base URL.
    """

    name = PROVIDER_GROQ
    default_model = config.GROQ_MODEL

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self._api_key = api_key or config.GROQ_API_KEY
        self._base_url = base_url or config.GROQ_BASE_URL
        self._client = None

    def _get_client(self):
        if self._client is None:
            self._client = openai.OpenAI(
                api_key=self._api_key,
                base_url=self._base_url,
                timeout=config.LLM_TIMEOUT,
            )
        return self._client

    def is_configured(self) -> bool:
        return bool(self._api_key)

    def complete(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        **kwargs: Any,
    ) -> LLMResponse:
        if not self.is_configured():
            raise LLMError("Groq API key not configured (GROQ_API_KEY)")

        client = self._get_client()
        model = model or self.default_model

        params = {
            "temperature": kwargs.get("temperature", DEFAULT_TEMPERATURE),
            "max_tokens": kwargs.get("max_tokens", DEFAULT_MAX_TOKENS),
        }
        if "top_p" in kwargs:
            params["top_p"] = kwargs["top_p"]

        try:
            completion = client.chat.completions.create(
                model=model,
                messages=messages,
                **params,
            )
        except openai.APITimeoutError:
            raise LLMError(f"Groq request timed out after {config.LLM_TIMEOUT}s")
        except openai.APIStatusError as e:
            raise LLMError(f"Groq API error ({e.status_code}): {e.message}")
        except openai.OpenAIError as e:
            raise LLMError(f"Groq request failed: {e}")

        if not completion.choices:
            raise LLMError("Groq returned no choices in response")

        usage = {}
        if completion.usage is not None:
            usage = {
                "prompt_tokens": completion.usage.prompt_tokens,
                "completion_tokens": completion.usage.completion_tokens,
                "total_tokens": completion.usage.total_tokens,
            }

        return LLMResponse(
            text=completion.choices[0].message.content or "",
            model=model,
            usage=usage,
        )


class AnthropicProvider(LLMProvider):
    """
    Claude via the Anthropic Messages API.

    System messages are merged into the top-level "system" field, only
    user/assistant turns are sent, and the reply is the concatenation of
    its text content blocks.
    """

    ANTHROPIC_API_URL = "https://api.anthropic.com/v1/messages"
    ANTHROPIC_VERSION = "2023-06-01"

    name = PROVIDER_CLAUDE
    default_model = config.ANTHROPIC_MODEL

    def __init__(self, api_key: Optional[str] = None):
        self._api_key = api_key or config.ANTHROPIC_API_KEY

    def is_configured(self) -> bool:
        return bool(self._api_key)

    def complete(
        self,
        messages: List[Dict[str, str]],
        model: Optional[str] = None,
        **kwargs: Any,
    ) -> LLMResponse:
        if not self.is_configured():
            raise LLMError("Anthropic API key not configured (ANTHROPIC_API_KEY)")

        model = model or self.default_model

        system_parts = [m.get("content", "") for m in messages if m.get("role") == "system"]
        system_prompt = "\n\n".join(p for p in system_parts if p)
        chat_messages = [
            {"role": m["role"], "content": m.get("content", "")}
            for m in messages
            if m.get("role") in ("user", "assistant")
        ]

        payload = {
            "model": model,
            "messages": chat_messages,
            "max_tokens": kwargs.get("max_tokens", DEFAULT_MAX_TOKENS),
            "temperature": kwargs.get("temperature", DEFAULT_TEMPERATURE),
        }
        if system_prompt:
            payload["system"] = system_prompt
        if "top_p" in kwargs:
            payload["top_p"] = kwargs["top_p"]

        headers = {
            "x-api-key": self._api_key,
            "anthropic-version": self.ANTHROPIC_VERSION,
            "Content-Type": "application/json",
        }

        timeout = kwargs.get("timeout", config.LLM_TIMEOUT)

        try:
            response = requests.post(
                self.ANTHROPIC_API_URL,
                json=payload,
                headers=headers,
                timeout=timeout,
            )
            response.raise_for_status()
            data = response.json()

        except requests.Timeout:
            raise LLMError(f"Anthropic request timed out after {timeout}s")
        except requests.HTTPError as e:
            try:
                error_msg = e.response.json().get("error", {}).get("message", str(e))
            except ValueError:
                error_msg = str(e)
            raise LLMError(f"Anthropic API error: {error_msg}")
        except requests.RequestException as e:
            raise LLMError(f"Anthropic request failed: {e}")
        except ValueError as e:
            raise LLMError(f"Anthropic returned malformed JSON: {e}")

        content_blocks = data.get("content", [])
        if not content_blocks:
            raise LLMError("Anthropic returned no content in response")

        text_parts = [
            block.get("text", "")
            for block in content_blocks
            if block.get("type") == "text"
        ]

        return LLMResponse(
            text="".join(text_parts),
            model=model,
            usage=data.get("usage", {}),
        )


# ---------------------------------------------------------------------------
# Singleton getters
# ---------------------------------------------------------------------------

_groq_instance: Optional[GroqProvider] = None
_anthropic_instance: Optional[AnthropicProvider] = None


def get_groq_client() -> Optional[GroqProvider]:
    """Get the Groq provider instance, or None if GROQ_API_KEY is not set."""
    global _groq_instance

    if _groq_instance is None:
        provider = GroqProvider()
        if provider.is_configured():
            _groq_instance = provider

    return _groq_instance


def get_anthropic_client() -> Optional[AnthropicProvider]:
    """Get the Anthropic provider instance, or None if ANTHROPIC_API_KEY is not set."""
    global _anthropic_instance

    if _anthropic_instance is None:
        provider = AnthropicProvider()
        if provider.is_configured():
            _anthropic_instance = provider

    return _anthropic_instance


def get_provider(name: Optional[str] = None) -> Optional[LLMProvider]:
    """
    Get a configured provider by public name.

    Args:
        name: "groq" (default) or "claude"

    Returns:
        Provider instance, or None if it is not configured

    Raises:
        ValueError: If the name is not a known provider
    """
    name = (name or PROVIDER_GROQ).strip().lower()
    if name == PROVIDER_GROQ:
        return get_groq_client()
    if name == PROVIDER_CLAUDE:
        return get_anthropic_client()
    raise ValueError(f"Unknown provider: {name!r} (expected one of {', '.join(PROVIDERS)})")


def provider_status() -> Dict[str, bool]:
    """Which providers have credentials configured."""
    return {
        PROVIDER_GROQ: GroqProvider().is_configured(),
        PROVIDER_CLAUDE: AnthropicProvider().is_configured(),
    }


def require_provider(name: Optional[str] = None) -> LLMProvider:
    """
    Like get_provider(), but raises instead of returning None.

    Raises:
        ValueError: If the name is not a known provider
        ProviderNotConfiguredError: If the provider has no API key
    """
    provider = get_provider(name)
    if provider is None:
        raise ProviderNotConfiguredError((name or PROVIDER_GROQ).strip().lower())
    return provider
