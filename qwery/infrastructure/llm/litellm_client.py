"""
LiteLLM Client Adapter.

Implements the ``LLMClient`` port with LiteLLM, giving the agent layer one
interface over Azure, OpenAI, Anthropic, Ollama and the other providers
LiteLLM supports. The provider is selected by the ``LLM_MODEL`` prefix
(``azure/gpt-5-mini``, ``openai/gpt-4o-mini`` ...).
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from qwery.configuration.config import get_settings
from qwery.domain.llm_providers.llm_types import (
    LLMClient,
    LLMConfig,
    Message,
    RateLimitError,
)

logger = logging.getLogger(__name__)

_RATE_LIMIT_MARKERS = ("rate limit", "quota", "throttling", "request denied", "429")


def _get_attr(obj: Any, key: str, default: Any = None) -> Any:
    if isinstance(obj, dict):
        return obj.get(key, default)
    return getattr(obj, key, default)


class LiteLLMClient(LLMClient):
    """
    LiteLLM-based implementation of LLMClient.

    Usage:
        client = LiteLLMClient(LLMConfig(model="azure/gpt-5-mini", api_key="..."))
        reply = await client.generate([Message.user("Hello")])
    """

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        # Passed per request rather than through env vars
        self._api_key = config.api_key
        self._api_base = config.base_url

    def _build_completion_kwargs(
        self,
        messages: list[dict[str, Any]],
        temperature: float | None = None,
        max_tokens: int | None = None,
        **extra: Any,
    ) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "model": self.config.model,
            "messages": messages,
            "max_tokens": max_tokens or self.config.max_tokens,
            "temperature": self.temperature if temperature is None else temperature,
            "num_retries": self.config.max_retries,
            **extra,
        }
        if self._api_key:
            kwargs["api_key"] = self._api_key
        if self._api_base:
            kwargs["api_base"] = self._api_base
        return kwargs

    @staticmethod
    def _convert_message(m: Message | dict[str, Any]) -> dict[str, Any]:
        """Convert a message to LiteLLM dict format, preserving tool-related fields."""
        if isinstance(m, dict):
            msg: dict[str, Any] = {"role": m.get("role", "user"), "content": m.get("content", "")}
            for key in ("tool_calls", "tool_call_id", "name"):
                if key in m:
                    msg[key] = m[key]
            return msg
        return m.to_dict()

    @staticmethod
    def _normalize_tool_calls(tool_calls: Any) -> list[dict[str, Any]]:
        normalized = []
        for tc in tool_calls or []:
            function = _get_attr(tc, "function", {})
            normalized.append(
                {
                    "id": _get_attr(tc, "id", ""),
                    "type": "function",
                    "function": {
                        "name": _get_attr(function, "name", ""),
                        "arguments": _get_attr(function, "arguments", "") or "{}",
                    },
                }
            )
        return normalized

    @staticmethod
    def _raise_if_rate_limited(e: Exception) -> None:
        error_message = str(e).lower()
        if any(kw in error_message for kw in _RATE_LIMIT_MARKERS):
            raise RateLimitError(f"Rate limit error: {e}") from e

    async def generate(
        self,
        messages: list[Message],
        tools: list[dict[str, Any]] | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """
        Generate a non-streaming response with optional tool calling support.

        Returns:
            Dict with content, tool_calls, and finish_reason
        """
        import litellm

        completion_kwargs = self._build_completion_kwargs(
            [self._convert_message(m) for m in messages],
            temperature=temperature,
            max_tokens=max_tokens,
            stream=False,
            **kwargs,
        )
        if tools:
            completion_kwargs["tools"] = tools

        try:
            response = await litellm.acompletion(**completion_kwargs)
        except Exception as e:
            self._raise_if_rate_limited(e)
            logger.error(f"LiteLLM completion error: {e}")
            raise

        if not response.choices:
            raise ValueError("No choices in response")

        choice = response.choices[0]
        message = _get_attr(choice, "message", {})
        result: dict[str, Any] = {
            "content": _get_attr(message, "content", "") or "",
            "tool_calls": self._normalize_tool_calls(_get_attr(message, "tool_calls", None)),
            "finish_reason": _get_attr(choice, "finish_reason", None),
        }
        usage = getattr(response, "usage", None)
        if usage:
            result["usage"] = {
                "input_tokens": getattr(usage, "prompt_tokens", 0) or 0,
                "output_tokens": getattr(usage, "completion_tokens", 0) or 0,
                "total_tokens": getattr(usage, "total_tokens", 0) or 0,
            }
        return result

    async def generate_stream(
        self,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any,
    ) -> AsyncIterator[str]:
        """Yield the text deltas of a streamed completion."""
        import litellm

        completion_kwargs = self._build_completion_kwargs(
            [self._convert_message(m) for m in messages],
            temperature=temperature,
            max_tokens=max_tokens,
            stream=True,
            **kwargs,
        )
        try:
            response = await litellm.acompletion(**completion_kwargs)
            async for chunk in response:
                if not chunk.choices:
                    continue
                delta = _get_attr(chunk.choices[0], "delta", None)
                text = _get_attr(delta, "content", None)
                if text:
                    yield text
        except Exception as e:
            self._raise_if_rate_limited(e)
            logger.error(f"LiteLLM streaming error: {e}")
            raise


def create_litellm_client(config: LLMConfig | None = None) -> LiteLLMClient:
    """Build a client from explicit config, or from the ``LLM_*`` settings."""
    if config is None:
        settings = get_settings()
        config = LLMConfig(
            model=settings.llm_model,
            api_key=settings.llm_api_key,
            base_url=settings.llm_api_base,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            max_retries=settings.llm_max_retries,
        )
    return LiteLLMClient(config)
