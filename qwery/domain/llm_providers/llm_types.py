"""
LLM type definitions.

This module is the single LLM abstraction used by the agent layer. Concrete
clients (LiteLLM) live in ``qwery.infrastructure.llm``.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

DEFAULT_MAX_TOKENS = 4096


class LLMRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    TOOL = "tool"


@dataclass
class Message:
    """Chat message for LLM interactions."""

    role: str  # "system", "user", "assistant", "tool"
    content: str
    tool_calls: list[dict[str, Any]] | None = None
    tool_call_id: str | None = None
    name: str | None = None

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role=LLMRole.SYSTEM.value, content=content)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=LLMRole.USER.value, content=content)

    @classmethod
    def assistant(
        cls, content: str, tool_calls: list[dict[str, Any]] | None = None
    ) -> "Message":
        return cls(role=LLMRole.ASSISTANT.value, content=content, tool_calls=tool_calls)

    @classmethod
    def tool(cls, tool_call_id: str, name: str, content: str) -> "Message":
        return cls(
            role=LLMRole.TOOL.value,
            content=content,
            tool_call_id=tool_call_id,
            name=name,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.tool_calls:
            data["tool_calls"] = self.tool_calls
        if self.tool_call_id:
            data["tool_call_id"] = self.tool_call_id
        if self.name:
            data["name"] = self.name
        return data


@dataclass
class ChatResponse:
    """Response from LLM chat completion."""

    content: str
    role: str = LLMRole.ASSISTANT.value
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return self.content


@dataclass
class LLMConfig:
    """Configuration for LLM clients."""

    model: str
    api_key: str | None = None
    base_url: str | None = None
    temperature: float = 0.0
    max_tokens: int = DEFAULT_MAX_TOKENS
    max_retries: int = 2


class RateLimitError(Exception):
    """Exception raised when LLM rate limit is exceeded."""


class LLMClient(ABC):
    """
    Abstract base class for LLM clients.

    ``generate`` returns a dict with ``content``, ``tool_calls`` (a list of
    OpenAI-style tool call dicts) and ``finish_reason``.
    """

    def __init__(self, config: LLMConfig) -> None:
        self.config = config
        self.temperature = config.temperature

    @abstractmethod
    async def generate(
        self,
        messages: list[Message],
        tools: list[dict[str, Any]] | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Generate a non-streaming response with optional tool calling."""

    @abstractmethod
    def generate_stream(
        self,
        messages: list[Message],
        temperature: float | None = None,
        max_tokens: int | None = None,
        **kwargs: Any,
    ) -> AsyncIterator[str]:
        """Stream text deltas."""

    async def ainvoke(self, messages: list[Message] | str, **kwargs: Any) -> ChatResponse:
        """
        Simple chat completion.

        Args:
            messages: List of Message objects or a single string prompt
            **kwargs: Passed through to ``generate``

        Returns:
            ChatResponse containing the assistant's response
        """
        if isinstance(messages, str):
            messages = [Message.user(messages)]
        response = await self.generate(messages, **kwargs)
        return ChatResponse(content=response.get("content") or "")
