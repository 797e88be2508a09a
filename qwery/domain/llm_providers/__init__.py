from qwery.domain.llm_providers.llm_types import (
    ChatResponse,
    LLMClient,
    LLMConfig,
    LLMRole,
    Message,
    RateLimitError,
)

__all__ = ["ChatResponse", "LLMClient", "LLMConfig", "LLMRole", "Message", "RateLimitError"]
