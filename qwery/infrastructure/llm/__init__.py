from qwery.infrastructure.llm.litellm_client import LiteLLMClient, create_litellm_client

__all__ = ["LiteLLMClient", "create_litellm_client"]
