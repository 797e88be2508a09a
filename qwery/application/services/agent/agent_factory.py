from collections.abc import Awaitable, Callable
from typing import Any

from qwery.application.services.agent.agent_runner import (
    DEFAULT_MAX_STEPS,
    AgentConstructor,
    AgentRunner,
)
from qwery.domain.llm_providers.llm_types import LLMClient
from qwery.domain.model.agent.tool import Tool


class AgentFactory:
    """Builds agent runners sharing one LLM client."""

    def __init__(self, llm: LLMClient, max_steps: int = DEFAULT_MAX_STEPS) -> None:
        self._llm = llm
        self._max_steps = max_steps

    def build_agent(self, constructor: AgentConstructor) -> AgentRunner:
        return AgentRunner(constructor, self._llm, max_steps=self._max_steps)

    def build_chat_agent(self, constructor: AgentConstructor) -> AgentRunner:
        # Chat agents share the runner; the constructor carries the chat prompt
        return self.build_agent(constructor)

    @staticmethod
    def create_tool(
        name: str,
        handler: Callable[..., Awaitable[Any]],
        description: str | None = None,
        parameters: dict[str, Any] | None = None,
    ) -> Tool:
        """Wrap ``handler`` as a Tool; usable on the class or an instance."""

        async def invoke(**kwargs: Any) -> Any:
            return await handler(**kwargs)

        tool = Tool(name=name, handler=invoke, description=description)
        if parameters is not None:
            tool.parameters = parameters
        return tool
