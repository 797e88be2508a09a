import logging
from pathlib import Path

from qwery.application.services.agent.agent_factory import AgentFactory
from qwery.application.services.agent.agent_runner import AgentConstructor, AgentRunResult
from qwery.domain.llm_providers.llm_types import Message as LLMMessage
from qwery.domain.shared_kernel import utcnow
from qwery.infrastructure.agent.prompts import READ_DATA_AGENT_PROMPT
from qwery.infrastructure.agent.tools import SheetFetcher, WorkspaceDataTools, build_data_tools
from qwery.infrastructure.agent.ui_messages import UIMessage, to_llm_messages

logger = logging.getLogger(__name__)


class ReadDataAgent:
    """Tool-calling agent that imports Google Sheets and answers questions with SQL."""

    def __init__(
        self,
        conversation_id: str,
        factory: AgentFactory,
        workspace: str | Path | None = None,
        fetcher: SheetFetcher | None = None,
    ) -> None:
        self.conversation_id = conversation_id
        self.name = f"ReadDataAgent:{conversation_id}"
        self.data_tools = WorkspaceDataTools(conversation_id, workspace, fetcher)
        self._runner = factory.build_agent(
            AgentConstructor(
                name=self.name,
                system_prompt=READ_DATA_AGENT_PROMPT.format(date=utcnow().isoformat()),
                tools=build_data_tools(self.data_tools),
            )
        )

    def _build_messages(
        self, input_message: str, previous_messages: list[UIMessage] | None
    ) -> list[LLMMessage]:
        if not isinstance(input_message, str) or not input_message.strip():
            raise ValueError("inputMessage must be a non-empty string")
        history = to_llm_messages(previous_messages or [])
        if not history or history[-1].role != "user" or history[-1].content != input_message:
            history.append(LLMMessage.user(input_message))
        return history

    async def run(
        self, input_message: str, previous_messages: list[UIMessage] | None = None
    ) -> AgentRunResult:
        messages = self._build_messages(input_message, previous_messages)
        logger.info(f"[{self.name}] Running with {len(messages)} message(s)")
        result = await self._runner.run(messages)
        logger.info(f"[{self.name}] Finished after {len(result.results)} tool call(s)")
        return result
