"""Tool-calling agent loop.

The runner implements the act/observe cycle against the ``LLMClient`` port:

1. Send the system prompt, the conversation and the tool schemas.
2. Execute every tool call the model requested and feed the results back.
3. Repeat until the model answers without tool calls or ``max_steps`` is hit.
"""

import json
import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Any

from qwery.domain.llm_providers.llm_types import LLMClient, Message
from qwery.domain.model.agent.state_machine import AgentResult
from qwery.domain.model.agent.tool import Tool

logger = logging.getLogger(__name__)

DEFAULT_MAX_STEPS = 10


@dataclass
class AgentConstructor:
    """What an agent is made of: a name, its instructions and its tools."""

    name: str
    system_prompt: str
    tools: list[Tool] = field(default_factory=list)
    max_steps: int | None = None
    temperature: float | None = None


@dataclass
class AgentRunResult:
    text: str
    results: list[AgentResult] = field(default_factory=list)
    messages: list[Message] = field(default_factory=list)


def _serialize_tool_output(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, default=str)


class AgentRunner:
    def __init__(
        self,
        constructor: AgentConstructor,
        llm: LLMClient,
        max_steps: int = DEFAULT_MAX_STEPS,
    ) -> None:
        self.name = constructor.name
        self.system_prompt = constructor.system_prompt
        self.tools = {t.name: t for t in constructor.tools}
        self.temperature = constructor.temperature
        self.max_steps = constructor.max_steps or max_steps
        self._llm = llm

    def _initial_messages(self, messages: list[Message] | str) -> list[Message]:
        if isinstance(messages, str):
            messages = [Message.user(messages)]
        return [Message.system(self.system_prompt), *messages]

    async def _execute_tool_call(self, tool_call: dict[str, Any]) -> AgentResult:
        function = tool_call.get("function") or {}
        tool_name = function.get("name", "")
        tool_call_id = tool_call.get("id", "")

        tool = self.tools.get(tool_name)
        if tool is None:
            return AgentResult(
                tool_call_id=tool_call_id,
                tool_name=tool_name,
                result=None,
                error=f"Unknown tool: {tool_name}",
            )

        raw_arguments = function.get("arguments") or "{}"
        try:
            arguments = json.loads(raw_arguments) if isinstance(raw_arguments, str) else raw_arguments
        except json.JSONDecodeError:
            logger.warning(f"[{self.name}] Failed to parse tool arguments: {raw_arguments}")
            return AgentResult(
                tool_call_id=tool_call_id,
                tool_name=tool_name,
                result=None,
                error=f"Invalid JSON arguments for {tool_name}",
            )

        try:
            result = await tool.invoke(**(arguments or {}))
        except Exception as e:
            logger.warning(f"[{self.name}] Tool {tool_name} failed: {e}")
            return AgentResult(
                tool_call_id=tool_call_id, tool_name=tool_name, result=None, error=str(e)
            )
        return AgentResult(tool_call_id=tool_call_id, tool_name=tool_name, result=result)

    async def run(self, messages: list[Message] | str) -> AgentRunResult:
        history = self._initial_messages(messages)
        tool_schemas = [t.to_openai_schema() for t in self.tools.values()] or None
        results: list[AgentResult] = []

        for step in range(self.max_steps):
            response = await self._llm.generate(
                history, tools=tool_schemas, temperature=self.temperature
            )
            content = response.get("content") or ""
            tool_calls = response.get("tool_calls") or []

            if not tool_calls:
                history.append(Message.assistant(content))
                return AgentRunResult(text=content, results=results, messages=history)

            logger.debug(f"[{self.name}] step {step + 1}: {len(tool_calls)} tool call(s)")
            history.append(Message.assistant(content, tool_calls=tool_calls))
            for tool_call in tool_calls:
                outcome = await self._execute_tool_call(tool_call)
                results.append(outcome)
                payload = (
                    {"error": outcome.error} if outcome.error is not None else outcome.result
                )
                history.append(
                    Message.tool(
                        tool_call_id=outcome.tool_call_id,
                        name=outcome.tool_name,
                        content=_serialize_tool_output(payload),
                    )
                )

        logger.warning(f"[{self.name}] stopped after reaching max_steps={self.max_steps}")
        last_text = next(
            (m.content for m in reversed(history) if m.role == "assistant" and m.content),
            "",
        )
        return AgentRunResult(text=last_text, results=results, messages=history)

    async def stream(self, messages: list[Message] | str) -> AsyncIterator[str]:
        """
        Yield the reply as text chunks.

        Without tools the completion is streamed token by token. With tools
        the loop runs to completion first and the final answer is yielded.
        """
        if not self.tools:
            async for chunk in self._llm.generate_stream(
                self._initial_messages(messages), temperature=self.temperature
            ):
                yield chunk
            return

        result = await self.run(messages)
        if result.text:
            yield result.text
