"""
Actors invoked by the conversational state machine.

Every actor except ``detect_intent`` and ``load_context`` resolves to an
async iterator of text chunks, the ``stream_result`` of the machine.
"""

import json
import logging
import re
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

from qwery.application.services.agent.agent_factory import AgentFactory
from qwery.application.services.agent.agent_runner import AgentConstructor
from qwery.application.services.agent.message_persistence_service import (
    MessagePersistenceService,
)
from qwery.domain.llm_providers.llm_types import LLMClient
from qwery.domain.ports.repositories.message_repository import MessageRepository
from qwery.infrastructure.agent.prompts import (
    DETECT_INTENT_PROMPT,
    GREETING_PROMPT,
    SUMMARIZE_INTENT_PROMPT,
)
from qwery.infrastructure.agent.read_data_agent import ReadDataAgent
from qwery.infrastructure.agent.tools import SheetFetcher
from qwery.infrastructure.agent.ui_messages import UIMessage, format_history

logger = logging.getLogger(__name__)

INTENTS = ("greeting", "read-data", "other")
COMPLEXITIES = ("simple", "medium", "complex")
DEFAULT_INTENT = {"intent": "other", "complexity": "simple"}

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


async def _single_chunk(text: str) -> AsyncIterator[str]:
    if text:
        yield text


def parse_intent(raw: str) -> dict[str, str]:
    """Parse the classifier reply; unknown or malformed values fall back to ``other``."""
    match = _JSON_OBJECT.search(raw or "")
    if not match:
        logger.warning(f"Intent reply is not JSON: {raw!r}")
        return dict(DEFAULT_INTENT)
    try:
        data: dict[str, Any] = json.loads(match.group(0))
    except json.JSONDecodeError:
        logger.warning(f"Intent reply is not valid JSON: {raw!r}")
        return dict(DEFAULT_INTENT)
    intent = data.get("intent")
    complexity = data.get("complexity")
    return {
        "intent": intent if intent in INTENTS else "other",
        "complexity": complexity if complexity in COMPLEXITIES else "simple",
    }


async def load_context(
    message_repository: MessageRepository, conversation_id: str
) -> list[UIMessage]:
    messages = await message_repository.find_by_conversation_id(conversation_id)
    return MessagePersistenceService.convert_to_ui_messages(messages)


async def detect_intent(llm: LLMClient, input_message: str) -> dict[str, str]:
    response = await llm.ainvoke(DETECT_INTENT_PROMPT.format(message=input_message))
    return parse_intent(response.content)


async def greeting(factory: AgentFactory, input_message: str) -> AsyncIterator[str]:
    agent = factory.build_chat_agent(
        AgentConstructor(
            name="greeting", system_prompt=GREETING_PROMPT.format(message=input_message)
        )
    )
    return agent.stream(input_message)


async def summarize_intent(
    factory: AgentFactory,
    input_message: str,
    intent: dict[str, str],
    previous_messages: list[UIMessage],
) -> AsyncIterator[str]:
    prompt = SUMMARIZE_INTENT_PROMPT.format(
        intent=intent.get("intent", "other"),
        complexity=intent.get("complexity", "simple"),
        history=format_history(previous_messages[:-1]),
        message=input_message,
    )
    agent = factory.build_chat_agent(
        AgentConstructor(name="summarize-intent", system_prompt=prompt)
    )
    return agent.stream(input_message)


async def read_data(
    factory: AgentFactory,
    conversation_id: str,
    input_message: str,
    previous_messages: list[UIMessage],
    workspace: str | Path | None = None,
    fetcher: SheetFetcher | None = None,
) -> AsyncIterator[str]:
    """Run the read-data agent to completion and stream its final answer."""
    agent = ReadDataAgent(conversation_id, factory, workspace=workspace, fetcher=fetcher)
    result = await agent.run(input_message, previous_messages)
    return _single_chunk(result.text)
