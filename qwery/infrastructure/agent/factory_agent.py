import asyncio
import logging
import uuid
from collections.abc import AsyncIterator
from functools import partial
from pathlib import Path

from qwery.application.services.agent.agent_factory import AgentFactory
from qwery.application.services.agent.agent_runner import DEFAULT_MAX_STEPS
from qwery.domain.exceptions.code import Code
from qwery.domain.llm_providers.llm_types import LLMClient
from qwery.domain.model.agent.conversation import Conversation
from qwery.domain.shared_kernel import DomainException
from qwery.infrastructure.agent import actors
from qwery.infrastructure.agent.agent_store import AgentStore
from qwery.infrastructure.agent.state_machine import (
    FINISH_STREAM,
    STOP,
    STREAMING,
    USER_INPUT,
    ConversationActors,
    ConversationStateMachine,
)
from qwery.infrastructure.agent.tools import SheetFetcher
from qwery.infrastructure.agent.ui_messages import UIMessage

logger = logging.getLogger(__name__)


class AgentResponseError(Exception):
    """The agent could not produce a response for the last user input."""


class FactoryAgent:
    """
    Conversational agent bound to one conversation.

    ``respond`` drives the state machine from USER_INPUT to streaming,
    yields the reply, persists the exchange and sends FINISH_STREAM.
    """

    def __init__(
        self,
        conversation: Conversation,
        machine: ConversationStateMachine,
        store: AgentStore,
    ) -> None:
        self.conversation = conversation
        self.machine = machine
        self._store = store
        self._lock = asyncio.Lock()

    @property
    def conversation_slug(self) -> str:
        return self.conversation.slug

    @classmethod
    async def create(
        cls,
        conversation_slug: str,
        store: AgentStore,
        llm: LLMClient,
        workspace: str | Path | None = None,
        max_steps: int = DEFAULT_MAX_STEPS,
        fetcher: SheetFetcher | None = None,
    ) -> "FactoryAgent":
        conversation = await store.find_conversation(conversation_slug)
        if conversation is None:
            raise DomainException.new(
                Code.CONVERSATION_NOT_FOUND_ERROR,
                override_message=f"Conversation with slug '{conversation_slug}' not found",
                data={"conversation_slug": conversation_slug},
            )

        factory = AgentFactory(llm, max_steps=max_steps)
        conversation_actors = ConversationActors(
            load_context=store.load_messages,
            detect_intent=partial(actors.detect_intent, llm),
            greeting=partial(actors.greeting, factory),
            summarize_intent=partial(actors.summarize_intent, factory),
            read_data=partial(
                actors.read_data,
                factory,
                conversation.id,
                workspace=workspace,
                fetcher=fetcher,
            ),
        )
        machine = ConversationStateMachine(conversation.id, conversation_actors, store)
        await machine.start()
        logger.info(f"[FactoryAgent:{conversation.id}] created for slug {conversation_slug}")
        return cls(conversation, machine, store)

    async def respond(self, messages: list[UIMessage]) -> AsyncIterator[str]:
        async with self._lock:
            await self.machine.send(USER_INPUT, messages)
            if self.machine.phase != STREAMING or self.machine.context.stream_result is None:
                raise AgentResponseError(self.machine.context.error or "Agent produced no response")

            chunks: list[str] = []
            try:
                async for chunk in self.machine.context.stream_result:
                    chunks.append(chunk)
                    yield chunk
            except Exception as e:
                await self.machine.fail(e)
                raise AgentResponseError(str(e)) from e

            assistant_message = {
                "id": str(uuid.uuid4()),
                "role": "assistant",
                "metadata": {},
                "parts": [{"type": "text", "text": "".join(chunks)}],
            }
            user_outcome = await self._store.persist_messages(
                self.conversation_slug,
                [m for m in messages if m.get("role") == "user"],
                created_by=self.conversation.created_by or "user",
            )
            agent_outcome = await self._store.persist_messages(
                self.conversation_slug, [assistant_message]
            )
            for error in [*user_outcome["errors"], *agent_outcome["errors"]]:
                logger.warning(f"[FactoryAgent:{self.conversation.id}] message not saved: {error}")
            await self.machine.send(FINISH_STREAM)

    async def stop(self) -> None:
        await self.machine.send(STOP)
