"""
Database access for long-lived agents.

Agents outlive the request that created them, so they cannot hold a
request session. ``AgentStore`` opens a short session per operation and
runs the application services on top of the SQL repositories.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from qwery.application.services.agent.message_persistence_service import (
    MessagePersistenceService,
    UIMessage,
)
from qwery.application.services.agent.state_persistence_service import StatePersistenceService
from qwery.domain.model.agent.conversation import Conversation
from qwery.domain.model.agent.state_snapshot import AgentStateSnapshot
from qwery.infrastructure.adapters.secondary.persistence import (
    SqlAgentStateRepository,
    SqlConversationRepository,
    SqlMessageRepository,
)
from qwery.infrastructure.agent.actors import load_context

logger = logging.getLogger(__name__)


class AgentStore:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def find_conversation(self, slug: str) -> Conversation | None:
        async with self._session_factory() as session:
            return await SqlConversationRepository(session).find_by_slug(slug)

    async def load_messages(self, conversation_id: str) -> list[UIMessage]:
        async with self._session_factory() as session:
            return await load_context(SqlMessageRepository(session), conversation_id)

    async def persist_messages(
        self, conversation_slug: str, messages: list[UIMessage], created_by: str = "agent"
    ) -> dict[str, list[Exception]]:
        async with self._session_factory() as session:
            service = MessagePersistenceService(
                SqlMessageRepository(session),
                SqlConversationRepository(session),
                conversation_slug,
            )
            return await service.persist_messages(messages, created_by=created_by)

    async def persist_state(self, conversation_id: str, snapshot: AgentStateSnapshot) -> None:
        async with self._session_factory() as session:
            await StatePersistenceService(SqlAgentStateRepository(session)).persist_state(
                conversation_id, snapshot
            )

    async def load_persisted_state(self, conversation_id: str) -> AgentStateSnapshot | None:
        async with self._session_factory() as session:
            return await StatePersistenceService(
                SqlAgentStateRepository(session)
            ).load_persisted_state(conversation_id)
