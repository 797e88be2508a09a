"""SQL repository for conversational agent state snapshots."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from qwery.domain.model.agent.state_snapshot import AgentStateSnapshot
from qwery.domain.ports.repositories.agent_state_repository import AgentStateRepository
from qwery.infrastructure.adapters.secondary.common.base_repository import handle_db_errors
from qwery.infrastructure.adapters.secondary.persistence.models import (
    AgentStateSnapshot as DBAgentStateSnapshot,
)

logger = logging.getLogger(__name__)


class SqlAgentStateRepository(AgentStateRepository):
    """Keeps exactly one snapshot row per conversation."""

    entity_name = "AgentStateSnapshot"

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @handle_db_errors("AgentStateSnapshot")
    async def save(self, snapshot: AgentStateSnapshot) -> None:
        existing = await self._session.get(DBAgentStateSnapshot, snapshot.conversation_id)
        if existing is None:
            self._session.add(
                DBAgentStateSnapshot(
                    conversation_id=snapshot.conversation_id,
                    phase=snapshot.phase,
                    context=dict(snapshot.context),
                    updated_at=snapshot.updated_at,
                )
            )
        else:
            existing.phase = snapshot.phase
            existing.context = dict(snapshot.context)
            existing.updated_at = snapshot.updated_at
        await self._session.commit()

    async def find_by_conversation_id(self, conversation_id: str) -> AgentStateSnapshot | None:
        stmt = select(DBAgentStateSnapshot).where(
            DBAgentStateSnapshot.conversation_id == conversation_id
        )
        result = await self._session.execute(stmt)
        row = result.scalar_one_or_none()
        if row is None:
            return None
        return AgentStateSnapshot(
            conversation_id=row.conversation_id,
            phase=row.phase,
            context=dict(row.context or {}),
            updated_at=row.updated_at,
        )

    async def delete(self, conversation_id: str) -> bool:
        stmt = delete(DBAgentStateSnapshot).where(
            DBAgentStateSnapshot.conversation_id == conversation_id
        )
        result = await self._session.execute(stmt)
        await self._session.commit()
        return (result.rowcount or 0) > 0
