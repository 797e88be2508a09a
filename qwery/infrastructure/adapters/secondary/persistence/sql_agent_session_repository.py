"""SQLAlchemy implementation of AgentSessionRepository."""

import logging

from qwery.domain.model.agent.agent_session import AgentSession
from qwery.domain.ports.repositories.agent_session_repository import AgentSessionRepository
from qwery.infrastructure.adapters.secondary.common.base_repository import BaseRepository
from qwery.infrastructure.adapters.secondary.persistence.models import (
    AgentSession as DBAgentSession,
)

logger = logging.getLogger(__name__)


class SqlAgentSessionRepository(
    BaseRepository[AgentSession, DBAgentSession], AgentSessionRepository
):
    _model_class = DBAgentSession
    _entity_name = "AgentSession"
    _default_order_column = "id"

    def _to_domain(self, db_session: DBAgentSession | None) -> AgentSession | None:
        if db_session is None:
            return None
        return AgentSession(
            id=db_session.id,
            agent_id=db_session.agent_id,
            fsm_id=db_session.fsm_id,
            phase=db_session.phase,
            task_id=db_session.task_id,
            retry_count=db_session.retry_count,
            metadata=dict(db_session.meta or {}),
        )

    def _to_db(self, domain_entity: AgentSession) -> DBAgentSession:
        return DBAgentSession(
            id=domain_entity.id,
            agent_id=domain_entity.agent_id,
            fsm_id=domain_entity.fsm_id,
            phase=domain_entity.phase,
            task_id=domain_entity.task_id,
            retry_count=domain_entity.retry_count,
            meta=dict(domain_entity.metadata),
        )
